"""Build a Swagger document from the annotated source files of a project."""

import logging
from pathlib import Path

from annotated_swagger.config import SwaggerOptions
from annotated_swagger.parser.comments import parse_file
from annotated_swagger.parser.formatter import format_block
from annotated_swagger.swagger.aggregate import add_data, init_document
from annotated_swagger.swagger.deprecated import find_deprecated

logger = logging.getLogger(__name__)


def convert_glob_paths(basedir: Path, patterns: list[str]) -> list[Path]:
    """Expand glob patterns (or plain paths) relative to basedir."""
    files: list[Path] = []
    for pattern in patterns:
        if Path(pattern).is_absolute():
            anchor = Path(Path(pattern).anchor)
            matches = anchor.glob(str(Path(pattern).relative_to(anchor)))
        else:
            matches = basedir.glob(pattern)
        for path in sorted(matches):
            if path.is_file() and path.resolve() not in files:
                files.append(path.resolve())
    return files


def generate_swagger_document(options: SwaggerOptions) -> dict:
    """Parse every matched file and fold its comment blocks into one document.

    A comment block that fails to translate is logged and skipped; the
    remaining blocks and files are still processed.
    """
    for key in find_deprecated([options.swagger_definition]):
        logger.warning("Deprecated property %r in swaggerDefinition", key)

    document = init_document(options.swagger_definition)
    api_files = convert_glob_paths(options.basedir, options.files)
    logger.info("Found %d files to document", len(api_files))

    for file_path in api_files:
        blocks = [block for block in parse_file(file_path) if block.tags]
        logger.debug("%s: %d tagged comment blocks", file_path, len(blocks))
        for block in blocks:
            try:
                formatted = format_block(block)
                add_data(document, [formatted.to_fragment()])
            except Exception:
                logger.exception(
                    "Incorrect comment format. Method was not documented.\nFile: %s\nComment:\n%s",
                    file_path,
                    block.source,
                )
    return document
