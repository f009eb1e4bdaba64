"""CLI entry point for annotated-swagger."""

import json
import logging
from pathlib import Path

import click
import yaml

from annotated_swagger.config import ConfigurationError, load_options
from annotated_swagger.generator.document import generate_swagger_document
from annotated_swagger.swagger.deprecated import find_deprecated


def _dump(document: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False, default=str) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """Annotated Swagger — build Swagger 2.0 documents from JSDoc-style comments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the Swagger document.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def generate(config_path: Path, output: Path, fmt: str):
    """Generate a Swagger document from the files listed in CONFIG_PATH."""
    try:
        options = load_options(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Scanning {options.basedir} for {', '.join(options.files)}...")
    document = generate_swagger_document(options)
    click.echo(f"Documented {len(document['paths'])} paths and {len(document['definitions'])} definitions.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_dump(document, fmt), encoding="utf-8")
    click.echo(f"Swagger document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(doc_path: Path):
    """List deprecated singular property names in a Swagger document."""
    try:
        document = yaml.safe_load(doc_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise click.ClickException(f"Cannot parse {doc_path}: {e}") from e

    problems = find_deprecated([document], allow_flags=True)
    if not problems:
        click.echo("No deprecated properties found.")
        return

    for key in problems:
        click.echo(f"  deprecated property: {key}")
    click.echo(f"Found {len(problems)} deprecated properties.")
    raise SystemExit(1)
