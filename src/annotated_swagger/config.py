"""Options for building a Swagger document from annotated sources."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigurationError(ValueError):
    """Raised when mandatory options are missing or malformed."""


class RouteOptions(BaseModel):
    """Where a consumer exposes the document and its UI."""

    url: str = "/api-docs"
    docs: str = "/api-docs.json"


class SwaggerOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    swagger_definition: dict = Field(alias="swaggerDefinition")
    files: list[str]
    basedir: Path
    route: RouteOptions = RouteOptions()


def build_options(data: dict | None) -> SwaggerOptions:
    """Validate a raw options mapping, failing fast on the first missing key."""
    if data is None:
        raise ConfigurationError("'options' is required.")
    for key in ("swaggerDefinition", "files", "basedir"):
        if data.get(key) is None:
            raise ConfigurationError(f"'{key}' is required.")
    try:
        return SwaggerOptions.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def load_options(file_path: Path) -> SwaggerOptions:
    """Load options from a YAML or JSON file.

    A relative ``basedir`` is resolved against the file's directory.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {file_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path} does not contain an options mapping")

    options = build_options(data)
    if not options.basedir.is_absolute():
        options.basedir = (file_path.parent / options.basedir).resolve()
    return options
