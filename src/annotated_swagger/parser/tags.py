"""Translators from single comment tags to Swagger fragments.

Each translator handles one tag kind and returns plain dicts shaped like
the Swagger 2.0 objects they describe.
"""

import json
import logging
import re
from enum import Enum
from typing import NamedTuple

from .base import CommentTag
from .types import resolve_schema, resolve_type

logger = logging.getLogger(__name__)

EXAMPLE_MARKER_RE = re.compile(r"-\s*eg:\s*")

# Default location for a param without one. Legacy behavior: this reuses the
# HTTP method default and is not a valid parameter location.
DEFAULT_PARAM_LOCATION = "get"


class TagKind(str, Enum):
    """Every comment tag title the formatter knows how to translate."""

    ROUTE = "route"
    GROUP = "group"
    PARAM = "param"
    RETURNS = "returns"
    RETURN = "return"
    HEADERS = "headers"
    HEADER = "header"
    SECURITY = "security"
    PRODUCES = "produces"
    CONSUMES = "consumes"
    DEPRECATED = "deprecated"
    SUMMARY = "summary"
    OPERATION_ID = "operationId"
    TYPEDEF = "typedef"
    PROPERTY = "property"

    @classmethod
    def parse(cls, title: str) -> "TagKind | None":
        try:
            return cls(title)
        except ValueError:
            return None


RETURN_KINDS = (TagKind.RETURNS, TagKind.RETURN)
HEADER_KINDS = (TagKind.HEADERS, TagKind.HEADER)


class Route(NamedTuple):
    method: str
    uri: str


def parse_route(text: str | None) -> Route:
    """Parse ``"GET /pets"`` into a route; method defaults to get."""
    parts = (text or "").split()
    method = parts[0].lower() if parts else ""
    uri = parts[1] if len(parts) > 1 else ""
    return Route(method=method or "get", uri=uri)


def parse_field(text: str | None) -> dict:
    """Parse ``"id.path.required"`` into name, location and required flag."""
    parts = (text or "").split(".")
    return {
        "name": parts[0],
        "parameter_type": parts[1] if len(parts) > 1 and parts[1] else DEFAULT_PARAM_LOCATION,
        "required": len(parts) > 2 and parts[2] == "required",
    }


def parse_enum(text: str | None) -> dict:
    """Parse the ``- eg: type:a,b,c`` tail of a description into an enum.

    Without a type prefix the values are strings. Without the marker there
    is nothing to enumerate and only the type is returned.
    """
    parts = EXAMPLE_MARKER_RE.split(text or "", maxsplit=1)
    if len(parts) < 2 or not parts[1].strip():
        return {"type": "string"}
    spec = parts[1].strip()
    if ":" in spec:
        enum_type, values = spec.split(":", 1)
    else:
        enum_type, values = "string", spec
    return {
        "type": enum_type.strip() or "string",
        "enum": [value.strip() for value in values.split(",")],
    }


def parse_param(tag: CommentTag) -> dict:
    """Build a parameter object; a resolvable schema wins over a bare type."""
    field = parse_field(tag.name)
    if field["parameter_type"] == DEFAULT_PARAM_LOCATION:
        logger.warning("Parameter %r has no location, defaulting to %r", field["name"], DEFAULT_PARAM_LOCATION)

    param = {
        "name": field["name"],
        "in": field["parameter_type"],
    }
    if tag.description is not None:
        param["description"] = tag.description
    param["required"] = field["required"]

    schema = resolve_schema(tag.type)
    if schema is not None:
        param["schema"] = schema
        return param

    param["type"] = resolve_type(tag.type)
    if param["type"] == "enum":
        parsed = parse_enum(tag.description)
        param["type"] = parsed["type"]
        if "enum" in parsed:
            param["enum"] = parsed["enum"]
    return param


def parse_headers(tags: list[CommentTag]) -> dict[str, dict]:
    """Collect response headers declared in a comment block, keyed by status code.

    A header tag reads ``{type} code.Name - description``: the first word is
    the header type and the first digit run the status code. The pass stops
    at the first malformed header tag.
    """
    headers: dict[str, dict] = {}
    for tag in tags:
        if TagKind.parse(tag.title) not in HEADER_KINDS:
            continue
        parts = re.split(r"\s+-\s+", tag.description or "")
        code_to_name = parts[0].split(".")
        if len(code_to_name) < 2:
            break
        header_type = re.search(r"\w+", code_to_name[0])
        code = re.search(r"\d+", code_to_name[0])
        if not header_type or not code:
            break
        header = {"type": header_type.group(0)}
        if len(parts) > 1:
            header["description"] = parts[1]
        headers.setdefault(code.group(0).strip(), {})[code_to_name[1]] = header
    return headers


def parse_return(tag: CommentTag, headers: dict[str, dict]) -> tuple[str, dict]:
    """Build one ``(status code, response object)`` pair from a returns tag."""
    parts = (tag.description or "").split("-", 1)
    code = parts[0].strip()
    response = {"description": parts[1].strip() if len(parts) > 1 else ""}
    if code in headers:
        response["headers"] = headers[code]
    if tag.type is not None:
        schema = resolve_schema(tag.type)
        if schema is not None:
            response["schema"] = schema
    return code, response


def parse_security(text: str | None) -> list:
    """Security requirements: a JSON literal or a bare scheme name."""
    text = text or ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return [{text: []}]


def parse_media_types(text: str | None) -> list[str]:
    return (text or "").split()


def parse_group(tags: list[CommentTag]) -> tuple[str, str]:
    """Grouping tag name and description from the block's ``@group`` tag."""
    for tag in tags:
        if TagKind.parse(tag.title) is TagKind.GROUP:
            parts = (tag.description or "").split("-", 1)
            name = parts[0].strip()
            description = parts[1].strip() if len(parts) > 1 else ""
            return name or "default", description
    return "default", ""
