"""Format parsed comment blocks into path, tag and definition fragments."""

import logging

from pydantic import BaseModel

from .base import CommentBlock, CommentTag
from .tags import (
    HEADER_KINDS,
    RETURN_KINDS,
    Route,
    TagKind,
    parse_group,
    parse_headers,
    parse_media_types,
    parse_param,
    parse_return,
    parse_route,
    parse_security,
)
from .typedef import parse_typedef

logger = logging.getLogger(__name__)


class FormattedBlock(BaseModel):
    """Swagger fragments produced by one comment block."""

    paths: dict[str, dict] = {}
    tags: list[dict] = []
    definitions: dict[str, dict] = {}

    def to_fragment(self) -> dict:
        return {"paths": self.paths, "tags": self.tags, "definitions": self.definitions}


class _Operation:
    """Accumulates the fields of one operation until the next route tag."""

    def __init__(self, route: Route, group: str, description: str):
        self.route = route
        self.fields: dict = {"parameters": []}
        if description:
            self.fields["description"] = description
        self.fields["tags"] = [group]
        self.responses: dict[str, dict] = {}

    def add(self, kind: TagKind, tag: CommentTag, headers: dict[str, dict]) -> None:
        if kind is TagKind.PARAM:
            self.fields["parameters"].append(parse_param(tag))
        elif kind in RETURN_KINDS:
            code, response = parse_return(tag, headers)
            self.responses[code] = response
        elif kind is TagKind.SUMMARY:
            self.fields["summary"] = tag.description
        elif kind is TagKind.OPERATION_ID:
            self.fields["operationId"] = tag.description
        elif kind is TagKind.PRODUCES:
            self.fields["produces"] = parse_media_types(tag.description)
        elif kind is TagKind.CONSUMES:
            self.fields["consumes"] = parse_media_types(tag.description)
        elif kind is TagKind.SECURITY:
            self.fields["security"] = parse_security(tag.description)
        elif kind is TagKind.DEPRECATED:
            self.fields["deprecated"] = True
        else:
            raise ValueError(f"@{tag.title} cannot be attached to an operation")

    def finalize(self) -> dict:
        return {**self.fields, "responses": self.responses}


# Tags read once per block rather than per operation
BLOCK_LEVEL_KINDS = (TagKind.GROUP, *HEADER_KINDS)


def format_block(block: CommentBlock) -> FormattedBlock:
    """Translate one comment block into Swagger fragments.

    A block starting with ``@typedef`` yields a single definition. Any other
    block is read tag by tag: each ``@route`` opens a new operation and the
    operation tags that follow it belong to that operation.
    """
    result = FormattedBlock()
    tags = block.tags
    if not tags:
        return result

    if TagKind.parse(tags[0].title) is TagKind.TYPEDEF:
        name, definition = parse_typedef(tags)
        result.definitions[name] = definition
        return result

    description = block.description.replace("/**", "").strip()
    group_name, group_description = parse_group(tags)
    headers = parse_headers(tags)

    operations: list[_Operation] = []
    current: _Operation | None = None
    for tag in tags:
        kind = TagKind.parse(tag.title)
        if kind is None:
            logger.warning("Unknown tag @%s ignored", tag.title)
        elif kind is TagKind.ROUTE:
            current = _Operation(parse_route(tag.description), group_name, description)
            operations.append(current)
            result.tags.append({"name": group_name, "description": group_description})
        elif kind in BLOCK_LEVEL_KINDS:
            continue
        elif kind in (TagKind.TYPEDEF, TagKind.PROPERTY):
            logger.warning("@%s is only valid at the start of a typedef block, ignored", tag.title)
        elif current is None:
            logger.warning("@%s appears before any @route, ignored", tag.title)
        else:
            current.add(kind, tag, headers)

    for operation in operations:
        uri, method = operation.route.uri, operation.route.method
        methods = result.paths.setdefault(uri, {})
        methods[method] = {**methods.get(method, {}), **operation.finalize()}
    return result
