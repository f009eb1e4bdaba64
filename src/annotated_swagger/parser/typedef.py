"""Translate ``@typedef`` blocks and their ``@property`` tags into definitions."""

import logging

from .base import CommentTag
from .tags import EXAMPLE_MARKER_RE, TagKind, parse_enum
from .types import PRIMITIVE_ITEM_TYPES, definition_ref, resolve_items, resolve_schema, resolve_type

logger = logging.getLogger(__name__)


def parse_typedef(tags: list[CommentTag]) -> tuple[str, dict]:
    """Build a definition from a typedef tag followed by property tags.

    Returns ``(definition name, definition object)``.
    """
    head = tags[0]
    if not head.name:
        raise ValueError("typedef without a name")

    details: dict = {"required": [], "properties": {}}
    base = _base_type(head)
    if base:
        details["allOf"] = [definition_ref(base)]

    for tag in tags[1:]:
        kind = TagKind.parse(tag.title)
        if kind is not TagKind.PROPERTY:
            logger.debug("Skipping @%s inside typedef %s", tag.title, head.name)
            continue
        if not tag.name:
            raise ValueError(f"property without a name in typedef {head.name}")

        prop_name, *modifiers = tag.name.split(".")
        if "required" in modifiers:
            details["required"].append(prop_name)
        details["properties"][prop_name] = _parse_property(tag, read_only="readOnly" in modifiers)

    return head.name, details


def _base_type(head: CommentTag) -> str | None:
    if head.type is None or not head.type.name:
        return None
    base = resolve_type(head.type)
    if base.lower() in PRIMITIVE_ITEM_TYPES:
        return None
    return base


def _parse_property(tag: CommentTag, read_only: bool) -> dict:
    schema = resolve_schema(tag.type)
    if schema is not None:
        return schema

    prop_type = resolve_type(tag.type)
    parts = EXAMPLE_MARKER_RE.split(tag.description or "", maxsplit=1)
    description = parts[0].strip()
    example = parts[1].strip() if len(parts) > 1 else None

    prop: dict = {"type": prop_type, "description": description}
    items = resolve_items(tag.type)
    if items is not None:
        prop["items"] = items
    if read_only:
        prop["readOnly"] = True

    if prop_type == "enum":
        parsed = parse_enum(f"-eg:{example}" if example else None)
        prop["type"] = parsed["type"]
        if "enum" in parsed:
            prop["enum"] = parsed["enum"]
    elif example:
        prop["example"] = _coerce_example(prop_type, example)
    return prop


def _coerce_example(prop_type: str, example: str):
    if prop_type == "boolean":
        return example == "true"
    if prop_type == "integer":
        try:
            return int(example)
        except ValueError:
            try:
                return float(example)
            except ValueError:
                return example
    return example
