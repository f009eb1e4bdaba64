"""Merge per-block Swagger fragments into one running document."""

import copy
from enum import Enum


class FragmentKind(Enum):
    """How a top-level fragment property is merged into the document."""

    MAP = "map"  # keyed objects, first write per key wins
    LIST = "list"  # plain value lists, unseen values appended
    TAGS = "tags"  # tag objects, deduplicated by name
    PATHS = "paths"  # path items, merged per uri and method


# Singular spellings are deprecated aliases of the plural property.
FRAGMENT_PROPERTIES = {
    "definitions": FragmentKind.MAP,
    "parameters": FragmentKind.MAP,
    "responses": FragmentKind.MAP,
    "securityDefinitions": FragmentKind.MAP,
    "schemas": FragmentKind.MAP,
    "consumes": FragmentKind.LIST,
    "produces": FragmentKind.LIST,
    "schemes": FragmentKind.LIST,
    "tags": FragmentKind.TAGS,
    "paths": FragmentKind.PATHS,
}

SINGULAR_ALIASES = {name[:-1]: name for name in FRAGMENT_PROPERTIES}


def plural_key(property_name: str) -> str:
    """Correct a deprecated singular property name to its plural form."""
    return SINGULAR_ALIASES.get(property_name, property_name)


def init_document(seed: dict) -> dict:
    """Create a Swagger 2.0 document from caller-supplied defaults."""
    document = copy.deepcopy(seed)
    document["swagger"] = "2.0"
    document.setdefault("paths", {})
    document.setdefault("responses", {})
    document.setdefault("parameters", {})
    document.setdefault("securityDefinitions", {})
    document.setdefault("tags", [])
    document.setdefault("definitions", {})
    return document


def add_data(document: dict, fragments: list[dict]) -> dict:
    """Fold fragments into the document in order and return the document."""
    if document is None or fragments is None:
        raise ValueError("document and fragments are required")

    for fragment in fragments:
        for property_name, value in fragment.items():
            key = plural_key(property_name)
            kind = FRAGMENT_PROPERTIES.get(key)
            if kind is None:
                raise ValueError(f"Unsupported fragment property: {property_name}")
            MERGERS[kind](document, key, value)
    return document


def _merge_map(document: dict, key: str, value: dict) -> None:
    target = document.setdefault(key, {})
    for name, item in value.items():
        target.setdefault(name, item)


def _merge_list(document: dict, key: str, value) -> None:
    target = document.setdefault(key, [])
    for item in value if isinstance(value, list) else [value]:
        if item not in target:
            target.append(item)


def has_tag(tags: list[dict], tag: dict) -> bool:
    return any(existing.get("name") == tag.get("name") for existing in tags)


def _merge_tags(document: dict, key: str, value) -> None:
    target = document.setdefault(key, [])
    for tag in value if isinstance(value, list) else [value]:
        if tag and not has_tag(target, tag):
            target.append(tag)


def _merge_paths(document: dict, key: str, value: dict) -> None:
    paths = document.setdefault(key, {})
    for uri, methods in value.items():
        merged = dict(paths.get(uri, {}))
        for method, operation in methods.items():
            existing = merged.get(method)
            if isinstance(existing, dict) and isinstance(operation, dict):
                merged[method] = {**existing, **operation}
            else:
                merged[method] = operation
        paths[uri] = merged


MERGERS = {
    FragmentKind.MAP: _merge_map,
    FragmentKind.LIST: _merge_list,
    FragmentKind.TAGS: _merge_tags,
    FragmentKind.PATHS: _merge_paths,
}
