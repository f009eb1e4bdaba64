"""Resolve annotated type expressions into Swagger type tokens and schemas."""

from .base import TypeExpr

MODEL_SUFFIX = "model"
DEFINITIONS_PREFIX = "#/definitions/"

# Element types that stay inline instead of becoming a $ref
PRIMITIVE_ITEM_TYPES = ("object", "string", "integer", "boolean")

# Swagger 2.0 type keywords, used to normalize ``{Integer}`` to ``integer``
SWAGGER_TYPES = ("string", "number", "integer", "boolean", "array", "object", "file")


def definition_ref(name: str) -> dict:
    return {"$ref": f"{DEFINITIONS_PREFIX}{name}"}


def model_name(name: str) -> str | None:
    """Return ``Pet`` for ``Pet.model``, None for names without the suffix."""
    parts = name.split(".")
    if len(parts) > 1 and parts[1] == MODEL_SUFFIX:
        return parts[0]
    return None


def resolve_type(expr: TypeExpr | None) -> str:
    """Map a type expression to a bare Swagger type token.

    ``Pet.model`` resolves to ``Pet`` so callers can build a $ref from it;
    applied types resolve to their lower-cased container (``array``).
    """
    if expr is None:
        return "string"
    if expr.name:
        model = model_name(expr.name)
        if model:
            return model
        if expr.name.lower() in SWAGGER_TYPES:
            return expr.name.lower()
        return expr.name
    if expr.expression is not None and expr.expression.name:
        return expr.expression.name.lower()
    return "string"


def resolve_schema(expr: TypeExpr | None) -> dict | None:
    """Map a type expression to a schema, or None when only a bare type applies."""
    if expr is None:
        return None
    if expr.name is not None:
        model = model_name(expr.name)
        return definition_ref(model) if model else None
    if not expr.is_applied or not expr.applications:
        return None

    container = resolve_type(expr)
    if len(expr.applications) == 1:
        return {"type": container, "items": _item_shape(expr.applications[0])}
    return {
        "type": container,
        "items": {"oneOf": [_item_shape(arg) for arg in expr.applications]},
    }


def resolve_items(expr: TypeExpr | None) -> dict | None:
    """Items shape for a simple property: the first type argument, never wrapped."""
    if expr is None or not expr.applications:
        return None
    first = expr.applications[0]
    if not first.name:
        return None
    return _item_shape(first)


def _item_shape(arg: TypeExpr) -> dict:
    if arg.elements:
        return {"oneOf": [_item_shape(member) for member in arg.elements]}
    if arg.is_applied:
        nested = resolve_schema(arg)
        if nested:
            return nested
    name = arg.name or resolve_type(arg)
    if name.lower() in PRIMITIVE_ITEM_TYPES:
        return {"type": name.lower()}
    return definition_ref(model_name(name) or name)
