import pytest

from annotated_swagger.parser.base import CommentTag, TypeExpr
from annotated_swagger.parser.typedef import parse_typedef


def _prop(name: str, type_name: str | None = None, description: str | None = None) -> CommentTag:
    return CommentTag(
        title="property",
        name=name,
        description=description,
        type=TypeExpr(name=type_name) if type_name else None,
    )


class TestParseTypedef:
    def test_empty_definition(self):
        name, details = parse_typedef([CommentTag(title="typedef", name="Empty")])
        assert name == "Empty"
        assert details == {"required": [], "properties": {}}

    def test_named_base_adds_all_of(self):
        head = CommentTag(title="typedef", name="Pet", type=TypeExpr(name="Animal.model"))
        _, details = parse_typedef([head])
        assert details["allOf"] == [{"$ref": "#/definitions/Animal"}]

    def test_primitive_base_is_not_a_ref(self):
        head = CommentTag(title="typedef", name="Pet", type=TypeExpr(name="object"))
        _, details = parse_typedef([head])
        assert "allOf" not in details

    def test_modifiers_in_any_order(self):
        _, details = parse_typedef([
            CommentTag(title="typedef", name="Pet"),
            _prop("id.readOnly.required", "integer"),
            _prop("name.required", "string"),
            _prop("nick", "string"),
        ])
        assert details["required"] == ["id", "name"]
        assert details["properties"]["id"]["readOnly"] is True
        assert "readOnly" not in details["properties"]["name"]
        assert set(details["properties"]) == {"id", "name", "nick"}

    def test_schema_property_drops_description(self):
        _, details = parse_typedef([
            CommentTag(title="typedef", name="Pet"),
            _prop("owner", "Owner.model", "The owner - eg: bob"),
        ])
        assert details["properties"]["owner"] == {"$ref": "#/definitions/Owner"}

    def test_examples_are_typed(self):
        _, details = parse_typedef([
            CommentTag(title="typedef", name="Pet"),
            _prop("age", "integer", "Age - eg: 7"),
            _prop("vaccinated", "boolean", "Vaccinated - eg: true"),
            _prop("adopted", "boolean", "Adopted - eg: no"),
            _prop("name", "string", "Name - eg: Rex"),
        ])
        props = details["properties"]
        assert props["age"] == {"type": "integer", "description": "Age", "example": 7}
        assert props["vaccinated"]["example"] is True
        assert props["adopted"]["example"] is False
        assert props["name"]["example"] == "Rex"

    def test_enum_property(self):
        _, details = parse_typedef([
            CommentTag(title="typedef", name="Pet"),
            _prop("status", "enum", "Status - eg: available,sold"),
        ])
        assert details["properties"]["status"] == {
            "type": "string",
            "description": "Status",
            "enum": ["available", "sold"],
        }

    def test_array_property_uses_schema(self):
        tag = CommentTag(
            title="property",
            name="tags",
            type=TypeExpr(expression=TypeExpr(name="Array"), applications=[TypeExpr(name="Tag")]),
        )
        _, details = parse_typedef([CommentTag(title="typedef", name="Pet"), tag])
        assert details["properties"]["tags"] == {"type": "array", "items": {"$ref": "#/definitions/Tag"}}

    def test_typedef_without_name_fails(self):
        with pytest.raises(ValueError):
            parse_typedef([CommentTag(title="typedef", type=TypeExpr(name="object"))])
