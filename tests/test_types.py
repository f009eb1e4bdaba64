from annotated_swagger.parser.base import TypeExpr
from annotated_swagger.parser.types import resolve_items, resolve_schema, resolve_type


def _applied(container: str, *args: str) -> TypeExpr:
    return TypeExpr(
        expression=TypeExpr(name=container),
        applications=[TypeExpr(name=a) for a in args],
    )


class TestResolveType:
    def test_absent_defaults_to_string(self):
        assert resolve_type(None) == "string"

    def test_model_suffix_gives_model_name(self):
        assert resolve_type(TypeExpr(name="Pet.model")) == "Pet"

    def test_named_type_verbatim(self):
        assert resolve_type(TypeExpr(name="enum")) == "enum"
        assert resolve_type(TypeExpr(name="Foo.bar")) == "Foo.bar"

    def test_swagger_keyword_lowercased(self):
        assert resolve_type(TypeExpr(name="Integer")) == "integer"

    def test_applied_gives_container(self):
        assert resolve_type(_applied("Array", "Pet")) == "array"


class TestResolveSchema:
    def test_model_reference(self):
        assert resolve_schema(TypeExpr(name="Pet.model")) == {"$ref": "#/definitions/Pet"}

    def test_plain_name_has_no_schema(self):
        assert resolve_schema(TypeExpr(name="string")) is None

    def test_absent_has_no_schema(self):
        assert resolve_schema(None) is None

    def test_single_primitive_argument(self):
        for primitive in ("object", "string", "integer", "boolean"):
            assert resolve_schema(_applied("Array", primitive)) == {
                "type": "array",
                "items": {"type": primitive},
            }

    def test_single_model_argument(self):
        assert resolve_schema(_applied("Array", "Pet")) == {
            "type": "array",
            "items": {"$ref": "#/definitions/Pet"},
        }

    def test_multiple_arguments_become_one_of(self):
        assert resolve_schema(_applied("Array", "string", "Pet")) == {
            "type": "array",
            "items": {"oneOf": [{"type": "string"}, {"$ref": "#/definitions/Pet"}]},
        }

    def test_zero_arguments_has_no_schema(self):
        assert resolve_schema(_applied("Array")) is None

    def test_union_argument(self):
        expr = TypeExpr(
            expression=TypeExpr(name="Array"),
            applications=[TypeExpr(elements=[TypeExpr(name="Cat"), TypeExpr(name="Dog")])],
        )
        assert resolve_schema(expr)["items"] == {
            "oneOf": [{"$ref": "#/definitions/Cat"}, {"$ref": "#/definitions/Dog"}]
        }

    def test_capitalized_primitive_argument(self):
        assert resolve_schema(_applied("Array", "Integer")) == {
            "type": "array",
            "items": {"type": "integer"},
        }


class TestResolveItems:
    def test_primitive_item(self):
        assert resolve_items(_applied("Array", "integer")) == {"type": "integer"}

    def test_model_item(self):
        assert resolve_items(_applied("Array", "Tag")) == {"$ref": "#/definitions/Tag"}

    def test_no_items_for_named(self):
        assert resolve_items(TypeExpr(name="string")) is None
        assert resolve_items(None) is None
