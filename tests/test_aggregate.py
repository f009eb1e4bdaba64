import pytest

from annotated_swagger.swagger.aggregate import add_data, init_document, plural_key


class TestInitDocument:
    def test_defaults(self):
        doc = init_document({"info": {"title": "x", "version": "1"}})
        assert doc["swagger"] == "2.0"
        assert doc["info"]["title"] == "x"
        for key in ("paths", "responses", "parameters", "securityDefinitions", "definitions"):
            assert doc[key] == {}
        assert doc["tags"] == []

    def test_seed_is_not_mutated(self):
        seed = {"tags": [{"name": "a"}]}
        doc = init_document(seed)
        doc["tags"].append({"name": "b"})
        assert seed == {"tags": [{"name": "a"}]}


class TestPluralKey:
    def test_singular_aliases(self):
        assert plural_key("consume") == "consumes"
        assert plural_key("securityDefinition") == "securityDefinitions"
        assert plural_key("definitions") == "definitions"


class TestAddData:
    def test_requires_inputs(self):
        with pytest.raises(ValueError):
            add_data(None, [])
        with pytest.raises(ValueError):
            add_data({}, None)

    def test_different_methods_on_same_uri(self):
        doc = init_document({})
        add_data(doc, [{"paths": {"/pets": {"get": {"summary": "list"}}}}])
        add_data(doc, [{"paths": {"/pets": {"post": {"summary": "create"}}}}])
        assert doc["paths"]["/pets"] == {
            "get": {"summary": "list"},
            "post": {"summary": "create"},
        }

    def test_same_method_overrides_field_by_field(self):
        doc = init_document({})
        add_data(doc, [{"paths": {"/pets": {"get": {"summary": "old", "produces": ["a/b"]}}}}])
        add_data(doc, [{"paths": {"/pets": {"get": {"summary": "new"}}}}])
        assert doc["paths"]["/pets"]["get"] == {"summary": "new", "produces": ["a/b"]}

    def test_duplicate_tag_is_dropped(self):
        doc = init_document({"tags": [{"name": "pets", "description": "first"}]})
        add_data(doc, [{"tags": [{"name": "pets", "description": "second"}, {"name": "users"}]}])
        add_data(doc, [{"tag": {"name": "users"}}])
        assert doc["tags"] == [{"name": "pets", "description": "first"}, {"name": "users"}]

    def test_definitions_first_write_wins(self):
        doc = init_document({})
        add_data(doc, [{"definitions": {"Pet": {"required": ["id"]}}}])
        add_data(doc, [{"definition": {"Pet": {"required": []}, "Tag": {}}}])
        assert doc["definitions"] == {"Pet": {"required": ["id"]}, "Tag": {}}

    def test_list_properties_append_unseen(self):
        doc = init_document({"consumes": ["application/json"]})
        add_data(doc, [{"consume": ["application/json", "text/xml"]}])
        assert doc["consumes"] == ["application/json", "text/xml"]

    def test_unknown_property_raises(self):
        with pytest.raises(ValueError):
            add_data(init_document({}), [{"info": {}}])
