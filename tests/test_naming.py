"""Tests for the naming module."""

import pytest

from swaggerts.naming import (
    comment_text,
    interface_name,
    map_type,
    method_name,
    options_interface_name,
    parameter_type,
    property_key,
    property_type,
    quote_literal,
    resource_name,
    return_type,
    to_title_case,
    un_title_case,
)
from swaggerts.schema import ModelProperty, Operation, Parameter, Resource


def _resource(resource_path, api_version=None) -> Resource:
    return Resource.model_validate({"resourcePath": resource_path, "apiVersion": api_version})


def _param(**fields) -> Parameter:
    return Parameter.model_validate({"name": "p", **fields})


def _operation(**fields) -> Operation:
    return Operation.model_validate({"method": "GET", "nickname": "getPet", **fields})


class TestTitleCase:
    def test_capitalizes_word(self):
        assert to_title_case("pets") == "Pets"

    def test_lowercases_rest(self):
        assert to_title_case("userACCOUNTS") == "Useraccounts"

    def test_un_title_case(self):
        assert un_title_case("GetPet") == "getPet"
        assert un_title_case("") == ""


class TestResourceName:
    """Test class names derived from resourcePath."""

    def test_single_segment(self):
        assert resource_name(_resource("/pets")) == "Pets"

    def test_drops_version_and_placeholders(self):
        resource = _resource("/v1/store/{storeId}/orders", api_version="v1")
        assert resource_name(resource) == "StoreOrders"

    def test_version_kept_when_not_matching(self):
        assert resource_name(_resource("/v2/pets", api_version="v1")) == "V2Pets"

    def test_strips_non_identifier_characters(self):
        assert resource_name(_resource("/pet-store")) == "Petstore"

    def test_empty_path(self):
        assert resource_name(_resource("/")) == "Root"


class TestDeclarationNames:
    def test_interface_name(self):
        assert interface_name("Pet") == "IPet"

    @pytest.mark.parametrize("model_id", [None, ""])
    def test_interface_name_absent(self, model_id):
        assert interface_name(model_id) == "unknown"

    def test_options_interface_name(self):
        assert options_interface_name(_operation()) == "IGetPetOptions"

    def test_method_name(self):
        assert method_name(_operation(nickname="GetPet")) == "getPet"


class TestMapType:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("integer", "number"),
            ("number", "number"),
            ("string", "string"),
            ("boolean", "boolean"),
            ("File", "File"),
            (None, "unknown"),
        ],
    )
    def test_mapping(self, tag, expected):
        assert map_type(tag) == expected


class TestPropertyType:
    def test_primitive(self):
        assert property_type(ModelProperty(type="integer")) == "number"

    def test_ref(self):
        assert property_type(ModelProperty.model_validate({"$ref": "Tag"})) == "ITag"

    def test_array_of_refs(self):
        prop = ModelProperty.model_validate({"type": "array", "items": {"$ref": "Tag"}})
        assert property_type(prop) == "ITag[]"

    def test_nested_arrays(self):
        prop = ModelProperty.model_validate(
            {"type": "array", "items": {"type": "array", "items": {"type": "integer"}}}
        )
        assert property_type(prop) == "number[][]"

    def test_array_without_items_passes_through(self):
        assert property_type(ModelProperty(type="array")) == "array"


class TestParameterType:
    def test_enum_union_keeps_order(self):
        param = _param(paramType="query", type="string", enum=["sold", "available", "pending"])
        assert parameter_type(param) == "'sold' | 'available' | 'pending'"

    def test_idempotent(self):
        param = _param(paramType="query", enum=["a", "b"])
        assert parameter_type(param) == parameter_type(param)

    def test_body_is_model_reference(self):
        assert parameter_type(_param(paramType="body", type="Pet")) == "IPet"

    def test_body_enum_wins(self):
        assert parameter_type(_param(paramType="body", type="string", enum=["x"])) == "'x'"

    def test_enum_values_escaped(self):
        param = _param(paramType="query", enum=["it's", "a\\b"])
        assert parameter_type(param) == "'it\\'s' | 'a\\\\b'"

    def test_query_primitive(self):
        assert parameter_type(_param(paramType="query", type="integer")) == "number"


class TestReturnType:
    def test_model(self):
        assert return_type(_operation(type="Pet")) == "IPet"

    def test_void(self):
        assert return_type(_operation(type="void")) == "void"

    def test_primitive(self):
        assert return_type(_operation(type="integer")) == "number"

    def test_array_of_models(self):
        assert return_type(_operation(type="array", items={"$ref": "Pet"})) == "IPet[]"

    def test_array_without_items(self):
        assert return_type(_operation(type="array")) == "unknown[]"

    def test_absent(self):
        assert return_type(_operation()) == "unknown"


class TestPropertyKey:
    def test_identifier(self):
        assert property_key("petId") == "petId"

    def test_quoted(self):
        assert property_key("page-size") == "'page-size'"

    def test_escapes_quote(self):
        assert property_key("it's") == "'it\\'s'"


class TestQuoteLiteral:
    def test_plain(self):
        assert quote_literal("placed") == "'placed'"

    def test_escapes_quote(self):
        assert quote_literal("it's") == "'it\\'s'"

    def test_escapes_backslash_first(self):
        assert quote_literal("a\\'b") == "'a\\\\\\'b'"


def test_comment_text_collapses_whitespace():
    assert comment_text("Find\n  pet   by ID ") == "Find pet by ID"
