"""Tests for the introspection schema model."""

import pytest
from pydantic import ValidationError

from gql_modelgen.core.schema import Schema, SchemaType, TypeKind, TypeRef


class TestFromIntrospection:
    """Tests for Schema.from_introspection envelopes."""

    def test_full_response(self, introspection_data):
        schema = Schema.from_introspection(introspection_data)
        assert [t.name for t in schema.types] == [
            "Publication",
            "String",
            "InputItemFilter",
            "Node",
            "ContentNamespace",
            "__Type",
        ]

    def test_data_payload(self, introspection_data):
        schema = Schema.from_introspection(introspection_data["data"])
        assert len(schema.types) == 6

    def test_bare_schema(self, introspection_data):
        schema = Schema.from_introspection(introspection_data["data"]["__schema"])
        assert len(schema.types) == 6

    def test_camel_case_keys(self, introspection_data):
        schema = Schema.from_introspection(introspection_data)
        node = schema.get_type("Node")
        assert [t.name for t in node.possible_types] == ["Publication"]
        filter_type = schema.get_type("InputItemFilter")
        assert filter_type.input_fields[0].name == "namespaceIds"
        assert filter_type.input_fields[0].type_ref.of_type.name == "Int"
        enum = schema.get_type("ContentNamespace")
        assert [v.name for v in enum.enum_values] == ["Sites", "Docs", "UNKNOWN"]

    def test_missing_type_name_is_rejected(self):
        with pytest.raises(ValidationError):
            Schema.from_introspection({"types": [{"kind": "OBJECT"}]})

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {"somethingElse": 1}},
            {"data": {"__schema": None}},
        ],
    )
    def test_payload_without_schema_is_rejected(self, payload):
        with pytest.raises(ValueError, match="no __schema types"):
            Schema.from_introspection(payload)

    def test_types_are_required(self):
        with pytest.raises(ValidationError):
            Schema()

    def test_empty_type_list_is_a_schema(self):
        assert Schema.from_introspection({"__schema": {"types": []}}).types == []

    def test_get_type_unknown(self, introspection_data):
        schema = Schema.from_introspection(introspection_data)
        assert schema.get_type("Missing") is None

    def test_count_by_kind(self, introspection_data):
        counts = Schema.from_introspection(introspection_data).count_by_kind()
        assert counts == {
            "OBJECT": 2,
            "SCALAR": 1,
            "INPUT_OBJECT": 1,
            "INTERFACE": 1,
            "ENUM": 1,
        }


class TestTypeKind:
    """Tests for TypeKind classification."""

    @pytest.mark.parametrize("kind", ["OBJECT", "INPUT_OBJECT", "INTERFACE", "ENUM", "SCALAR"])
    def test_actionable_kinds(self, kind):
        assert TypeKind.of(kind).value == kind

    @pytest.mark.parametrize("kind", ["UNION", "LIST", "NON_NULL", "WIDGET"])
    def test_other_kinds_are_unhandled(self, kind):
        assert TypeKind.of(kind) is TypeKind.UNHANDLED

    def test_schema_type_kind(self):
        assert SchemaType(kind="UNION", name="SearchResult").type_kind is TypeKind.UNHANDLED


class TestTypeRef:
    """Tests for TypeRef construction."""

    def test_python_names_accepted(self):
        ref = TypeRef(kind="LIST", of_type=TypeRef(kind="SCALAR", name="Int"))
        assert ref.is_wrapper
        assert not ref.of_type.is_wrapper

    def test_frozen(self):
        ref = TypeRef(kind="SCALAR", name="Int")
        with pytest.raises(ValidationError):
            ref.name = "String"
