"""Tests for fixdsl.schema module."""

from typing import TypeVar

import pytest

from fixdsl.schema import (
    FieldKind,
    FieldSchema,
    VariantSchema,
    all_schemas,
    field_kind,
    variant_schema,
)
from fixdsl.syntax import Abstract, Apply, Assign, Group, Literal, Variable


class TestFieldKind:
    """Test annotation classification."""

    def test_typevar_is_payload(self):
        """Test that a bare type parameter is a payload."""
        assert field_kind(TypeVar("P")) is FieldKind.PAYLOAD

    def test_tuple_is_payload_sequence(self):
        """Test that a variadic tuple of the parameter is a sequence."""
        P = TypeVar("P")
        assert field_kind(tuple[P, ...]) is FieldKind.PAYLOAD_SEQUENCE

    def test_str_is_name(self):
        """Test that strings are names."""
        assert field_kind(str) is FieldKind.NAME

    def test_unsupported(self):
        """Test that other annotations are rejected."""
        with pytest.raises(ValueError, match="Cannot classify"):
            field_kind(int)
        with pytest.raises(ValueError):
            field_kind(tuple[int, ...])


class TestVariantSchema:
    """Test schema extraction for variants."""

    def test_apply(self):
        """Test callee payload followed by an argument sequence."""
        assert variant_schema(Apply) == VariantSchema(
            tag="apply",
            fields=(
                FieldSchema("callee", FieldKind.PAYLOAD),
                FieldSchema("arguments", FieldKind.PAYLOAD_SEQUENCE),
            ),
        )

    def test_abstract(self):
        """Test parameter sequence followed by a body payload."""
        schema = variant_schema(Abstract)
        assert [f.kind for f in schema.fields] == [
            FieldKind.PAYLOAD_SEQUENCE,
            FieldKind.PAYLOAD,
        ]

    def test_assign(self):
        """Test that the binding name is not a payload."""
        schema = variant_schema(Assign)
        assert schema.fields[0] == FieldSchema("name", FieldKind.NAME)
        assert schema.payload_fields == ("value",)

    @pytest.mark.parametrize("cls", [Variable, Literal])
    def test_leaves_have_no_payloads(self, cls):
        """Test that leaves carry only names."""
        assert variant_schema(cls).payload_fields == ()

    def test_group(self):
        """Test label payload followed by member sequence."""
        assert variant_schema(Group).payload_fields == ("label", "members")

    def test_to_dict(self):
        """Test the plain-dict form."""
        assert variant_schema(Assign).to_dict() == {
            "tag": "assign",
            "fields": [
                {"name": "name", "kind": "name"},
                {"name": "value", "kind": "payload"},
            ],
        }


class TestAllSchemas:
    """Test schemas for the whole family."""

    def test_all_variants_present(self):
        """Test that every tag is described."""
        schemas = all_schemas()
        assert set(schemas) == {"apply", "abstract", "assign", "variable", "literal", "group"}
        assert all(isinstance(s, VariantSchema) for s in schemas.values())

    def test_payload_fields_match_map(self):
        """Test that payload fields are exactly the positions map visits."""
        samples = {
            "apply": Apply(0, (0,)),
            "abstract": Abstract((0,), 0),
            "assign": Assign("n", 0),
            "variable": Variable("n"),
            "literal": Literal("n"),
            "group": Group(0, (0,)),
        }
        expected = {FieldKind.NAME: "n", FieldKind.PAYLOAD: 1, FieldKind.PAYLOAD_SEQUENCE: (1,)}
        for tag, schema in all_schemas().items():
            mapped = samples[tag].map(lambda _: 1)
            for field in schema.fields:
                assert getattr(mapped, field.name) == expected[field.kind]
