"""
Variant introspection for the closed syntax family.

Reflects on the dataclass fields of each variant to report which positions
hold payloads (visited by `Syntax.map`) and which hold plain names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields as dc_fields
from enum import Enum
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from fixdsl.syntax import Syntax

# =============================================================================
# Schema Types
# =============================================================================


class FieldKind(Enum):
    """Role of a variant field with respect to the payload type."""
    PAYLOAD = "payload"                    # P
    PAYLOAD_SEQUENCE = "payload_sequence"  # tuple[P, ...]
    NAME = "name"                          # str, never mapped


@dataclass(frozen=True)
class FieldSchema:
    name: str
    kind: FieldKind


@dataclass(frozen=True)
class VariantSchema:
    tag: str
    fields: tuple[FieldSchema, ...]

    @property
    def payload_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.kind is not FieldKind.NAME)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "fields": [{"name": f.name, "kind": f.kind.value} for f in self.fields],
        }


# =============================================================================
# Schema Extraction
# =============================================================================


def field_kind(py_type: Any) -> FieldKind:
    """Classify a resolved field annotation."""
    if isinstance(py_type, TypeVar):
        return FieldKind.PAYLOAD

    if py_type is str:
        return FieldKind.NAME

    if get_origin(py_type) is tuple:
        args = get_args(py_type)
        if len(args) == 2 and args[1] is Ellipsis and isinstance(args[0], TypeVar):
            return FieldKind.PAYLOAD_SEQUENCE

    raise ValueError(f"Cannot classify field type: {py_type}")


def variant_schema(cls: type[Syntax[Any]]) -> VariantSchema:
    """Get schema for a syntax variant class."""
    type_params = {p.__name__: p for p in getattr(cls, "__type_params__", ())}
    hints = get_type_hints(cls, localns=type_params)
    return VariantSchema(
        tag=cls._tag,
        fields=tuple(FieldSchema(f.name, field_kind(hints[f.name])) for f in dc_fields(cls)),
    )


def all_schemas() -> dict[str, VariantSchema]:
    """Get schemas for every registered variant."""
    return {tag: variant_schema(cls) for tag, cls in Syntax._registry.items()}
