"""Introspection schema model.

These pydantic models validate the JSON returned by a GraphQL introspection
query (``__schema``) and expose it with Python attribute names. Keys the
generator does not use (``args``, ``isDeprecated``, ...) are ignored.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


LIST = "LIST"
NON_NULL = "NON_NULL"
WRAPPER_KINDS = (LIST, NON_NULL)


class TypeKind(str, Enum):
    """Kinds of schema types the generator knows how to handle.

    Every other introspection kind (UNION, or anything a newer server sends)
    maps to UNHANDLED.
    """
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    INTERFACE = "INTERFACE"
    ENUM = "ENUM"
    SCALAR = "SCALAR"
    UNHANDLED = "UNHANDLED"

    @classmethod
    def of(cls, kind: str) -> "TypeKind":
        try:
            return cls(kind)
        except ValueError:
            return cls.UNHANDLED


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TypeRef(_IntrospectionModel):
    """Reference to a type, possibly wrapped in LIST / NON_NULL."""
    kind: str
    name: str | None = None
    of_type: "TypeRef | None" = Field(default=None, alias="ofType")

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS


class EnumValue(_IntrospectionModel):
    """A single value of an ENUM type."""
    name: str
    description: str | None = None


class SchemaField(_IntrospectionModel):
    """A field of an OBJECT / INTERFACE, or an input field of an INPUT_OBJECT."""
    name: str
    description: str | None = None
    type_ref: TypeRef = Field(alias="type")


class SchemaType(_IntrospectionModel):
    """One named type of the schema."""
    kind: str
    name: str
    description: str | None = None
    fields: list[SchemaField] | None = None
    input_fields: list[SchemaField] | None = Field(default=None, alias="inputFields")
    enum_values: list[EnumValue] | None = Field(default=None, alias="enumValues")
    interfaces: list[TypeRef] | None = None
    possible_types: list[TypeRef] | None = Field(default=None, alias="possibleTypes")

    @property
    def type_kind(self) -> TypeKind:
        return TypeKind.of(self.kind)


class Schema(_IntrospectionModel):
    """Complete introspection schema: the ordered list of its types."""
    types: list[SchemaType]

    @classmethod
    def from_introspection(cls, data: dict[str, Any]) -> "Schema":
        """Build a schema from an introspection result.

        Accepts a full HTTP response body (``{"data": {"__schema": ...}}``),
        the ``data`` payload (``{"__schema": ...}``) or the ``__schema``
        object itself.

        Raises:
            ValueError: If the payload carries no schema (no ``__schema`` and
                no ``types``), e.g. an endpoint answering ``{"data": null}``
        """
        if isinstance(data.get("data"), dict):
            data = data["data"]
        if "__schema" in data:
            data = data["__schema"]
        if not isinstance(data, dict) or "types" not in data:
            raise ValueError("introspection result has no __schema types")
        return cls.model_validate(data)

    def get_type(self, name: str) -> SchemaType | None:
        """Look up a type by name."""
        for schema_type in self.types:
            if schema_type.name == name:
                return schema_type
        return None

    def count_by_kind(self) -> dict[str, int]:
        """Return the number of types per introspection kind."""
        counts: dict[str, int] = {}
        for schema_type in self.types:
            counts[schema_type.kind] = counts.get(schema_type.kind, 0) + 1
        return counts
