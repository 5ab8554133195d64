"""Scalar type mapping for C# model generation.

Maps GraphQL scalar names to the C# type used for properties of that scalar.
Scalars without a registration are emitted under their schema name.

Example usage:
    from gql_modelgen.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.register("Money", "decimal")
    registry.get("Money")  # "decimal"
"""


# GraphQL built-ins plus the custom scalars most servers expose
DEFAULT_SCALARS: dict[str, str] = {
    "String": "string",
    "ID": "string",
    "Int": "int",
    "Float": "double",
    "Boolean": "bool",
    "Long": "long",
    "Date": "DateTime",
    "DateTime": "DateTime",
    "JSON": "object",
    "JSONObject": "object",
    "Any": "object",
}


class ScalarRegistry:
    """Registry of GraphQL scalar name to C# type name.

    Example:
        registry = ScalarRegistry()
        registry.get("Int")          # "int"
        registry.has("Timestamp")    # False
    """

    def __init__(self, mappings: dict[str, str] | None = None):
        self._types: dict[str, str] = dict(DEFAULT_SCALARS)
        if mappings:
            for scalar_name, target_type in mappings.items():
                self.register(scalar_name, target_type)

    def register(self, scalar_name: str, target_type: str):
        """Register (or replace) the C# type for a scalar."""
        self._types[scalar_name] = target_type

    def get(self, scalar_name: str) -> str | None:
        """Get the C# type for a scalar, or None if not registered."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a scalar has a registered C# type."""
        return scalar_name in self._types
