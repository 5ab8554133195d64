"""Render introspection type references as C# type expressions."""

from .errors import SchemaShapeError
from .scalars import ScalarRegistry
from .schema import LIST, TypeKind, TypeRef


class TypeRenderer:
    """Turns a TypeRef into a C# type expression.

    ``[Foo!]!`` becomes ``List<Foo>``: NON_NULL wrappers render as their inner
    type and LIST wrappers as ``List<...>``. Scalars are mapped through the
    scalar registry.
    """

    # Maximum number of LIST / NON_NULL wrappers around a named type
    MAX_DEPTH = 16

    def __init__(self, scalars: ScalarRegistry | None = None):
        self.scalars = scalars or ScalarRegistry()

    def render(self, type_ref: TypeRef, owner: str = "<unknown>") -> str:
        """Render a type reference.

        Args:
            type_ref: The (possibly wrapped) type reference
            owner: Name used in error messages, usually ``Type.field``

        Raises:
            SchemaShapeError: If the chain does not end in a named type
                within MAX_DEPTH wrappers
        """
        wrappers: list[str] = []
        current = type_ref
        while current.is_wrapper:
            if len(wrappers) >= self.MAX_DEPTH:
                raise SchemaShapeError(
                    owner, f"type reference nested deeper than {self.MAX_DEPTH} levels"
                )
            wrappers.append(current.kind)
            if current.of_type is None:
                raise SchemaShapeError(owner, f"{current.kind} type reference without ofType")
            current = current.of_type

        if not current.name:
            raise SchemaShapeError(owner, f"{current.kind} type reference without a name")

        rendered = self.named_type(current)
        # NON_NULL wrappers leave the C# type unchanged
        for kind in reversed(wrappers):
            if kind == LIST:
                rendered = f"List<{rendered}>"
        return rendered

    def named_type(self, type_ref: TypeRef) -> str:
        """Render an unwrapped, named type reference."""
        if type_ref.kind == TypeKind.SCALAR.value:
            return self.scalars.get(type_ref.name) or type_ref.name
        return type_ref.name
