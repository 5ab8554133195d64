"""C# model generator for GraphQL introspection schemas.

Emits one C# definition per schema type and renders them into a single
source file through a Jinja2 template.

Supports custom templates via the template_dir parameter:
    generator = ModelGenerator(schema, "Sdl.Web", template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape
from markupsafe import escape

from .errors import SchemaShapeError
from .naming import pascal_case
from .remap import DEFAULT_REMAP_RULES, RemapRule, remap_field_type
from .renderer import TypeRenderer
from .scalars import ScalarRegistry
from .schema import EnumValue, Schema, SchemaField, SchemaType, TypeKind


NAMESPACE_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*")

# C# declaration keyword per emitted kind
DECLARATION_KEYWORDS = {
    TypeKind.OBJECT: "class",
    TypeKind.INPUT_OBJECT: "class",
    TypeKind.INTERFACE: "interface",
    TypeKind.ENUM: "enum",
}


def indent(level: int) -> str:
    """Return the indentation prefix for a nesting level."""
    return "\t" * level


def first_duplicate(names: list[str]) -> Optional[str]:
    """Return the first name that occurs twice, or None."""
    seen = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None


def emit_comment(text: Optional[str], level: int) -> str:
    """Emit an XML documentation comment, or nothing for a blank description."""
    if not text or not text.strip():
        return ""
    prefix = indent(level)
    lines = [f"{prefix}/// <summary>"]
    for line in text.strip().splitlines():
        lines.append(f"{prefix}/// {escape(line.rstrip())}".rstrip())
    lines.append(f"{prefix}/// </summary>")
    return "\n".join(lines) + "\n"


class ModelGenerator:
    """Generates C# model classes from an introspection schema.

    Every emit_* method returns a text fragment; generate() joins the
    fragments of all types in schema order and renders the file template.

    Available templates to override:
        - model.cs.j2 - file header and namespace block; receives
          ``namespace``, ``generated_at`` and ``definitions`` and can use
          the ``pascal_case`` filter

    Example:
        generator = ModelGenerator(schema, namespace="Sdl.Web.Model")
        code = generator.generate()
    """

    TEMPLATE_NAME = "model.cs.j2"

    def __init__(
        self,
        schema: Schema,
        namespace: str,
        *,
        remap_rules: tuple[RemapRule, ...] = DEFAULT_REMAP_RULES,
        scalars: Optional[ScalarRegistry] = None,
        template_dir: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the generator.

        Args:
            schema: The parsed introspection schema
            namespace: C# namespace wrapping the generated types
            remap_rules: Field name overrides applied before rendering types
            scalars: Scalar to C# type mapping (defaults to ScalarRegistry())
            template_dir: Optional directory with a custom model.cs.j2.
                          Templates here override the built-in template.
            clock: Source of the timestamp written into the file header
        """
        if not namespace or not NAMESPACE_PATTERN.fullmatch(namespace):
            raise ValueError(f"Invalid namespace: {namespace!r}")

        self.schema = schema
        self.namespace = namespace
        self.remap_rules = remap_rules
        self.renderer = TypeRenderer(scalars)
        self.clock = clock

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_modelgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            keep_trailing_newline=True,
        )
        self.env.filters["pascal_case"] = pascal_case

        self._emitters: dict[TypeKind, Callable[[SchemaType, int], str]] = {
            TypeKind.OBJECT: self._emit_object_body,
            TypeKind.INPUT_OBJECT: self._emit_input_body,
            TypeKind.INTERFACE: self._emit_interface_body,
            TypeKind.ENUM: self._emit_enum_body,
        }

    def generate(self) -> str:
        """Generate the complete C# source file."""
        definitions = [
            fragment
            for fragment in (self.emit_type(t, 1) for t in self.schema.types)
            if fragment
        ]
        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(
            namespace=self.namespace,
            generated_at=self.clock().strftime("%Y-%m-%d %H:%M:%S"),
            definitions=definitions,
        )

    def emit_type(self, schema_type: SchemaType, level: int) -> str:
        """Emit the definition of one schema type.

        Introspection types (``__Type`` and friends) and scalars produce an
        empty fragment.

        Raises:
            SchemaShapeError: For kinds the generator cannot express or types
                missing the members their kind requires
        """
        if schema_type.name.startswith("__"):
            return ""
        kind = schema_type.type_kind
        if kind is TypeKind.SCALAR:
            return ""

        emit_body = self._emitters.get(kind)
        if emit_body is None:
            raise SchemaShapeError(schema_type.name, f"unsupported kind {schema_type.kind}")

        prefix = indent(level)
        parts = [emit_comment(schema_type.description, level)]
        if kind is TypeKind.ENUM:
            parts.append(f"{prefix}[JsonConverter(typeof(StringEnumConverter))]\n")
        parts.append(self._emit_declaration(schema_type, kind, level))
        parts.append(f"\n{prefix}{{\n")
        parts.append(emit_body(schema_type, level + 1))
        parts.append(f"{prefix}}}\n\n")
        return "".join(parts)

    def _emit_declaration(self, schema_type: SchemaType, kind: TypeKind, level: int) -> str:
        declaration = f"{indent(level)}public {DECLARATION_KEYWORDS[kind]} {schema_type.name}"
        if kind is TypeKind.OBJECT and schema_type.interfaces:
            names = [
                self.renderer.render(iface, owner=schema_type.name)
                for iface in schema_type.interfaces
            ]
            declaration += " : " + ", ".join(names)
        return declaration

    def _emit_object_body(self, schema_type: SchemaType, level: int) -> str:
        if not schema_type.fields:
            raise SchemaShapeError(schema_type.name, "OBJECT type has no fields")
        return self.emit_fields(schema_type.name, schema_type.fields, level, is_public=True)

    def _emit_input_body(self, schema_type: SchemaType, level: int) -> str:
        if not schema_type.input_fields:
            raise SchemaShapeError(schema_type.name, "INPUT_OBJECT type has no inputFields")
        return self.emit_fields(schema_type.name, schema_type.input_fields, level, is_public=True)

    def _emit_interface_body(self, schema_type: SchemaType, level: int) -> str:
        # Interfaces nobody implements are emitted as empty markers
        if not schema_type.possible_types:
            return ""
        if not schema_type.fields:
            raise SchemaShapeError(schema_type.name, "INTERFACE type has no fields")
        return self.emit_fields(schema_type.name, schema_type.fields, level, is_public=False)

    def _emit_enum_body(self, schema_type: SchemaType, level: int) -> str:
        if not schema_type.enum_values:
            raise SchemaShapeError(schema_type.name, "ENUM type has no enumValues")
        members = [pascal_case(value.name) for value in schema_type.enum_values]
        duplicate = first_duplicate(members)
        if duplicate is not None:
            raise SchemaShapeError(schema_type.name, f"enum values collide as member {duplicate}")
        return self.emit_enum_values(schema_type.enum_values, level)

    def emit_fields(
        self,
        owner: str,
        fields: list[SchemaField],
        level: int,
        is_public: bool,
    ) -> str:
        """Emit one auto-property per field, in declaration order."""
        prefix = indent(level)
        modifier = "public " if is_public else ""
        parts = []
        for field in fields:
            type_ref = remap_field_type(field, self.remap_rules)
            type_name = self.renderer.render(type_ref, owner=f"{owner}.{field.name}")
            parts.append(
                "\n"
                + emit_comment(field.description, level)
                + f"{prefix}{modifier}{type_name} {pascal_case(field.name)} {{ get; set; }}\n"
            )
        return "".join(parts)

    def emit_enum_values(self, values: list[EnumValue], level: int) -> str:
        """Emit enum members separated by commas, the last one without."""
        prefix = indent(level)
        last = len(values) - 1
        parts = []
        for i, value in enumerate(values):
            member = pascal_case(value.name)
            separator = "," if i < last else ""
            lines = ["\n", emit_comment(value.description, level)]
            if member != value.name:
                lines.append(f'{prefix}[EnumMember(Value = "{value.name}")]\n')
            lines.append(f"{prefix}{member}{separator}\n")
            parts.append("".join(lines))
        return "".join(parts)
