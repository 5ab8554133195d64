"""Core modules for GraphQL model generation."""

from .auth import (
    Auth,
    BearerAuth,
    HeaderAuth,
    NoAuth,
    auth_from_options,
)
from .errors import ModelGenError, SchemaLoadError, SchemaShapeError
from .executor import GraphQLError, GraphQLExecutor, fetch_schema
from .generator import ModelGenerator
from .loader import SchemaLoader
from .naming import capitalize, pascal_case
from .remap import DEFAULT_REMAP_RULES, RemapRule, remap_field_type
from .renderer import TypeRenderer
from .scalars import ScalarRegistry
from .schema import (
    EnumValue,
    Schema,
    SchemaField,
    SchemaType,
    TypeKind,
    TypeRef,
)

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "HeaderAuth",
    "NoAuth",
    "auth_from_options",
    # Errors
    "ModelGenError",
    "SchemaLoadError",
    "SchemaShapeError",
    # Schema model
    "EnumValue",
    "Schema",
    "SchemaField",
    "SchemaType",
    "TypeKind",
    "TypeRef",
    # Loading
    "SchemaLoader",
    "GraphQLError",
    "GraphQLExecutor",
    "fetch_schema",
    # Generation
    "DEFAULT_REMAP_RULES",
    "RemapRule",
    "remap_field_type",
    "ScalarRegistry",
    "TypeRenderer",
    "ModelGenerator",
    "pascal_case",
    "capitalize",
]
