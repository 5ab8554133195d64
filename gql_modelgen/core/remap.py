"""Field type remapping.

A few well-known fields are declared as plain integers in the content schema
but carry enum semantics. Remap rules bind such a field name to a richer
replacement type, whatever type the schema declares for it.
"""

from dataclasses import dataclass

from .schema import LIST, SchemaField, TypeRef


CONTENT_NAMESPACE = "ContentNamespace"
ITEM_TYPE = "ItemType"


@dataclass(frozen=True)
class RemapRule:
    """Replace the type of every field called ``field_name``."""
    field_name: str
    replacement: TypeRef


DEFAULT_REMAP_RULES: tuple[RemapRule, ...] = (
    RemapRule("namespaceId", TypeRef(kind="ENUM", name=CONTENT_NAMESPACE)),
    RemapRule(
        "namespaceIds",
        TypeRef(kind=LIST, of_type=TypeRef(kind="ENUM", name=CONTENT_NAMESPACE)),
    ),
    RemapRule("itemType", TypeRef(kind="ENUM", name=ITEM_TYPE)),
)


def remap_field_type(
    field: SchemaField,
    rules: tuple[RemapRule, ...] = DEFAULT_REMAP_RULES,
) -> TypeRef:
    """Return the type to emit for a field.

    The first rule whose name matches the field name exactly wins and its
    replacement is returned as-is; otherwise the declared type is returned.
    """
    for rule in rules:
        if rule.field_name == field.name:
            return rule.replacement
    return field.type_ref
