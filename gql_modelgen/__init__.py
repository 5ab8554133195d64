"""Generate C# model classes from GraphQL introspection schemas."""
