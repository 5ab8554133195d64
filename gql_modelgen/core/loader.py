"""Load introspection schemas from local files.

Introspection results saved as ``.json`` are read directly. GraphQL SDL
(``.graphql`` / ``.graphqls`` files, or a directory of them) is built with
graphql-core and converted to the same introspection shape, so both sources
produce an identical Schema.
"""

import json
import os

from graphql import GraphQLError, build_schema, introspection_from_schema
from pydantic import ValidationError

from .errors import SchemaLoadError
from .schema import Schema


SDL_EXTENSIONS = (".graphql", ".graphqls")


class SchemaLoader:
    """Loads a Schema from an introspection JSON file or SDL files."""

    def __init__(self, schema_path: str):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = schema_path

    def load(self) -> Schema:
        """Read the schema source and return the parsed Schema."""
        if os.path.isfile(self.schema_path) and self.schema_path.lower().endswith(".json"):
            return self._load_introspection()
        return self._load_sdl()

    def _load_introspection(self) -> Schema:
        try:
            with open(self.schema_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(self.schema_path, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise SchemaLoadError(self.schema_path, "introspection result must be a JSON object")
        try:
            return Schema.from_introspection(data)
        except (ValidationError, ValueError) as e:
            raise SchemaLoadError(self.schema_path, str(e)) from e

    def _load_sdl(self) -> Schema:
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise SchemaLoadError(self.schema_path, "no .json, .graphql or .graphqls schema found")

        sources = []
        for file_path in schema_files:
            with open(file_path, encoding="utf-8") as f:
                sources.append(f.read())

        try:
            graphql_schema = build_schema("\n".join(sources))
        except (GraphQLError, TypeError) as e:
            # Semantic SDL errors surface as TypeError
            raise SchemaLoadError(self.schema_path, str(e)) from e
        return Schema.from_introspection(introspection_from_schema(graphql_schema))

    def _collect_schema_files(self) -> list[str]:
        """Collect all SDL files from the path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.lower().endswith(SDL_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.lower().endswith(SDL_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)
