"""Shared fixtures: a small content-API style introspection result."""

import json

import pytest


def named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(name, type_ref, description=None):
    return {
        "name": name,
        "description": description,
        "args": [],
        "type": type_ref,
        "isDeprecated": False,
        "deprecationReason": None,
    }


@pytest.fixture
def introspection_data():
    """One OBJECT (2 fields), INPUT_OBJECT (1), INTERFACE (1 field, 1 implementor),
    ENUM (3 values), plus scalars and an introspection type that are skipped."""
    return {
        "data": {
            "__schema": {
                "queryType": {"name": "Query"},
                "types": [
                    {
                        "kind": "OBJECT",
                        "name": "Publication",
                        "description": "A publication.",
                        "fields": [
                            field("id", non_null(named("SCALAR", "ID"))),
                            field("title", named("SCALAR", "String"), "The title."),
                        ],
                        "inputFields": None,
                        "interfaces": [named("INTERFACE", "Node")],
                        "enumValues": None,
                        "possibleTypes": None,
                    },
                    {
                        "kind": "SCALAR",
                        "name": "String",
                        "description": "Built-in string.",
                        "fields": None,
                        "inputFields": None,
                        "interfaces": None,
                        "enumValues": None,
                        "possibleTypes": None,
                    },
                    {
                        "kind": "INPUT_OBJECT",
                        "name": "InputItemFilter",
                        "description": None,
                        "fields": None,
                        "inputFields": [
                            {
                                "name": "namespaceIds",
                                "description": None,
                                "type": list_of(named("SCALAR", "Int")),
                                "defaultValue": None,
                            }
                        ],
                        "interfaces": None,
                        "enumValues": None,
                        "possibleTypes": None,
                    },
                    {
                        "kind": "INTERFACE",
                        "name": "Node",
                        "description": None,
                        "fields": [field("id", non_null(named("SCALAR", "ID")))],
                        "inputFields": None,
                        "interfaces": [],
                        "enumValues": None,
                        "possibleTypes": [named("OBJECT", "Publication")],
                    },
                    {
                        "kind": "ENUM",
                        "name": "ContentNamespace",
                        "description": "Content namespaces.",
                        "fields": None,
                        "inputFields": None,
                        "interfaces": None,
                        "enumValues": [
                            {"name": "Sites", "description": None, "isDeprecated": False},
                            {"name": "Docs", "description": None, "isDeprecated": False},
                            {"name": "UNKNOWN", "description": None, "isDeprecated": False},
                        ],
                        "possibleTypes": None,
                    },
                    {
                        "kind": "OBJECT",
                        "name": "__Type",
                        "description": None,
                        "fields": [field("name", named("SCALAR", "String"))],
                        "inputFields": None,
                        "interfaces": [],
                        "enumValues": None,
                        "possibleTypes": None,
                    },
                ],
            }
        }
    }


@pytest.fixture
def introspection_file(tmp_path, introspection_data):
    """The sample introspection result saved as JSON."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(introspection_data))
    return path
