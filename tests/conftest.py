import copy
import os

import pytest

from apiref.reference import ReferenceContext

_NUMBER = {"repr": "number", "kind": "keyword", "keyword": "number"}
_STRING = {"repr": "string", "kind": "keyword", "keyword": "string"}
_LOCATION = {"filename": "file:///mod.ts", "line": 1, "col": 0, "byteIndex": 0}

SAMPLE_RECORDS: dict[str, dict] = {
    "import": {
        "kind": "import",
        "name": "Foo",
        "location": _LOCATION,
        "declarationKind": "export",
        "importDef": {"src": "file:///foo.ts", "imported": "Foo"},
    },
    "function": {
        "kind": "function",
        "name": "Bar",
        "location": _LOCATION,
        "declarationKind": "export",
        "jsDoc": {"doc": "Adds two numbers."},
        "functionDef": {
            "params": [
                {"kind": "identifier", "name": "a", "optional": False, "tsType": _NUMBER},
                {"kind": "identifier", "name": "b", "optional": True, "tsType": _NUMBER},
            ],
            "returnType": _NUMBER,
            "hasBody": True,
            "isAsync": False,
            "isGenerator": False,
            "typeParams": [],
            "decorators": [],
        },
    },
    "class": {
        "kind": "class",
        "name": "Bar",
        "location": _LOCATION,
        "declarationKind": "export",
        "jsDoc": {"doc": "A growable box.", "tags": [{"kind": "deprecated", "doc": "Use Box."}]},
        "classDef": {
            "isAbstract": False,
            "constructors": [
                {
                    "name": "constructor",
                    "params": [
                        {"kind": "identifier", "name": "size", "optional": False, "tsType": _NUMBER}
                    ],
                }
            ],
            "properties": [
                {"name": "size", "tsType": _NUMBER, "readonly": True, "isStatic": False},
                {
                    "name": "DEFAULT",
                    "tsType": {"repr": "Bar", "kind": "typeRef", "typeRef": {"typeName": "Bar"}},
                    "readonly": False,
                    "isStatic": True,
                },
            ],
            "methods": [
                {
                    "name": "grow",
                    "kind": "method",
                    "isStatic": False,
                    "functionDef": {
                        "params": [],
                        "returnType": {"repr": "void", "kind": "keyword", "keyword": "void"},
                        "isAsync": True,
                    },
                }
            ],
            "extends": "Base",
            "implements": [
                {"repr": "Sized", "kind": "typeRef", "typeRef": {"typeName": "Sized"}}
            ],
            "typeParams": [],
        },
    },
    "interface": {
        "kind": "interface",
        "name": "Options",
        "declarationKind": "export",
        "interfaceDef": {
            "extends": [{"repr": "BaseOptions", "kind": "typeRef", "typeRef": {"typeName": "BaseOptions"}}],
            "properties": [{"name": "verbose", "optional": True, "tsType": {"repr": "boolean", "kind": "keyword", "keyword": "boolean"}}],
            "methods": [{"name": "log", "params": [{"kind": "identifier", "name": "msg", "tsType": _STRING}], "returnType": None}],
            "callSignatures": [],
            "indexSignatures": [{"params": [{"kind": "identifier", "name": "key", "tsType": _STRING}], "tsType": _STRING, "readonly": False}],
            "typeParams": [{"name": "T"}],
        },
    },
    "variable": {
        "kind": "variable",
        "name": "VERSION",
        "declarationKind": "export",
        "variableDef": {"tsType": _STRING, "kind": "const"},
    },
    "typeAlias": {
        "kind": "typeAlias",
        "name": "Bar",
        "declarationKind": "export",
        "typeAliasDef": {"tsType": {"repr": "string | number", "kind": "union"}, "typeParams": []},
    },
    "enum": {
        "kind": "enum",
        "name": "Color",
        "declarationKind": "export",
        "enumDef": {
            "members": [
                {"name": "Red", "init": {"repr": "0", "kind": "literal"}},
                {"name": "Green", "init": {"repr": "1", "kind": "literal"}},
            ]
        },
    },
    "namespace": {
        "kind": "namespace",
        "name": "util",
        "declarationKind": "export",
        "namespaceDef": {
            "elements": [
                {"kind": "function", "name": "helper", "functionDef": {"params": []}},
                {"kind": "variable", "name": "flag", "variableDef": {"kind": "let"}},
            ]
        },
    },
    "moduleDoc": {
        "kind": "moduleDoc",
        "name": "",
        "jsDoc": {"doc": "Utilities for working with boxes."},
    },
}


@pytest.fixture
def sample_records() -> dict[str, dict]:
    """Deep copy of one realistic record per symbol kind."""
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def context() -> ReferenceContext:
    return ReferenceContext(root="/ref", package_name="mypkg")


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run without APIREF_* variables leaking in."""
    for key in [k for k in os.environ.keys() if k.startswith("APIREF_")]:
        monkeypatch.delenv(key, raising=False)
    yield
