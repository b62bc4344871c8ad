"""Data models for the reference renderer.

Symbol records mirror the node shape of ``deno doc --json`` output: a ``kind``
discriminant, a ``name``, shared metadata and one kind-specific payload
(``functionDef``, ``classDef`` ...). Records are validated into a closed,
discriminated union so a kind without a model cannot be represented.

Validation is strict and only accepts the canonical camelCase keys, so a
value of the wrong type is rejected rather than coerced. Each record also
keeps a copy of the mapping it was validated from; ``to_payload()`` returns
that copy for the structured dump on every page.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class DocKind(str, Enum):
    """Closed set of symbol kinds the renderer knows about."""

    IMPORT = "import"
    FUNCTION = "function"
    CLASS = "class"
    INTERFACE = "interface"
    VARIABLE = "variable"
    TYPE_ALIAS = "typeAlias"
    ENUM = "enum"
    NAMESPACE = "namespace"
    MODULE_DOC = "moduleDoc"


class _DocModel(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        strict=True,
        alias_generator=to_camel,
    )


# Kind-specific payloads. Only the keys the renderers read are declared;
# everything else rides along as extra data.


class ImportDef(_DocModel):
    src: str
    imported: str | None = None


class FunctionDef(_DocModel):
    params: list[dict[str, Any]] = Field(default_factory=list)
    return_type: dict[str, Any] | None = None
    is_async: bool = False
    is_generator: bool = False
    type_params: list[dict[str, Any]] = Field(default_factory=list)


class ClassDef(_DocModel):
    is_abstract: bool = False
    extends: str | None = None
    implements: list[dict[str, Any]] = Field(default_factory=list)
    constructors: list[dict[str, Any]] = Field(default_factory=list)
    properties: list[dict[str, Any]] = Field(default_factory=list)
    methods: list[dict[str, Any]] = Field(default_factory=list)
    type_params: list[dict[str, Any]] = Field(default_factory=list)


class InterfaceDef(_DocModel):
    extends: list[dict[str, Any]] = Field(default_factory=list)
    properties: list[dict[str, Any]] = Field(default_factory=list)
    methods: list[dict[str, Any]] = Field(default_factory=list)
    call_signatures: list[dict[str, Any]] = Field(default_factory=list)
    index_signatures: list[dict[str, Any]] = Field(default_factory=list)
    type_params: list[dict[str, Any]] = Field(default_factory=list)


class VariableDef(_DocModel):
    ts_type: dict[str, Any] | None = None
    kind: str | None = None


class TypeAliasDef(_DocModel):
    ts_type: dict[str, Any] | None = None
    type_params: list[dict[str, Any]] = Field(default_factory=list)


class EnumDef(_DocModel):
    members: list[dict[str, Any]] = Field(default_factory=list)


class NamespaceDef(_DocModel):
    elements: list[dict[str, Any]] = Field(default_factory=list)


class _SymbolBase(_DocModel):
    name: str
    location: dict[str, Any] | None = None
    declaration_kind: str | None = None
    js_doc: dict[str, Any] | None = None

    _source: dict[str, Any] | None = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def keep_source(cls, data: Any, handler: Any) -> Any:
        record = handler(data)
        if isinstance(data, Mapping):
            record._source = copy.deepcopy(dict(data))
        return record

    @property
    def doc_kind(self) -> DocKind:
        return DocKind(self.kind)  # type: ignore[attr-defined]

    def to_payload(self) -> dict[str, Any]:
        """Return the record exactly as supplied, unknown keys included."""
        if self._source is not None:
            return copy.deepcopy(self._source)
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ImportNode(_SymbolBase):
    kind: Literal["import"]
    import_def: ImportDef


class FunctionNode(_SymbolBase):
    kind: Literal["function"]
    function_def: FunctionDef


class ClassNode(_SymbolBase):
    kind: Literal["class"]
    class_def: ClassDef


class InterfaceNode(_SymbolBase):
    kind: Literal["interface"]
    interface_def: InterfaceDef


class VariableNode(_SymbolBase):
    kind: Literal["variable"]
    variable_def: VariableDef


class TypeAliasNode(_SymbolBase):
    kind: Literal["typeAlias"]
    type_alias_def: TypeAliasDef


class EnumNode(_SymbolBase):
    kind: Literal["enum"]
    enum_def: EnumDef


class NamespaceNode(_SymbolBase):
    kind: Literal["namespace"]
    namespace_def: NamespaceDef


class ModuleDocNode(_SymbolBase):
    kind: Literal["moduleDoc"]


SymbolRecord = Annotated[
    Union[
        ImportNode,
        FunctionNode,
        ClassNode,
        InterfaceNode,
        VariableNode,
        TypeAliasNode,
        EnumNode,
        NamespaceNode,
        ModuleDocNode,
    ],
    Field(discriminator="kind"),
]


class ReferenceContext(BaseModel):
    """Read-only settings shared by every page render of one package."""

    model_config = ConfigDict(frozen=True)

    root: str = ""
    package_name: str
    category: str | None = None

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Require an empty or absolute path prefix without whitespace."""
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Root '{v}' must not contain whitespace")
        normalized = v.rstrip("/")
        if normalized and not normalized.startswith("/"):
            raise ValueError(f"Root '{v}' must be empty or start with '/'")
        return normalized

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Package name cannot be empty")
        return v


@dataclass(frozen=True)
class NavigationContext:
    """Per-render projection used by the page shell to mark the active entry."""

    category: str
    current_item_name: str | None


@dataclass(frozen=True)
class EmittedPage:
    title: str
    url: str
    content: str
