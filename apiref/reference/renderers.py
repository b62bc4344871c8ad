"""Per-kind page renderers.

Each renderer is a generator taking ``(record, context, shell)`` and yielding
the ``EmittedPage`` objects for one symbol. Renderers are pure: the same
record and context always produce the same pages. They build the
kind-specific view and the raw record dump, and leave the page chrome to
``shell``.
"""

from __future__ import annotations

from collections.abc import Iterator
from html import escape
from typing import Any

from apiref.reference.layout import PageShell
from apiref.reference.markup import (
    code_block,
    definition_list,
    heading,
    js_doc_block,
    join_blocks,
    param_repr,
    params_repr,
    record_dump,
    section,
    signature_repr,
    table,
    type_params_repr,
    type_repr,
)
from apiref.reference.models import (
    ClassNode,
    EmittedPage,
    EnumNode,
    FunctionNode,
    ImportNode,
    InterfaceNode,
    ModuleDocNode,
    NamespaceNode,
    ReferenceContext,
    TypeAliasNode,
    VariableNode,
    _SymbolBase,
)
from apiref.reference.navigation import build_navigation
from apiref.reference.slugs import derive_url

STATIC_SUBPAGE = "static"


def _emit(
    record: _SymbolBase,
    context: ReferenceContext,
    shell: PageShell,
    view: str,
    *subpages: str,
    title: str | None = None,
) -> EmittedPage:
    page_title = title or record.name
    body = join_blocks(view, record_dump(record))
    return EmittedPage(
        title=page_title,
        url=derive_url(context, record.name, record.doc_kind, *subpages),
        content=shell(context, build_navigation(context, record), page_title, body),
    )


def _member_rows(members: list[dict[str, Any]]) -> list[list[str]]:
    rows: list[list[str]] = []
    for member in members:
        name = str(member.get("name", ""))
        function_def = member.get("functionDef")
        if isinstance(function_def, dict):
            detail = signature_repr(name, function_def, keyword="")
        else:
            detail = type_repr(member.get("tsType"))
        flags = [
            flag
            for flag, key in (
                ("static", "isStatic"),
                ("readonly", "readonly"),
                ("optional", "optional"),
                ("abstract", "isAbstract"),
            )
            if member.get(key)
        ]
        if member.get("kind") in ("getter", "setter"):
            flags.append(str(member["kind"]))
        rows.append([name, detail, " ".join(flags)])
    return rows


def render_import_pages(
    record: ImportNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    import_def = record.import_def
    view = join_blocks(
        heading(record),
        js_doc_block(record.js_doc),
        definition_list(
            [
                ("Source module", import_def.src),
                ("Imported name", import_def.imported or record.name),
            ]
        ),
    )
    yield _emit(record, context, shell, view)


def render_function_pages(
    record: FunctionNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    function_def = record.function_def.model_dump(mode="json", by_alias=True)
    params = [
        [param_repr(param), "optional" if param.get("optional") else ""]
        for param in record.function_def.params
    ]
    view = join_blocks(
        heading(record),
        code_block(signature_repr(record.name, function_def)),
        js_doc_block(record.js_doc),
        section("Parameters", table(["Parameter", ""], params)),
        section(
            "Returns",
            code_block(type_repr(record.function_def.return_type))
            if record.function_def.return_type
            else "",
        ),
    )
    yield _emit(record, context, shell, view)


def render_class_pages(
    record: ClassNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    class_def = record.class_def
    header = f"{'abstract ' if class_def.is_abstract else ''}class {record.name}"
    header += type_params_repr(class_def.type_params)
    if class_def.extends:
        header += f" extends {class_def.extends}"
    implemented = [type_repr(item) for item in class_def.implements]
    if implemented:
        header += f" implements {', '.join(implemented)}"

    constructors = [
        [f"constructor({params_repr(ctor.get('params'))})"]
        for ctor in class_def.constructors
    ]
    instance_properties = [p for p in class_def.properties if not p.get("isStatic")]
    instance_methods = [m for m in class_def.methods if not m.get("isStatic")]
    statics = [
        member
        for member in [*class_def.properties, *class_def.methods]
        if member.get("isStatic")
    ]

    view = join_blocks(
        heading(record),
        code_block(header),
        js_doc_block(record.js_doc),
        section("Constructors", table(["Signature"], constructors)),
        section(
            "Properties",
            table(["Name", "Type", ""], _member_rows(instance_properties)),
        ),
        section("Methods", table(["Name", "Signature", ""], _member_rows(instance_methods))),
    )
    if statics:
        static_url = derive_url(context, record.name, record.doc_kind, STATIC_SUBPAGE)
        view = join_blocks(
            view,
            section(
                "Static members",
                f'<p><a href="{escape(static_url)}">{len(statics)} static member(s)</a></p>',
            ),
        )
    yield _emit(record, context, shell, view)

    if statics:
        static_view = join_blocks(
            heading(record, " static members"),
            table(["Name", "Type", ""], _member_rows(statics)),
        )
        yield _emit(
            record,
            context,
            shell,
            static_view,
            STATIC_SUBPAGE,
            title=f"{record.name} static members",
        )


def render_interface_pages(
    record: InterfaceNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    interface_def = record.interface_def
    header = f"interface {record.name}{type_params_repr(interface_def.type_params)}"
    extended = [type_repr(item) for item in interface_def.extends]
    if extended:
        header += f" extends {', '.join(extended)}"

    call_signatures = [
        [
            f"({params_repr(sig.get('params'))})"
            + (f": {type_repr(sig.get('tsType'))}" if sig.get("tsType") else "")
        ]
        for sig in interface_def.call_signatures
    ]
    index_signatures = [
        [
            f"[{params_repr(sig.get('params'))}]"
            + (f": {type_repr(sig.get('tsType'))}" if sig.get("tsType") else "")
        ]
        for sig in interface_def.index_signatures
    ]
    methods: list[list[str]] = []
    for method in interface_def.methods:
        name = str(method.get("name", ""))
        params = params_repr(method.get("params"))
        return_type = type_repr(method.get("returnType"))
        methods.append([name, f"{name}({params})" + (f": {return_type}" if return_type else "")])

    view = join_blocks(
        heading(record),
        code_block(header),
        js_doc_block(record.js_doc),
        section(
            "Properties",
            table(["Name", "Type", ""], _member_rows(interface_def.properties)),
        ),
        section("Methods", table(["Name", "Signature"], methods)),
        section("Call signatures", table(["Signature"], call_signatures)),
        section("Index signatures", table(["Signature"], index_signatures)),
    )
    yield _emit(record, context, shell, view)


def render_variable_pages(
    record: VariableNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    variable_def = record.variable_def
    declaration = f"{variable_def.kind or 'const'} {record.name}"
    type_text = type_repr(variable_def.ts_type)
    if type_text:
        declaration += f": {type_text}"
    view = join_blocks(
        heading(record),
        code_block(declaration),
        js_doc_block(record.js_doc),
    )
    yield _emit(record, context, shell, view)


def render_type_alias_pages(
    record: TypeAliasNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    alias_def = record.type_alias_def
    declaration = f"type {record.name}{type_params_repr(alias_def.type_params)}"
    declaration += f" = {type_repr(alias_def.ts_type) or 'unknown'}"
    view = join_blocks(
        heading(record),
        code_block(declaration),
        js_doc_block(record.js_doc),
    )
    yield _emit(record, context, shell, view)


def render_enum_pages(
    record: EnumNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    members = [
        [str(member.get("name", "")), type_repr(member.get("init"))]
        for member in record.enum_def.members
    ]
    view = join_blocks(
        heading(record),
        js_doc_block(record.js_doc),
        section("Members", table(["Name", "Value"], members)),
    )
    yield _emit(record, context, shell, view)


def render_namespace_pages(
    record: NamespaceNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    elements = [
        [str(element.get("name", "")), str(element.get("kind", ""))]
        for element in record.namespace_def.elements
    ]
    view = join_blocks(
        heading(record),
        js_doc_block(record.js_doc),
        section("Elements", table(["Name", "Kind"], elements)),
    )
    yield _emit(record, context, shell, view)


def render_module_doc_pages(
    record: ModuleDocNode, context: ReferenceContext, shell: PageShell
) -> Iterator[EmittedPage]:
    # Module documentation is folded into the package index, not its own page.
    yield from ()
