"""HTML fragments shared by the per-kind renderers."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from html import escape
from typing import Any

from apiref.reference.models import _SymbolBase

KIND_LABELS = {
    "import": "Import",
    "function": "Function",
    "class": "Class",
    "interface": "Interface",
    "variable": "Variable",
    "typeAlias": "Type Alias",
    "enum": "Enum",
    "namespace": "Namespace",
    "moduleDoc": "Module",
}


def _items(value: Any) -> list[dict[str, Any]]:
    # Nested nodes are not validated; anything that is not a list of objects
    # renders as empty.
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def type_repr(ts_type: Any) -> str:
    """Best-effort text for a type node; empty when the type is unknown."""
    if isinstance(ts_type, str):
        return ts_type
    if not isinstance(ts_type, dict) or not ts_type:
        return ""
    repr_text = ts_type.get("repr")
    if isinstance(repr_text, str) and repr_text:
        return repr_text
    kind = ts_type.get("kind")
    if kind == "keyword" and isinstance(ts_type.get("keyword"), str):
        return ts_type["keyword"]
    type_ref = ts_type.get("typeRef")
    if kind == "typeRef" and isinstance(type_ref, dict):
        return str(type_ref.get("typeName", ""))
    return str(kind or "")


def param_repr(param: dict[str, Any]) -> str:
    """Render a parameter as ``name?: type`` (rest params as ``...name``)."""
    kind = param.get("kind")
    if kind == "rest" and isinstance(param.get("arg"), dict):
        name = "..." + str(param["arg"].get("name", "args"))
    else:
        name = str(param.get("name", "_"))
    if param.get("optional"):
        name += "?"
    type_text = type_repr(param.get("tsType"))
    return f"{name}: {type_text}" if type_text else name


def params_repr(params: Any) -> str:
    return ", ".join(param_repr(param) for param in _items(params))


def type_params_repr(type_params: Any) -> str:
    names = [str(tp["name"]) for tp in _items(type_params) if tp.get("name")]
    return f"<{', '.join(names)}>" if names else ""


def signature_repr(
    name: str, function_def: dict[str, Any], *, keyword: str = "function"
) -> str:
    """Render a TypeScript-like signature from a raw function definition.

    Methods pass an empty ``keyword`` to get ``grow(): void`` style output.
    """
    star = "*" if function_def.get("isGenerator") else ""
    lead = f"{keyword}{star} {name}" if keyword else f"{star}{name}"
    if function_def.get("isAsync"):
        lead = f"async {lead}"
    type_params = type_params_repr(function_def.get("typeParams"))
    signature = f"{lead}{type_params}({params_repr(function_def.get('params'))})"
    return_type = type_repr(function_def.get("returnType"))
    if return_type:
        signature += f": {return_type}"
    return signature


def heading(record: _SymbolBase, suffix: str = "") -> str:
    label = KIND_LABELS[record.doc_kind.value]
    return (
        f'<h1 class="symbol-title"><span class="symbol-kind">{label}</span> '
        f"{escape(record.name)}{escape(suffix)}</h1>"
    )


def js_doc_block(js_doc: dict[str, Any] | None) -> str:
    if not js_doc:
        return ""
    parts: list[str] = []
    doc = js_doc.get("doc")
    if isinstance(doc, str) and doc.strip():
        parts.append(f'<div class="symbol-doc">{escape(doc.strip())}</div>')
    for tag in _items(js_doc.get("tags")):
        if tag.get("kind") == "deprecated":
            note = f"Deprecated. {tag.get('doc') or ''}".strip()
            parts.append(f'<p class="deprecated">{escape(note)}</p>')
    return "\n".join(parts)


def code_block(text: str) -> str:
    return f'<pre class="signature"><code>{escape(text)}</code></pre>'


def section(title: str, inner: str) -> str:
    if not inner:
        return ""
    return f"<section>\n<h2>{escape(title)}</h2>\n{inner}\n</section>"


def definition_list(items: Iterable[tuple[str, str]]) -> str:
    rows = [f"<dt>{escape(term)}</dt><dd>{escape(value)}</dd>" for term, value in items]
    if not rows:
        return ""
    return "<dl>\n" + "\n".join(rows) + "\n</dl>"


def table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    if not rows:
        return ""
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = "\n".join(
        "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    return f"<table>\n<thead><tr>{head}</tr></thead>\n<tbody>\n{body}\n</tbody>\n</table>"


def record_dump(record: _SymbolBase) -> str:
    """Lossless JSON view of the full record, always present on every page."""
    dumped = json.dumps(record.to_payload(), indent=2, ensure_ascii=False, default=str)
    return (
        '<details class="symbol-dump-details" open>\n'
        "<summary>Raw symbol data</summary>\n"
        f'<pre class="symbol-dump">{escape(dumped)}</pre>\n'
        "</details>"
    )


def join_blocks(*blocks: str) -> str:
    return "\n".join(block for block in blocks if block)
