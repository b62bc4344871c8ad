"""Route symbol records to their per-kind renderer.

``RENDERERS`` must cover the whole ``DocKind`` set; this module refuses to
import otherwise, so a new kind cannot ship without a renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from apiref.reference.layout import PageShell, reference_page
from apiref.reference.models import DocKind, EmittedPage, ReferenceContext, SymbolRecord
from apiref.reference.records import parse_record
from apiref.reference.renderers import (
    render_class_pages,
    render_enum_pages,
    render_function_pages,
    render_import_pages,
    render_interface_pages,
    render_module_doc_pages,
    render_namespace_pages,
    render_type_alias_pages,
    render_variable_pages,
)

PageRenderer = Callable[[Any, ReferenceContext, PageShell], Iterator[EmittedPage]]

RENDERERS: Mapping[DocKind, PageRenderer] = MappingProxyType(
    {
        DocKind.IMPORT: render_import_pages,
        DocKind.FUNCTION: render_function_pages,
        DocKind.CLASS: render_class_pages,
        DocKind.INTERFACE: render_interface_pages,
        DocKind.VARIABLE: render_variable_pages,
        DocKind.TYPE_ALIAS: render_type_alias_pages,
        DocKind.ENUM: render_enum_pages,
        DocKind.NAMESPACE: render_namespace_pages,
        DocKind.MODULE_DOC: render_module_doc_pages,
    }
)

_missing = sorted(kind.value for kind in DocKind if kind not in RENDERERS)
if _missing:
    raise RuntimeError(f"No page renderer registered for kinds: {', '.join(_missing)}")


class PageSequence:
    """Finite, restartable, lazy sequence of the pages for one symbol.

    Every iteration runs the renderer again; renderers are pure, so each pass
    yields identical pages.
    """

    def __init__(
        self,
        record: SymbolRecord,
        context: ReferenceContext,
        shell: PageShell,
        renderer: PageRenderer,
    ) -> None:
        self.record = record
        self.context = context
        self._shell = shell
        self._renderer = renderer

    def __iter__(self) -> Iterator[EmittedPage]:
        return iter(self._renderer(self.record, self.context, self._shell))

    def to_list(self) -> list[EmittedPage]:
        return list(self)

    def __repr__(self) -> str:
        return (
            f"PageSequence(kind={self.record.kind!r}, name={self.record.name!r}, "
            f"package={self.context.package_name!r})"
        )


def get_pages(
    record: SymbolRecord | Mapping[str, Any],
    context: ReferenceContext,
    shell: PageShell = reference_page,
) -> PageSequence:
    """Select the renderer for ``record`` and return its page sequence.

    Raw mappings are validated first, so malformed records and unknown kinds
    raise here, before any page is produced.

    Raises:
        UnknownKindError: the record's kind is outside the closed set
        RecordError: the record is structurally invalid
    """
    parsed = parse_record(record)
    return PageSequence(parsed, context, shell, RENDERERS[parsed.doc_kind])
