"""Reference page rendering public API.

This module exposes a stable import surface for the CLI and tests, while
implementation details live in smaller modules.
"""

from __future__ import annotations

from apiref.reference.dispatcher import RENDERERS, PageSequence, get_pages
from apiref.reference.layout import PageShell, reference_page
from apiref.reference.loader import load_symbol_records
from apiref.reference.models import (
    DocKind,
    EmittedPage,
    NavigationContext,
    ReferenceContext,
    SymbolRecord,
)
from apiref.reference.navigation import build_navigation
from apiref.reference.records import parse_record, parse_records
from apiref.reference.site_writer import (
    RenderFailure,
    RenderResult,
    find_url_collisions,
    page_path,
    render_package,
    write_reference_site,
)
from apiref.reference.slugs import (
    KIND_URL_SUFFIXES,
    derive_url,
    package_path,
    slugify_symbol,
)

__all__: list[str] = [
    "DocKind",
    "EmittedPage",
    "KIND_URL_SUFFIXES",
    "NavigationContext",
    "PageSequence",
    "PageShell",
    "RENDERERS",
    "ReferenceContext",
    "RenderFailure",
    "RenderResult",
    "SymbolRecord",
    "build_navigation",
    "derive_url",
    "find_url_collisions",
    "get_pages",
    "load_symbol_records",
    "package_path",
    "page_path",
    "parse_record",
    "parse_records",
    "reference_page",
    "render_package",
    "slugify_symbol",
    "write_reference_site",
]
