"""URL derivation for reference pages.

Every page URL has the shape ``{root}/{package}/{name}.{suffix}`` with the
package and symbol name lowercased and percent-encoded. The suffix encodes
the symbol kind, so a function and a type alias sharing a name get distinct
URLs.

Two symbols whose names differ only by case still map to the same URL.
That is accepted behavior; ``render_package`` reports such collisions but
does not rename anything.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from apiref.reference.models import DocKind, ReferenceContext

KIND_URL_SUFFIXES: Mapping[DocKind, str] = MappingProxyType(
    {
        DocKind.IMPORT: "import",
        DocKind.FUNCTION: "function",
        DocKind.CLASS: "class",
        DocKind.INTERFACE: "interface",
        DocKind.VARIABLE: "variable",
        DocKind.TYPE_ALIAS: "typealias",
        DocKind.ENUM: "enum",
        DocKind.NAMESPACE: "namespace",
        DocKind.MODULE_DOC: "moduledoc",
    }
)

if set(KIND_URL_SUFFIXES) != set(DocKind) or len(
    set(KIND_URL_SUFFIXES.values())
) != len(KIND_URL_SUFFIXES):
    raise RuntimeError("Every symbol kind needs its own URL suffix")


def _url_segment(value: str, *, safe: str = "@") -> str:
    # quote() emits uppercase hex escapes; the output is ASCII so lower() is safe
    return quote(value.lower(), safe=safe).lower()


def package_path(context: ReferenceContext) -> str:
    """Return ``{root}/{package}``, the prefix shared by a package's pages."""
    return f"{context.root}/{_url_segment(context.package_name, safe='@/')}"


def slugify_symbol(name: str, kind: DocKind | str, *subpages: str) -> str:
    """Return the last URL segment for a symbol, e.g. ``foo.import``."""
    suffix = KIND_URL_SUFFIXES[DocKind(kind)]
    parts = [_url_segment(name), suffix]
    parts.extend(_url_segment(sub) for sub in subpages)
    return ".".join(parts)


def derive_url(
    context: ReferenceContext, name: str, kind: DocKind | str, *subpages: str
) -> str:
    """Derive the canonical URL of a symbol page.

    ``subpages`` add dotted segments for pages a symbol is split into, e.g.
    ``derive_url(ctx, "Foo", "class", "static")`` ends in ``foo.class.static``.
    """
    return f"{package_path(context)}/{slugify_symbol(name, kind, *subpages)}"
