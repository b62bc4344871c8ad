"""Shared page shell for reference pages.

Renderers hand the shell their inner markup; the shell owns the document
head, header and navigation. Any callable matching ``PageShell`` can replace
the default ``reference_page``.
"""

from __future__ import annotations

from html import escape
from typing import Protocol

from apiref.reference.models import NavigationContext, ReferenceContext
from apiref.reference.slugs import package_path


class PageShell(Protocol):
    def __call__(
        self,
        context: ReferenceContext,
        navigation: NavigationContext,
        title: str,
        body: str,
    ) -> str: ...


def reference_page(
    context: ReferenceContext,
    navigation: NavigationContext,
    title: str,
    body: str,
) -> str:
    """Wrap ``body`` in the standard HTML document used by the reference site."""
    package = escape(context.package_name)
    index_url = escape(package_path(context) + "/")

    nav_items = [f'    <li class="nav-category">{escape(navigation.category)}</li>']
    if navigation.current_item_name is not None:
        nav_items.append(
            '    <li class="nav-item" aria-current="page">'
            f"{escape(navigation.current_item_name)}</li>"
        )

    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{escape(title)} | {package}</title>",
        "</head>",
        "<body>",
        f'<header class="site-header"><a href="{index_url}">{package}</a></header>',
        '<nav class="reference-nav" aria-label="Reference">',
        '  <ol class="breadcrumbs">',
        *nav_items,
        "  </ol>",
        "</nav>",
        '<main class="reference-content">',
        body.strip(),
        "</main>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(lines)
