"""Batch rendering and file output for one package's reference pages.

The dispatcher and renderers never touch the filesystem; this module is the
orchestration layer that renders many records, isolates per-symbol failures
and writes the results to a directory tree keyed by page URL.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from shutil import rmtree
from typing import Any

from loguru import logger

from apiref.core.exceptions import RecordError
from apiref.reference.dispatcher import get_pages
from apiref.reference.layout import PageShell, reference_page
from apiref.reference.models import DocKind, EmittedPage, ReferenceContext, SymbolRecord
from apiref.reference.navigation import build_navigation
from apiref.reference.slugs import package_path

PAGE_FILENAME = "index.html"


@dataclass
class RenderFailure:
    position: int
    name: str | None
    error: RecordError


@dataclass
class RenderResult:
    pages: list[EmittedPage] = field(default_factory=list)
    failures: list[RenderFailure] = field(default_factory=list)
    collisions: dict[str, list[str]] = field(default_factory=dict)
    module_docs: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _render_one(
    record: SymbolRecord | Mapping[str, Any],
    context: ReferenceContext,
    shell: PageShell,
) -> tuple[list[EmittedPage], str | None]:
    sequence = get_pages(record, context, shell)
    module_doc: str | None = None
    parsed = sequence.record
    if parsed.doc_kind is DocKind.MODULE_DOC and parsed.js_doc:
        doc = parsed.js_doc.get("doc")
        if isinstance(doc, str) and doc.strip():
            module_doc = doc.strip()
    return sequence.to_list(), module_doc


def render_package(
    records: Iterable[SymbolRecord | Mapping[str, Any]],
    context: ReferenceContext,
    *,
    shell: PageShell = reference_page,
    max_workers: int = 1,
    fail_fast: bool = False,
) -> RenderResult:
    """Render every record of a package.

    Pages keep the input order regardless of ``max_workers``. A record that
    fails validation is logged and listed in ``failures`` unless
    ``fail_fast`` is set, in which case its ``RecordError`` is raised.
    URL collisions are reported, never resolved.
    """
    items = list(records)

    def attempt(
        record: SymbolRecord | Mapping[str, Any],
    ) -> tuple[list[EmittedPage], str | None] | RecordError:
        try:
            return _render_one(record, context, shell)
        except RecordError as exc:
            return exc

    if max_workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="apiref-render"
        ) as executor:
            outcomes = list(executor.map(attempt, items))
    else:
        outcomes = [attempt(item) for item in items]

    result = RenderResult()
    for position, outcome in enumerate(outcomes):
        if isinstance(outcome, RecordError):
            if fail_fast:
                raise outcome
            logger.warning(f"Skipping symbol record #{position}: {outcome}")
            result.failures.append(
                RenderFailure(position=position, name=outcome.name, error=outcome)
            )
            continue
        pages, module_doc = outcome
        result.pages.extend(pages)
        if module_doc:
            result.module_docs.append(module_doc)

    result.collisions = find_url_collisions(result.pages)
    for url, titles in result.collisions.items():
        logger.warning(f"URL collision at {url}: {', '.join(titles)}")

    logger.debug(
        f"Rendered {len(result.pages)} pages for {context.package_name} "
        f"({len(result.failures)} failed)"
    )
    return result


def find_url_collisions(pages: Iterable[EmittedPage]) -> dict[str, list[str]]:
    """Map each URL produced more than once to the titles that produced it."""
    seen: dict[str, list[str]] = {}
    for page in pages:
        seen.setdefault(page.url, []).append(page.title)
    return {url: titles for url, titles in seen.items() if len(titles) > 1}


def page_path(output_dir: Path, url: str) -> Path:
    """File location for a page URL: ``<output_dir>/<url>/index.html``."""
    return output_dir / url.lstrip("/") / PAGE_FILENAME


def write_reference_site(
    *,
    output_dir: Path,
    context: ReferenceContext,
    pages: list[EmittedPage],
    module_docs: list[str] | None = None,
    shell: PageShell = reference_page,
) -> list[Path]:
    """Write a package's pages, index and navigation data under ``output_dir``.

    The package directory is cleared first so pages of removed symbols do not
    linger. When two pages share a URL the later one wins.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    package_dir = output_dir / package_path(context).lstrip("/")
    _ensure_inside(output_dir, package_dir)

    if package_dir.exists():
        rmtree(package_dir)
    package_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for page in pages:
        path = page_path(output_dir, page.url)
        _ensure_inside(package_dir, path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_text(path, page.content)
        written.append(path)

    index_path = package_dir / PAGE_FILENAME
    _write_text(index_path, _render_package_index(context, pages, module_docs or [], shell))
    written.append(index_path)

    nav_path = package_dir / "nav.json"
    _write_text(nav_path, _render_nav_json(context, pages))
    written.append(nav_path)

    logger.info(f"Wrote {len(pages)} pages for {context.package_name} to {package_dir}")
    return written


def _ensure_inside(parent: Path, child: Path) -> None:
    parent_resolved = parent.resolve()
    child_resolved = child.resolve()
    if child_resolved == parent_resolved or not child_resolved.is_relative_to(
        parent_resolved
    ):
        raise ValueError(f"Refusing to write {child} outside of {parent}")


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def _sorted_pages(pages: list[EmittedPage]) -> list[EmittedPage]:
    return sorted(pages, key=lambda page: (page.title.lower(), page.url))


def _render_package_index(
    context: ReferenceContext,
    pages: list[EmittedPage],
    module_docs: list[str],
    shell: PageShell,
) -> str:
    body_parts = [f"<h1>{escape(context.package_name)}</h1>"]
    for doc in module_docs:
        body_parts.append(f'<div class="module-doc">{escape(doc)}</div>')
    if pages:
        body_parts.append('<ul class="symbol-index">')
        for page in _sorted_pages(pages):
            body_parts.append(
                f'  <li><a href="{escape(page.url)}">{escape(page.title)}</a></li>'
            )
        body_parts.append("</ul>")
    else:
        body_parts.append("<p>This package exports no documented symbols.</p>")
    return shell(
        context,
        build_navigation(context),
        context.package_name,
        "\n".join(body_parts),
    )


def _render_nav_json(context: ReferenceContext, pages: list[EmittedPage]) -> str:
    payload: dict[str, Any] = {
        "package": context.package_name,
        "category": build_navigation(context).category,
        "items": [{"title": page.title, "url": page.url} for page in _sorted_pages(pages)],
    }
    return json.dumps(payload, ensure_ascii=True, indent=2)
