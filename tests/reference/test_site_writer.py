import json
from pathlib import Path

import pytest

from apiref.core.exceptions import RecordError
from apiref.reference import (
    EmittedPage,
    ReferenceContext,
    find_url_collisions,
    page_path,
    render_package,
    write_reference_site,
)


def test_render_package_keeps_input_order(sample_records, context) -> None:
    records = [sample_records[kind] for kind in ("variable", "import", "class", "moduleDoc")]

    result = render_package(records, context)

    assert result.ok
    assert [page.url for page in result.pages] == [
        "/ref/mypkg/version.variable",
        "/ref/mypkg/foo.import",
        "/ref/mypkg/bar.class",
        "/ref/mypkg/bar.class.static",
    ]
    assert result.module_docs == ["Utilities for working with boxes."]


def test_threaded_rendering_matches_sequential(sample_records, context) -> None:
    records = list(sample_records.values()) * 3

    sequential = render_package(records, context)
    threaded = render_package(records, context, max_workers=4)

    assert threaded.pages == sequential.pages


def test_failures_are_isolated(sample_records, context) -> None:
    records = [
        sample_records["import"],
        {"kind": "macro", "name": "Broken"},
        {"kind": "function", "name": "NoPayload"},
        sample_records["enum"],
    ]

    result = render_package(records, context)

    assert not result.ok
    assert [page.title for page in result.pages] == ["Foo", "Color"]
    assert [(f.position, f.name) for f in result.failures] == [
        (1, "Broken"),
        (2, "NoPayload"),
    ]


def test_fail_fast_raises_first_error(sample_records, context) -> None:
    records = [sample_records["import"], {"kind": "function", "name": "NoPayload"}]

    with pytest.raises(RecordError):
        render_package(records, context, fail_fast=True)


def test_case_collisions_are_reported_not_renamed(sample_records, context) -> None:
    upper = sample_records["variable"]
    lower = dict(upper, name="version")

    result = render_package([upper, lower], context)

    assert result.collisions == {"/ref/mypkg/version.variable": ["VERSION", "version"]}
    assert len(result.pages) == 2


def test_find_url_collisions_ignores_unique_urls() -> None:
    pages = [EmittedPage("a", "/x/a", ""), EmittedPage("b", "/x/b", "")]

    assert find_url_collisions(pages) == {}


def test_page_path_uses_directory_index(tmp_path: Path) -> None:
    assert page_path(tmp_path, "/ref/mypkg/foo.import") == (
        tmp_path / "ref" / "mypkg" / "foo.import" / "index.html"
    )


def test_write_reference_site(tmp_path: Path, sample_records, context) -> None:
    result = render_package(sample_records.values(), context)

    written = write_reference_site(
        output_dir=tmp_path,
        context=context,
        pages=result.pages,
        module_docs=result.module_docs,
    )

    package_dir = tmp_path / "ref" / "mypkg"
    import_page = package_dir / "foo.import" / "index.html"
    assert import_page.read_text(encoding="utf-8") == result.pages[0].content
    assert import_page in written

    index = (package_dir / "index.html").read_text(encoding="utf-8")
    assert '<a href="/ref/mypkg/foo.import">Foo</a>' in index
    assert "Utilities for working with boxes." in index

    nav = json.loads((package_dir / "nav.json").read_text(encoding="utf-8"))
    assert nav["package"] == "mypkg"
    assert nav["category"] == "mypkg"
    titles = [item["title"] for item in nav["items"]]
    assert titles == sorted(titles, key=str.lower)
    assert {"title": "Foo", "url": "/ref/mypkg/foo.import"} in nav["items"]


def test_write_reference_site_removes_stale_pages(tmp_path: Path, sample_records, context) -> None:
    stale = tmp_path / "ref" / "mypkg" / "old.function" / "index.html"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")
    sibling = tmp_path / "ref" / "otherpkg" / "index.html"
    sibling.parent.mkdir(parents=True)
    sibling.write_text("keep", encoding="utf-8")

    result = render_package([sample_records["import"]], context)
    write_reference_site(output_dir=tmp_path, context=context, pages=result.pages)

    assert not stale.exists()
    assert sibling.read_text(encoding="utf-8") == "keep"


def test_write_reference_site_refuses_to_escape_output(tmp_path: Path) -> None:
    context = ReferenceContext(root="", package_name="..")

    with pytest.raises(ValueError, match="outside"):
        write_reference_site(output_dir=tmp_path / "site", context=context, pages=[])


def test_empty_package_index(tmp_path: Path, context) -> None:
    write_reference_site(output_dir=tmp_path, context=context, pages=[])

    index = (tmp_path / "ref" / "mypkg" / "index.html").read_text(encoding="utf-8")
    assert "exports no documented symbols" in index


def test_unusual_nested_shapes_do_not_break_the_batch(sample_records, context) -> None:
    odd = {
        "kind": "interface",
        "name": "Odd",
        "interfaceDef": {
            "properties": [{"name": "x", "tsType": "number"}],
            "methods": [{"name": "m", "params": 3, "returnType": ["void"]}],
            "callSignatures": [{"params": ["a", {"name": "b"}]}],
        },
    }
    records = [sample_records["import"], odd, sample_records["enum"]]

    result = render_package(records, context)

    assert result.ok
    assert [page.title for page in result.pages] == ["Foo", "Odd", "Color"]
    odd_page = result.pages[1].content
    assert "<td>x</td><td>number</td>" in odd_page
    assert "m()" in odd_page
    assert "(b)" in odd_page
