import pytest
from pydantic import ValidationError

from apiref.reference import ReferenceContext


def test_root_trailing_slashes_are_stripped() -> None:
    assert ReferenceContext(root="/ref//", package_name="p").root == "/ref"


def test_root_may_be_empty() -> None:
    assert ReferenceContext(package_name="p").root == ""


@pytest.mark.parametrize("root", ["/with space", "ref", "https://example.com"])
def test_invalid_roots(root: str) -> None:
    with pytest.raises(ValidationError):
        ReferenceContext(root=root, package_name="p")


def test_package_name_required() -> None:
    with pytest.raises(ValidationError, match="Package name cannot be empty"):
        ReferenceContext(package_name="  ")


def test_context_is_immutable() -> None:
    context = ReferenceContext(package_name="p")

    with pytest.raises(ValidationError):
        context.package_name = "q"  # type: ignore[misc]
