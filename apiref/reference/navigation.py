from __future__ import annotations

from apiref.reference.models import NavigationContext, ReferenceContext, _SymbolBase


def build_navigation(
    context: ReferenceContext, record: _SymbolBase | None = None
) -> NavigationContext:
    """Project the context and the symbol being rendered onto navigation state.

    ``category`` falls back to the package name when the context carries no
    override. Package-level pages (no record) have no current item.
    """
    return NavigationContext(
        category=context.category or context.package_name,
        current_item_name=record.name if record is not None else None,
    )
