"""Domain service: Catalog Filter.

Pure projection of the catalog onto what the register shows for the
current tab, search text and category chip. Cheap enough to recompute on
every keystroke.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from salonpos.domain.model.catalog import CatalogItem, Product, Service


class CatalogTab(Enum):
    SERVICES = "services"
    PRODUCTS = "products"


def filter_catalog(
    tab: CatalogTab,
    search_term: str,
    active_category: str | None,
    services: Sequence[Service],
    products: Sequence[Product],
) -> list[CatalogItem]:
    """Return the active tab's items matching the search and category.

    Search is a case-insensitive substring match on name, category or
    description. Products must also be active.
    """
    needle = search_term.strip().lower()

    if tab is CatalogTab.SERVICES:
        return [s for s in services if _matches(s, needle, active_category)]

    return [
        p
        for p in products
        if p.is_active and _matches(p, needle, active_category)
    ]


def category_chips(
    tab: CatalogTab,
    services: Sequence[Service],
    products: Sequence[Product],
) -> list[str]:
    """Category names offered as filters for ``tab``.

    Service categories keep catalog order; product categories are sorted.
    """
    if tab is CatalogTab.SERVICES:
        seen: dict[str, None] = {}
        for service in services:
            seen.setdefault(service.category, None)
        return list(seen)
    return sorted({p.category for p in products})


def _matches(item: CatalogItem, needle: str, active_category: str | None) -> bool:
    matches_search = (
        needle in item.name.lower()
        or needle in item.category.lower()
        or needle in (item.description or "").lower()
    )
    matches_category = not active_category or item.category == active_category
    return matches_search and matches_category
