"""Summary: Business category registry.

Importance: Provides the fixed, ordered set of categories every rule points at.
Alternatives: Store categories in the database and let users edit them.
"""

from __future__ import annotations

from types import MappingProxyType

from bizdetect.models import Category


OTHER_CATEGORY_ID = "other"


def _category(category_id: str, name: str, icon: str, color: str) -> Category:
    return Category(id=category_id, name=name, icon=icon, color=color, map_color=color)


BUSINESS_CATEGORIES: tuple[Category, ...] = (
    _category("grocery", "Grocery / Supermarket", "🛒", "#10B981"),
    _category("coffee", "Coffee / Café", "☕️", "#92400E"),
    _category("pharmacy", "Pharmacy / Drugstore", "💊", "#DC2626"),
    _category("gym", "Gym / Fitness / Sports", "🏋️", "#7C3AED"),
    _category("restaurant", "Restaurant / Fast Food", "🍔", "#B45309"),
    _category("convenience", "Convenience Store / Dépanneur", "🏪", "#7C2D12"),
    _category("bakery", "Bakery / Pâtisserie", "🥐", "#D97706"),
    _category("bar", "Bar / Pub / Nightlife", "🍺", "#059669"),
    _category("shopping", "Shopping / Clothing / Retail", "👗", "#EC4899"),
    _category("bank", "Bank / ATM / Finance", "🏦", "#1E40AF"),
    _category("hotel", "Hotel / Accommodation", "🏨", "#0F766E"),
    _category("gas", "Gas Station / Car Service", "⛽️", "#EA580C"),
    _category("hospital", "Hospital / Clinic / Dentist", "🏥", "#059669"),
    _category("school", "School / University", "🎓", "#7C2D12"),
    _category("library", "Library / Bookstore", "📚", "#1F2937"),
    _category("park", "Park / Nature / Trail", "🌳", "#16A34A"),
    _category("transportation", "Airport / Transportation", "✈️", "#2563EB"),
    _category("organic_grocery", "Organic Grocery / Bio", "🥦", "#16A34A"),
    _category("herbal_shop", "Herbal Shop / Herboristerie", "🌿", "#059669"),
    _category("health_cafe", "Health Café / Café Santé", "☕️", "#92400E"),
    _category("farmers_market", "Farmers Market / Marché Fermier", "🍯", "#D97706"),
    _category(OTHER_CATEGORY_ID, "Other", "📍", "#6B7280"),
)

_CATEGORIES_BY_ID = MappingProxyType({category.id: category for category in BUSINESS_CATEGORIES})


def get_category_by_id(category_id: str) -> Category | None:
    """Summary: Look up a category by identifier.

    Importance: Resolves stored category ids back to display metadata.
    Alternatives: Scan the registry tuple on every lookup.
    """

    return _CATEGORIES_BY_ID.get(category_id)


def get_all_categories() -> list[Category]:
    """Summary: Return every registered category in display order.

    Importance: Powers legends, filters, and category listings.
    Alternatives: Expose the registry tuple directly.
    """

    return list(BUSINESS_CATEGORIES)


def other_category() -> Category:
    """Summary: Return the fallback category."""

    return _CATEGORIES_BY_ID[OTHER_CATEGORY_ID]
