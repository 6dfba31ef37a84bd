"""Field-by-field validation of categorization output.

The AI response is untrusted. Each element is checked on its own so that one
malformed item never voids the valid ones around it.
"""

from dataclasses import dataclass, field
from typing import Any

from receiptly.extraction.models import FoodCategory, FoodItem

_VALID_CATEGORIES = frozenset(category.value for category in FoodCategory)


@dataclass
class FilterResult:
    """Items that passed validation plus the elements that were dropped."""

    items: list[FoodItem] = field(default_factory=list)
    rejected: list[Any] = field(default_factory=list)


def filter_food_items(raw: list[Any]) -> FilterResult:
    """Keep only elements that form a valid FoodItem, in original order."""
    result = FilterResult()
    for element in raw:
        item = _build_item(element)
        if item is None:
            result.rejected.append(element)
        else:
            result.items.append(item)
    return result


def _build_item(raw: Any) -> FoodItem | None:
    if not isinstance(raw, dict):
        return None
    name = raw.get("name")
    category = raw.get("category")
    if not isinstance(name, str) or not name.strip():
        return None
    if not isinstance(category, str) or category not in _VALID_CATEGORIES:
        return None
    return FoodItem(name=name.strip(), category=FoodCategory(category))
