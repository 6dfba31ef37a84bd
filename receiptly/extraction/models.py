from dataclasses import dataclass
from enum import Enum


class FoodCategory(str, Enum):
    """The only two categories a food item may carry."""

    FRESH = "fresh food"
    PROCESSED = "processed food"


@dataclass(frozen=True)
class FoodItem:
    """A single categorized item read off a receipt."""

    name: str
    category: FoodCategory

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "category": self.category.value}
