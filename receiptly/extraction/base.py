from abc import ABC, abstractmethod

from receiptly.extraction.models import FoodItem


class BaseExtractor(ABC):
    """Contract for all food item extraction adapters."""

    @abstractmethod
    def extract(self, lines: list[str]) -> list[FoodItem]:
        """Extract categorized food items from candidate receipt lines.

        Args:
            lines: Cleaned OCR lines, in receipt order.

        Returns:
            Validated food items. Empty on any failure; never raises.
        """
