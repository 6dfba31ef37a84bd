from receiptly.extraction.base import BaseExtractor
from receiptly.extraction.extractor import FoodItemExtractor
from receiptly.extraction.factory import ExtractorFactory
from receiptly.extraction.lines import normalize_lines

__all__ = ["BaseExtractor", "ExtractorFactory", "FoodItemExtractor", "normalize_lines"]
