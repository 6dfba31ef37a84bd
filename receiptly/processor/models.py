from dataclasses import dataclass, field
from enum import Enum

from receiptly.extraction.models import FoodItem


class PipelineState(str, Enum):
    """States a single ingestion passes through."""

    VALIDATING = "validating"
    STORING = "storing"
    RECOGNIZING = "recognizing"
    EXTRACTING = "extracting"
    CLEANING_UP = "cleaning_up"
    ASSEMBLED = "assembled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ExtractionResult:
    """Terminal artifact of the pipeline, handed over to persistence."""

    raw_text: str | None
    items: list[FoodItem] = field(default_factory=list)


@dataclass(frozen=True)
class IngestionResult:
    """What the caller gets back once the receipt has been saved."""

    receipt_id: int
    raw_text: str | None
    items: list[FoodItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "success": True,
            "receipt_id": self.receipt_id,
            "items": [item.to_dict() for item in self.items],
        }
