from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ReceiptRecord:
    """Represents a row from the receipts table."""

    id: int
    user_id: str
    receipt_items: list[dict[str, Any]] = field(default_factory=list)
    raw_text: str | None = None
    created_at: datetime | None = None
