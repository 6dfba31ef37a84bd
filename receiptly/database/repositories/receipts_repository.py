import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from receiptly.database.connection import get_connection
from receiptly.database.models import ReceiptRecord
from receiptly.extraction.models import FoodItem
from receiptly.processor.exceptions import PersistenceError


class ReceiptsRepository:
    """Database operations for the receipts table."""

    def save_receipt(
        self,
        user_id: str,
        items: list[FoodItem],
        raw_text: str | None,
    ) -> int:
        """Insert a receipt with its items as JSONB and return the new id.

        Args:
            user_id: Identity of the uploading caller.
            items: Validated food items, possibly empty.
            raw_text: OCR text kept as a fallback, or None.

        Raises:
            PersistenceError: if the row cannot be written.
        """
        payload = [item.to_dict() for item in items]
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO receipts (user_id, receipt_items, raw_text)
                        VALUES (%s, %s, %s)
                        RETURNING id
                        """,
                        (user_id, Jsonb(payload), raw_text),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to save receipt record: {exc}") from exc

        if row is None:
            raise PersistenceError("Failed to save receipt record: no id returned")
        return int(row[0])

    def find_by_id(self, receipt_id: int) -> ReceiptRecord | None:
        """Find a receipt by ID. Useful for tests."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, receipt_items, raw_text, created_at
                    FROM receipts
                    WHERE id = %s
                    """,
                    (receipt_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return ReceiptRecord(
            id=row["id"],
            user_id=str(row["user_id"]),
            receipt_items=row["receipt_items"] or [],
            raw_text=row["raw_text"],
            created_at=row["created_at"],
        )
