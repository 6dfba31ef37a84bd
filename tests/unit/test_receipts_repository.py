from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime
from typing import Any
from unittest.mock import MagicMock, patch

import psycopg
import pytest
from psycopg.types.json import Jsonb

from receiptly.database.repositories.receipts_repository import ReceiptsRepository
from receiptly.extraction.models import FoodCategory, FoodItem
from receiptly.processor.exceptions import PersistenceError


def _mock_connection(row: Any = None) -> tuple[MagicMock, MagicMock]:
    conn = MagicMock()
    cursor = MagicMock()
    cursor.fetchone.return_value = row
    conn.cursor.return_value.__enter__.return_value = cursor
    return conn, cursor


def _patch_connection(conn: MagicMock) -> Any:
    @contextmanager
    def _get_connection() -> Generator[MagicMock, None, None]:
        yield conn

    return patch(
        "receiptly.database.repositories.receipts_repository.get_connection",
        _get_connection,
    )


class TestSaveReceipt:
    def test_inserts_items_as_jsonb_and_returns_id(self) -> None:
        conn, cursor = _mock_connection(row=(55,))
        items = [FoodItem(name="Bananas", category=FoodCategory.FRESH)]

        with _patch_connection(conn):
            receipt_id = ReceiptsRepository().save_receipt("user-1", items, "BANANAS 1.20")

        assert receipt_id == 55
        sql, params = cursor.execute.call_args.args
        assert "INSERT INTO receipts" in sql
        assert "RETURNING id" in sql
        assert params[0] == "user-1"
        assert isinstance(params[1], Jsonb)
        assert params[1].obj == [{"name": "Bananas", "category": "fresh food"}]
        assert params[2] == "BANANAS 1.20"
        conn.commit.assert_called_once()

    def test_saves_empty_items_and_null_text(self) -> None:
        conn, cursor = _mock_connection(row=(7,))

        with _patch_connection(conn):
            ReceiptsRepository().save_receipt("user-1", [], None)

        _sql, params = cursor.execute.call_args.args
        assert params[1].obj == []
        assert params[2] is None

    def test_database_error_raises_persistence_error(self) -> None:
        conn, cursor = _mock_connection()
        cursor.execute.side_effect = psycopg.OperationalError("connection lost")

        with _patch_connection(conn):
            with pytest.raises(PersistenceError, match="Failed to save receipt record"):
                ReceiptsRepository().save_receipt("user-1", [], None)

        conn.commit.assert_not_called()

    def test_missing_returned_id_raises_persistence_error(self) -> None:
        conn, _cursor = _mock_connection(row=None)

        with _patch_connection(conn):
            with pytest.raises(PersistenceError, match="no id returned"):
                ReceiptsRepository().save_receipt("user-1", [], None)


class TestFindById:
    def test_returns_record(self) -> None:
        created = datetime(2025, 1, 10, 12, 0)
        conn, _cursor = _mock_connection(
            row={
                "id": 5,
                "user_id": "user-1",
                "receipt_items": [{"name": "Eggs", "category": "fresh food"}],
                "raw_text": "EGGS",
                "created_at": created,
            }
        )

        with _patch_connection(conn):
            record = ReceiptsRepository().find_by_id(5)

        assert record is not None
        assert record.id == 5
        assert record.receipt_items == [{"name": "Eggs", "category": "fresh food"}]
        assert record.created_at == created

    def test_returns_none_when_missing(self) -> None:
        conn, _cursor = _mock_connection(row=None)

        with _patch_connection(conn):
            assert ReceiptsRepository().find_by_id(999) is None
