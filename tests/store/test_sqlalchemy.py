import asyncio
from unittest.mock import MagicMock

import pytest
from sqlalchemy import text

from billed.exceptions import StoreError
from billed.models.attachment import AttachmentPayload
from billed.models.bill import BillRecord
from billed.store.sqlalchemy import SQLAlchemyStore


@pytest.fixture()
def storage():
    mock = MagicMock()
    mock.save_proof.side_effect = lambda bill_key, payload: f"https://files.test/{bill_key}/{payload.file_name}"
    return mock


@pytest.fixture()
def store(db_connection, storage):
    return SQLAlchemyStore(db_connection, storage)


def _payload() -> AttachmentPayload:
    return AttachmentPayload(file_name="ticket.jpg", media_type="image/jpeg", content=b"jpeg", email="a@a")


class TestSQLAlchemyStore:
    def test_list_empty(self, store):
        assert asyncio.run(store.bills().list()) == []

    def test_create_saves_file_and_row(self, store, storage, db_connection):
        ref = asyncio.run(store.bills().create(_payload()))

        storage.save_proof.assert_called_once_with(ref.key, _payload())
        assert ref.file_url == f"https://files.test/{ref.key}/ticket.jpg"

        row = db_connection.execute(text("SELECT * FROM bills WHERE id = :id"), {"id": ref.key}).mappings().first()
        assert row["email"] == "a@a"
        assert row["file_name"] == "ticket.jpg"
        assert row["status"] == "pending"

    def test_create_then_update_then_list(self, store):
        bills = store.bills()
        ref = asyncio.run(bills.create(_payload()))
        data = BillRecord(
            date="2024-01-15",
            amount=50,
            name="Taxi ride",
            vat="10",
            pct=20,
            commentary="Business trip",
            file_url=ref.file_url,
            file_name="ticket.jpg",
            email="a@a",
            type="Transports",
        ).to_json()

        asyncio.run(bills.update(data=data, selector=ref.key))
        (record,) = asyncio.run(bills.list())

        assert record.id == ref.key
        assert record.date == "2024-01-15"
        assert record.amount == 50
        assert record.pct == 20
        assert record.type == "Transports"
        assert record.file_url == ref.file_url

    def test_partial_update_keeps_other_columns(self, store):
        bills = store.bills()
        ref = asyncio.run(bills.create(_payload()))
        asyncio.run(bills.update(data='{"status": "accepted"}', selector=ref.key))
        (record,) = asyncio.run(bills.list())
        assert record.status == "accepted"
        assert record.file_name == "ticket.jpg"

    def test_decimal_amount(self, store):
        bills = store.bills()
        ref = asyncio.run(bills.create(_payload()))
        asyncio.run(bills.update(data='{"amount": 12.5}', selector=ref.key))
        (record,) = asyncio.run(bills.list())
        assert record.amount == 12.5

    def test_update_unknown_selector(self, store):
        with pytest.raises(StoreError, match="Unknown bill"):
            asyncio.run(store.bills().update(data="{}", selector="missing"))

    def test_null_amount(self, store):
        bills = store.bills()
        ref = asyncio.run(bills.create(_payload()))
        asyncio.run(bills.update(data='{"amount": null, "name": "Taxi"}', selector=ref.key))
        (record,) = asyncio.run(bills.list())
        assert record.amount is None
        assert record.name == "Taxi"
