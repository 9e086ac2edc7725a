from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from sqlalchemy import Connection, text
from sqlalchemy.engine import RowMapping
from ulid import ULID

from billed.exceptions import StoreError
from billed.models.attachment import AttachmentPayload, AttachmentReference
from billed.models.bill import BillRecord
from billed.storage.base import ProofStorage
from billed.store.base import BillResource, Store

logger = logging.getLogger(__name__)

_COLUMNS = ("date", "status", "amount", "name", "vat", "pct", "commentary", "file_url", "file_name", "email", "type")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_record(row: RowMapping) -> BillRecord:
    amount = row["amount"]
    # NUMERIC columns may come back as Decimal.
    if amount is not None and not isinstance(amount, int):
        amount = float(amount)
        if amount.is_integer():
            amount = int(amount)
    return BillRecord(
        id=row["id"],
        date=row["date"],
        status=row["status"],
        amount=amount,
        name=row["name"],
        vat=row["vat"],
        pct=row["pct"],
        commentary=row["commentary"],
        file_url=row["file_url"],
        file_name=row["file_name"],
        email=row["email"],
        type=row["type"],
    )


class SQLAlchemyBillResource(BillResource):
    """Bills persisted in the ``bills`` table, proof images in a ProofStorage.

    Calls run on the caller's event loop; the connection is expected to be
    local (SQLite) or otherwise fast.
    """

    def __init__(self, conn: Connection, storage: ProofStorage) -> None:
        self.conn = conn
        self.storage = storage

    async def list(self) -> list[BillRecord]:
        rows = self.conn.execute(text("SELECT * FROM bills ORDER BY created_at, id")).mappings().all()
        logger.debug("Listed %d bills", len(rows))
        return [_row_to_record(row) for row in rows]

    async def create(self, payload: AttachmentPayload) -> AttachmentReference:
        key = str(ULID())
        file_url = self.storage.save_proof(key, payload)

        now = _now()
        self.conn.execute(
            text(
                "INSERT INTO bills (id, email, file_url, file_name, created_at, updated_at) "
                "VALUES (:id, :email, :file_url, :file_name, :created_at, :updated_at)"
            ),
            {
                "id": key,
                "email": payload.email,
                "file_url": file_url,
                "file_name": payload.file_name,
                "created_at": now,
                "updated_at": now,
            },
        )
        self.conn.commit()
        logger.info("Attachment stored: key=%s file=%s", key, payload.file_name)
        return AttachmentReference(file_url=file_url, key=key)

    async def update(self, data: str, selector: str) -> None:
        row = self.conn.execute(text("SELECT * FROM bills WHERE id = :id"), {"id": selector}).mappings().first()
        if row is None:
            raise StoreError(f"Unknown bill: {selector}")
        current = _row_to_record(row)
        record = BillRecord.model_validate({**current.to_wire(), **json.loads(data)})

        values = {column: getattr(record, column) for column in _COLUMNS}
        assignments = ", ".join(f"{column} = :{column}" for column in _COLUMNS)
        self.conn.execute(
            text(f"UPDATE bills SET {assignments}, updated_at = :updated_at WHERE id = :id"),
            {**values, "updated_at": _now(), "id": selector},
        )
        self.conn.commit()
        logger.info("Bill updated: key=%s", selector)


class SQLAlchemyStore(Store):
    def __init__(self, conn: Connection, storage: ProofStorage) -> None:
        self.conn = conn
        self.storage = storage

    def bills(self) -> BillResource:
        return SQLAlchemyBillResource(self.conn, self.storage)
