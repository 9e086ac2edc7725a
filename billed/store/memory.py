from __future__ import annotations

import json
import logging

from ulid import ULID

from billed.exceptions import StoreError
from billed.models.attachment import AttachmentPayload, AttachmentReference
from billed.models.bill import BillRecord
from billed.storage.base import ProofStorage
from billed.store.base import BillResource, Store

logger = logging.getLogger(__name__)


class InMemoryBillResource(BillResource):
    def __init__(self, records: dict[str, BillRecord], storage: ProofStorage | None = None) -> None:
        self.records = records
        self.storage = storage

    async def list(self) -> list[BillRecord]:
        result = [record.model_copy() for record in self.records.values()]
        logger.debug("Listed %d bills", len(result))
        return result

    async def create(self, payload: AttachmentPayload) -> AttachmentReference:
        key = str(ULID())
        if self.storage is not None:
            file_url = self.storage.save_proof(key, payload)
        else:
            file_url = f"memory://{key}/{payload.file_name}"
        self.records[key] = BillRecord(id=key, email=payload.email, file_url=file_url, file_name=payload.file_name)
        logger.info("Attachment stored: key=%s file=%s", key, payload.file_name)
        return AttachmentReference(file_url=file_url, key=key)

    async def update(self, data: str, selector: str) -> None:
        if selector not in self.records:
            raise StoreError(f"Unknown bill: {selector}")
        fields = {**self.records[selector].to_wire(), **json.loads(data), "id": selector}
        self.records[selector] = BillRecord.model_validate(fields)
        logger.info("Bill updated: key=%s", selector)


class InMemoryStore(Store):
    def __init__(self, records: list[BillRecord] | None = None, storage: ProofStorage | None = None) -> None:
        self.records: dict[str, BillRecord] = {}
        for record in records or []:
            key = record.id or str(ULID())
            self.records[key] = record.model_copy(update={"id": key})
        self.storage = storage

    def bills(self) -> BillResource:
        return InMemoryBillResource(self.records, self.storage)
