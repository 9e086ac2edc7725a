from abc import ABC, abstractmethod

from billed.models.attachment import AttachmentPayload, AttachmentReference
from billed.models.bill import BillRecord


class BillResource(ABC):
    @abstractmethod
    async def list(self) -> list[BillRecord]:
        """Return every stored bill, in store order."""
        ...

    @abstractmethod
    async def create(self, payload: AttachmentPayload) -> AttachmentReference:
        """Upload a proof file and reserve the bill it belongs to."""
        ...

    @abstractmethod
    async def update(self, data: str, selector: str) -> None:
        """Write the JSON-serialized bill to the entry addressed by ``selector``."""
        ...


class Store(ABC):
    @abstractmethod
    def bills(self) -> BillResource: ...
