from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from billed.exceptions import StoreError
from billed.models.attachment import AttachmentPayload, AttachmentReference
from billed.models.bill import BillRecord
from billed.store.base import BillResource, Store

logger = logging.getLogger(__name__)


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = f"Erreur {response.status_code}"
    try:
        detail = response.json().get("message")
    except (ValueError, AttributeError):
        detail = None
    if detail:
        message = f"{message}: {detail}"
    logger.warning("%s %s failed: %s", response.request.method, response.request.url, message)
    raise StoreError(message)


def _parse_record(item: object) -> BillRecord:
    """Build a BillRecord from one remote item, dropping the fields that do not fit.

    A non-string ``date`` is kept as its ``str()`` so display formatting can
    report it instead of losing it.
    """
    try:
        return BillRecord.model_validate(item)
    except ValidationError as exc:
        if not isinstance(item, dict):
            logger.warning("Unreadable bill %r: %s", item, exc)
            return BillRecord()
        invalid = {error["loc"][0] for error in exc.errors() if error["loc"]}
        logger.warning("Invalid fields %s for %r", sorted(map(str, invalid)), item)

    fields = {name: value for name, value in item.items() if name not in invalid}
    if "date" in invalid and item["date"] is not None:
        fields["date"] = str(item["date"])
    return BillRecord.model_validate(fields)


class HttpBillResource(BillResource):
    """The ``/bills`` entity of the Billed REST API."""

    def __init__(self, client: httpx.AsyncClient, token: str = "") -> None:
        self.client = client
        self.token = token

    def _headers(self, json_body: bool = False) -> dict[str, str]:
        headers: dict[str, str] = {}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def list(self) -> list[BillRecord]:
        response = await self.client.get("/bills", headers=self._headers())
        _raise_for_status(response)
        result = [_parse_record(item) for item in response.json()]
        logger.debug("Listed %d bills", len(result))
        return result

    async def create(self, payload: AttachmentPayload) -> AttachmentReference:
        # httpx sets the multipart Content-Type itself.
        response = await self.client.post(
            "/bills",
            files={"file": (payload.file_name, payload.content, payload.media_type or "application/octet-stream")},
            data={"email": payload.email},
            headers=self._headers(),
        )
        _raise_for_status(response)
        body = response.json()
        logger.info("Attachment uploaded: key=%s file=%s", body.get("key"), payload.file_name)
        return AttachmentReference(file_url=body.get("fileUrl", ""), key=str(body["key"]))

    async def update(self, data: str, selector: str) -> None:
        response = await self.client.patch(f"/bills/{selector}", content=data, headers=self._headers(json_body=True))
        _raise_for_status(response)
        logger.info("Bill updated: key=%s", selector)


class HttpStore(Store):
    def __init__(self, base_url: str, token: str = "", timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.token = token

    def bills(self) -> BillResource:
        return HttpBillResource(self.client, self.token)

    async def aclose(self) -> None:
        await self.client.aclose()
