from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

from billed.attachments import is_acceptable
from billed.constants import INVALID_ATTACHMENT_MESSAGE, ROUTES_PATH
from billed.exceptions import MissingAttachmentError
from billed.models.attachment import Attachment, AttachmentPayload, AttachmentReference
from billed.models.bill import BillRecord, BillStatus
from billed.models.session import Session
from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def parse_int(value: object) -> int | None:
    """Read the leading integer of a form value: '50.9' -> 50, 'abc' -> None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class SubmissionState(str, Enum):
    IDLE = "idle"
    ATTACHMENT_PENDING = "attachment_pending"
    ATTACHMENT_UPLOADED = "attachment_uploaded"
    SUBMITTED = "submitted"


class NewBillForm(BaseModel):
    """Raw values of the new-bill form fields, as typed by the user."""

    type: str = ""
    name: str = ""
    date: str = ""
    amount: str = ""
    vat: str = ""
    pct: str = ""
    commentary: str = ""


class NewBillSubmission:
    """Drives one new-bill form: proof upload first, then the bill itself."""

    def __init__(
        self,
        store: Store,
        session: Session,
        on_navigate: Callable[[str], None],
        on_alert: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.on_navigate = on_navigate
        self.on_alert = on_alert
        self.state = SubmissionState.IDLE
        self.selected: Attachment | None = None
        self.reference: AttachmentReference | None = None
        self.file_name: str | None = None

    @property
    def file_url(self) -> str | None:
        return self.reference.file_url if self.reference else None

    @property
    def bill_id(self) -> str | None:
        return self.reference.key if self.reference else None

    async def handle_change_file(self, attachment: Attachment) -> bool:
        """Validate and upload the selected proof.

        Returns False when the file is rejected; the selection is cleared and
        nothing is sent to the store. Upload failures propagate.
        """
        if not is_acceptable(attachment.file_name, attachment.media_type):
            logger.info("Rejected attachment %s (%s)", attachment.file_name, attachment.media_type)
            self.selected = None
            if self.on_alert is not None:
                self.on_alert(INVALID_ATTACHMENT_MESSAGE)
            return False

        self.selected = attachment
        self.reference = None
        self.file_name = None
        self.state = SubmissionState.ATTACHMENT_PENDING

        payload = AttachmentPayload(
            file_name=attachment.file_name,
            media_type=attachment.media_type,
            content=attachment.content,
            email=self.session.email,
        )
        try:
            reference = await self.store.bills().create(payload)
        except Exception:
            self.state = SubmissionState.IDLE
            raise

        self.reference = reference
        self.file_name = attachment.file_name
        self.state = SubmissionState.ATTACHMENT_UPLOADED
        logger.info("Attachment uploaded: key=%s file=%s", reference.key, attachment.file_name)
        return True

    def build_bill(self, form: NewBillForm) -> BillRecord:
        """Assemble the record to persist; an unreadable amount is sent as null."""
        pct = parse_int(form.pct)
        return BillRecord(
            email=self.session.email,
            type=form.type,
            name=form.name,
            amount=parse_int(form.amount),
            date=form.date,
            vat=form.vat.strip(),
            pct=settings.default_pct if pct is None else pct,
            commentary=form.commentary,
            file_url=self.file_url or "",
            file_name=self.file_name or "",
            status=BillStatus.PENDING.value,
        )

    async def handle_submit(self, form: NewBillForm) -> BillRecord:
        if self.state != SubmissionState.ATTACHMENT_UPLOADED or self.reference is None:
            raise MissingAttachmentError()

        bill = self.build_bill(form)
        await self.store.bills().update(data=bill.to_json(), selector=self.reference.key)
        logger.info("Bill submitted: key=%s amount=%s", self.reference.key, bill.amount)

        self.state = SubmissionState.SUBMITTED
        self.on_navigate(ROUTES_PATH["Bills"])
        return bill
