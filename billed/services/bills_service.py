from __future__ import annotations

import logging
from collections.abc import Callable

from billed.constants import ROUTES_PATH
from billed.exceptions import DataFormatError
from billed.format import format_date, format_status
from billed.models.attachment import AttachmentView
from billed.models.bill import BillRecord, DisplayBill
from billed.models.session import Session
from billed.store.base import Store

logger = logging.getLogger(__name__)

FormattedBill = tuple[DisplayBill, DataFormatError | None]


def _format_bill(record: BillRecord) -> FormattedBill:
    """Render one record, returning the date error instead of raising it."""
    status = format_status(record.status)
    try:
        date = format_date(record.date)
    except DataFormatError as exc:
        return DisplayBill(**{**record.model_dump(), "status": status}), exc
    return DisplayBill(**{**record.model_dump(), "date": date, "status": status}), None


def _sort_key(item: tuple[BillRecord, FormattedBill]) -> tuple[bool, str]:
    # Unparsable dates order after every parsable one (sort is reversed).
    record, (_, error) = item
    if error is None:
        return True, record.date.strip()
    return False, record.date or ""


class BillsService:
    """Backs the employee's bills page."""

    def __init__(
        self,
        store: Store | None,
        session: Session,
        on_navigate: Callable[[str], None],
        on_view_attachment: Callable[[AttachmentView], None] | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.on_navigate = on_navigate
        self.on_view_attachment = on_view_attachment

    def handle_click_new_bill(self) -> None:
        self.on_navigate(ROUTES_PATH["NewBill"])

    @staticmethod
    def attachment_for(bill: BillRecord) -> AttachmentView:
        return AttachmentView(file_url=bill.file_url, file_name=bill.file_name)

    def handle_click_icon_eye(self, bill: BillRecord) -> AttachmentView:
        view = self.attachment_for(bill)
        if self.on_view_attachment is not None:
            self.on_view_attachment(view)
        return view

    async def get_bills(self) -> list[DisplayBill]:
        """Fetch every bill, render it for display and order by date, newest first.

        Store failures propagate untouched. A record whose date cannot be
        parsed keeps its raw date and is logged; it is never dropped.
        """
        if self.store is None:
            return []

        records = await self.store.bills().list()

        formatted: list[tuple[BillRecord, FormattedBill]] = []
        for record in records:
            result = _format_bill(record)
            if result[1] is not None:
                logger.warning("%s for %r", result[1], record.model_dump(by_alias=True))
            formatted.append((record, result))

        # sorted() stays stable with reverse=True.
        ordered = sorted(formatted, key=_sort_key, reverse=True)
        bills = [display for _, (display, _) in ordered]
        logger.debug("Loaded %d bills for %s", len(bills), self.session.email or "anonymous")
        return bills
