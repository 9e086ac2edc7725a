from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BillStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class ExpenseType(str, Enum):
    TRANSPORTS = "Transports"
    RESTAURANTS = "Restaurants et bars"
    HOTEL = "Hôtel et logement"
    ONLINE_SERVICES = "Services en ligne"
    IT = "IT et électronique"
    EQUIPMENT = "Equipement et matériel"
    OFFICE_SUPPLIES = "Fournitures de bureau"


class BillRecord(BaseModel):
    """One expense report as stored remotely.

    ``date`` and ``status`` stay raw strings: records coming back from a store
    are not guaranteed to be well formed.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    id: str | None = None
    date: str | None = ""
    status: str | None = BillStatus.PENDING.value
    amount: int | float | None = 0
    name: str = ""
    vat: str = ""
    pct: int | None = None
    commentary: str = ""
    file_url: str = Field(default="", alias="fileUrl")
    file_name: str = Field(default="", alias="fileName")
    email: str = ""
    type: str = ""

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude={"id"})


class DisplayBill(BillRecord):
    """A BillRecord whose date and status were rendered for display."""
