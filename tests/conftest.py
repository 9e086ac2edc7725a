"""Root conftest: in-memory SQLite connection, fake stores and sample bills."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Connection, create_engine
from sqlalchemy.engine import Engine

from billed.db import create_schema
from billed.models.attachment import AttachmentReference
from billed.models.bill import BillRecord
from billed.models.session import Session, UserType


@pytest.fixture()
def db_engine() -> Engine:
    return create_engine("sqlite:///:memory:")


@pytest.fixture()
def db_connection(db_engine: Engine) -> Connection:
    conn = db_engine.connect()
    create_schema(conn)
    yield conn
    conn.close()


def _sample_bill(**overrides) -> BillRecord:
    defaults = dict(
        id="47qAXb6fIm2zOKkLzMro",
        date="2004-04-04",
        status="pending",
        amount=400,
        name="encore",
        vat="80",
        pct=20,
        commentary="séminaire billed",
        file_url="https://test.storage.tld/v0/b/billable-677b6.a…f-1.jpg?alt=media&token=c1640e12",
        file_name="preview-facture-free-201801-pdf-1.jpg",
        email="a@a",
        type="Hôtel et logement",
    )
    defaults.update(overrides)
    return BillRecord(**defaults)


@pytest.fixture()
def sample_bill():
    return _sample_bill


@pytest.fixture()
def employee() -> Session:
    return Session(type=UserType.EMPLOYEE, email="employee@test.tld")


def make_store(
    records: list[BillRecord] | None = None,
    list_error: Exception | None = None,
    reference: AttachmentReference | None = None,
) -> MagicMock:
    """A Store double whose ``bills()`` always returns the same resource mock."""
    resource = MagicMock()
    if list_error is not None:
        resource.list = AsyncMock(side_effect=list_error)
    else:
        resource.list = AsyncMock(return_value=list(records or []))
    resource.create = AsyncMock(
        return_value=reference or AttachmentReference(file_url="https://test.com/file.jpg", key="123")
    )
    resource.update = AsyncMock(return_value=None)

    store = MagicMock()
    store.bills.return_value = resource
    return store


@pytest.fixture()
def fake_store():
    return make_store
