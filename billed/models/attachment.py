from __future__ import annotations

from pydantic import BaseModel


class Attachment(BaseModel):
    """A file picked by the user as the proof for a new bill."""

    file_name: str
    media_type: str = ""
    content: bytes = b""


class AttachmentPayload(BaseModel):
    """What gets uploaded by ``BillResource.create``."""

    file_name: str
    media_type: str = ""
    content: bytes = b""
    email: str = ""


class AttachmentReference(BaseModel):
    file_url: str
    key: str


class AttachmentView(BaseModel):
    """Data handed to the dialog that shows an existing bill's proof."""

    file_url: str
    file_name: str = ""
