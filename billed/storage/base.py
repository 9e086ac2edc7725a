import logging
from abc import ABC, abstractmethod

from billed.attachments import MEDIA_TYPE_EXTENSIONS
from billed.models.attachment import AttachmentPayload

logger = logging.getLogger(__name__)

PROOF_FILE_STEM = "justificatif"


class ProofStorage(ABC):
    """Keeps the proof image of each bill, one file per bill key.

    Files are laid out as ``<prefix>/<bill key>/justificatif.<ext>``.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix.strip("/")

    def key_for(self, bill_key: str, media_type: str) -> str:
        ext = MEDIA_TYPE_EXTENSIONS.get((media_type or "").lower(), "")
        name = f"{bill_key}/{PROOF_FILE_STEM}{ext}"
        return f"{self.prefix}/{name}" if self.prefix else name

    def save_proof(self, bill_key: str, payload: AttachmentPayload) -> str:
        """Store the uploaded proof of ``bill_key`` and return the URL that displays it."""
        key = self.key_for(bill_key, payload.media_type)
        url = self._write(key, payload.content, payload.media_type or "image/jpeg")
        logger.info("Proof saved for bill %s: %s (%d bytes)", bill_key, key, len(payload.content))
        return url

    @abstractmethod
    def _write(self, key: str, content: bytes, media_type: str) -> str:
        """Write ``content`` under ``key`` and return its URL."""
