class BilledError(Exception):
    """Base class for all billed exceptions."""


class DataFormatError(BilledError):
    """A stored value could not be parsed for display."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date value: {value!r}")


class AttachmentValidationError(BilledError):
    def __init__(self, file_name: str, media_type: str) -> None:
        self.file_name = file_name
        self.media_type = media_type
        super().__init__(f"Unsupported attachment: {file_name} ({media_type or 'unknown type'})")


class MissingAttachmentError(BilledError):
    def __init__(self) -> None:
        super().__init__("No uploaded attachment for this bill")


class StoreError(BilledError):
    """Raised by concrete stores when a remote call fails."""
