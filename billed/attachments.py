from __future__ import annotations

from billed.exceptions import AttachmentValidationError

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png"}
ALLOWED_MEDIA_TYPES = {"image/jpeg", "image/jpg", "image/png"}

MEDIA_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
}


def file_extension(file_name: str) -> str:
    """Return the lowercased extension without the dot: 'Scan.JPG' -> 'jpg'"""
    # Browsers report "C:\fakepath\name.jpg" for file inputs.
    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[-1].lower()


def is_acceptable(file_name: str, media_type: str) -> bool:
    if file_extension(file_name or "") not in ALLOWED_EXTENSIONS:
        return False
    return (media_type or "").lower() in ALLOWED_MEDIA_TYPES


def validate_attachment(file_name: str, media_type: str) -> None:
    if not is_acceptable(file_name, media_type):
        raise AttachmentValidationError(file_name, media_type)
