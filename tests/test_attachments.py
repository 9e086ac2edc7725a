import pytest

from billed.attachments import (
    file_extension,
    is_acceptable,
    validate_attachment,
)
from billed.exceptions import AttachmentValidationError


class TestIsAcceptable:
    def test_jpg(self):
        assert is_acceptable("x.jpg", "image/jpeg") is True

    def test_jpeg(self):
        assert is_acceptable("x.jpeg", "image/jpeg") is True

    def test_png(self):
        assert is_acceptable("x.png", "image/png") is True

    def test_uppercase_extension(self):
        assert is_acceptable("SCAN.JPG", "image/jpeg") is True

    def test_pdf_rejected(self):
        assert is_acceptable("x.pdf", "application/pdf") is False

    def test_document_rejected(self):
        assert is_acceptable("x.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document") is False

    def test_image_extension_with_wrong_type(self):
        assert is_acceptable("x.jpg", "application/pdf") is False

    def test_unknown_type(self):
        assert is_acceptable("x.png", "") is False

    def test_no_extension(self):
        assert is_acceptable("photo", "image/jpeg") is False

    def test_gif_rejected(self):
        assert is_acceptable("x.gif", "image/gif") is False


class TestFileExtension:
    def test_browser_fake_path(self):
        assert file_extension("C:\\fakepath\\facture.PNG") == "png"

    def test_dot_in_directory(self):
        assert file_extension("/tmp/a.b/photo") == ""


class TestValidateAttachment:
    def test_valid(self):
        validate_attachment("x.jpg", "image/jpeg")

    def test_invalid(self):
        with pytest.raises(AttachmentValidationError, match="x.pdf"):
            validate_attachment("x.pdf", "application/pdf")
