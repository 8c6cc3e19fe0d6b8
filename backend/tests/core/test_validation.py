import pytest

from studygenie.core.exceptions import UploadValidationError
from studygenie.core.validation import (
    validate_file_type,
    validate_file_size,
    validate_upload,
    classify_file_type,
)


class TestValidateFileType:
    @pytest.mark.parametrize("mime", ["application/pdf", "image/jpeg", "image/jpg", "image/png"])
    def test_allowed_types(self, mime):
        assert validate_file_type(mime) == mime

    def test_normalizes_case_and_parameters(self):
        assert validate_file_type("Application/PDF; charset=binary") == "application/pdf"

    @pytest.mark.parametrize("mime", ["text/plain", "image/gif", "application/zip", "", None])
    def test_rejected_types(self, mime):
        with pytest.raises(UploadValidationError, match="Invalid file type"):
            validate_file_type(mime)


class TestValidateFileSize:
    def test_at_limit_allowed(self):
        assert validate_file_size(100, max_size=100) == 100

    def test_over_limit_rejected(self):
        with pytest.raises(UploadValidationError, match="File too large. Maximum size: 20MB"):
            validate_file_size(20 * 1024 * 1024 + 1, max_size=20 * 1024 * 1024)

    def test_empty_rejected(self):
        with pytest.raises(UploadValidationError, match="empty"):
            validate_file_size(0)

    def test_default_limit_is_20_mib(self):
        assert validate_file_size(20 * 1024 * 1024) == 20 * 1024 * 1024
        with pytest.raises(UploadValidationError):
            validate_file_size(20 * 1024 * 1024 + 1)


class TestValidateUpload:
    def test_returns_mime_type(self):
        assert validate_upload("image/png", 10) == "image/png"

    def test_type_checked_before_size(self):
        with pytest.raises(UploadValidationError, match="Invalid file type"):
            validate_upload("text/plain", 0)


class TestClassifyFileType:
    def test_pdf(self):
        assert classify_file_type("application/pdf") == "pdf"

    def test_images(self):
        assert classify_file_type("image/png") == "image"
        assert classify_file_type("image/jpeg") == "image"
