"""Tests for domain and storage exceptions (error_code, message, details)."""

import pytest

from app.domain.exceptions import (
    PortfolioException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.infrastructure.exceptions import (
    StorageConfigurationError,
    StorageException,
    StorageNotInitializedError,
    StorageUploadError,
    StorageValidationError,
)


def test_portfolio_exception_default_error_code() -> None:
    """Base PortfolioException uses class name as error_code when not provided."""
    exc = PortfolioException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PortfolioException"
    assert exc.details == {}


def test_portfolio_exception_custom_error_code_and_details() -> None:
    exc = PortfolioException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert str(exc) == "Oops"


def test_to_dict_is_api_error_body() -> None:
    exc = ValidationException("Thumbnail is required", field="thumbnail")
    assert exc.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "Thumbnail is required",
        "details": {"field": "thumbnail"},
    }


def test_validation_exception_without_field() -> None:
    """ValidationException with no field has empty details."""
    exc = ValidationException("Invalid")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("project", "abc123")
    assert exc.message == "project not found: abc123"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "project", "resource_id": "abc123"}


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SQL_NOT_CONFIGURED"
    assert "SQL database" in exc.message


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (StorageConfigurationError("r2", "R2_BUCKET_NAME"), "STORAGE_CONFIGURATION_ERROR"),
        (StorageNotInitializedError("r2", "missing R2_ACCESS_KEY_ID"), "STORAGE_NOT_INITIALIZED"),
        (StorageUploadError("images/1-a.png", "timeout"), "STORAGE_UPLOAD_ERROR"),
        (StorageValidationError("a.png", "empty file"), "STORAGE_VALIDATION_ERROR"),
    ],
)
def test_storage_exceptions_share_base(exc: StorageException, code: str) -> None:
    """Storage errors are PortfolioExceptions so the API maps them centrally."""
    assert isinstance(exc, StorageException)
    assert isinstance(exc, PortfolioException)
    assert exc.error_code == code


def test_storage_configuration_error_names_setting() -> None:
    exc = StorageConfigurationError("r2", "R2_BUCKET_NAME")
    assert exc.message == "R2_BUCKET_NAME not configured for r2 storage"
    assert exc.details == {"backend": "r2", "setting": "R2_BUCKET_NAME"}
