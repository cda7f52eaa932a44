"""Tests for custom exceptions."""
from pathlib import Path

from license_headers.exceptions import (
    AuditInvocationError,
    ConfigurationError,
    LicenseHeaderError,
    LicenseHeadersError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_is_exception(self) -> None:
        """Test that LicenseHeadersError inherits from Exception."""
        assert issubclass(LicenseHeadersError, Exception)

    def test_all_exceptions_catchable_by_base(self) -> None:
        """Test that all custom exceptions can be caught by the base."""
        exceptions = [
            ConfigurationError("config"),
            AuditInvocationError("audit"),
            LicenseHeaderError(Path("/build/rat.log")),
        ]

        for exc in exceptions:
            try:
                raise exc
            except LicenseHeadersError:
                pass
            else:
                raise AssertionError(f"{type(exc).__name__} not caught by base")


class TestLicenseHeaderError:
    """Tests for LicenseHeaderError."""

    def test_message_includes_report_path(self) -> None:
        """Test that the message points at the report."""
        error = LicenseHeaderError(Path("/build/reports/licenseHeaders/rat.log"))

        assert str(error) == (
            "License header problems were found! "
            "Full details: /build/reports/licenseHeaders/rat.log"
        )
        assert error.report_file == Path("/build/reports/licenseHeaders/rat.log")
        assert error.unapproved_lines == []

    def test_keeps_unapproved_lines(self) -> None:
        """Test that the logged section is kept on the exception."""
        error = LicenseHeaderError(Path("/r.log"), ["  src/Bad.java"])
        assert error.unapproved_lines == ["  src/Bad.java"]
