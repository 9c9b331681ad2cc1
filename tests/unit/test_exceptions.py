"""
Unit tests for custom exceptions.

Tests exception hierarchy and error formatting.
"""
import pytest

from firereport.exceptions import (
    FireReportError,
    InvalidSimulationDataError,
    LayoutDriftError,
    WorkbookExportError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_base_exception(self):
        """Test base FireReportError."""
        exc = FireReportError("Test error")

        assert exc.error_code == "FRP-000"
        assert exc.message == "Test error"
        assert exc.details == {}

    def test_invalid_simulation_data(self):
        """Test InvalidSimulationDataError inherits correctly."""
        exc = InvalidSimulationDataError("NoneType")

        assert isinstance(exc, FireReportError)
        assert exc.error_code == "FRP-100"
        assert "NoneType" in exc.message
        assert exc.details == {"received_type": "NoneType"}

    def test_layout_drift(self):
        """Test LayoutDriftError."""
        exc = LayoutDriftError(29, "table_header", "keyvalue")

        assert isinstance(exc, FireReportError)
        assert exc.error_code == "FRP-200"
        assert "29" in exc.message

    def test_workbook_export(self):
        """Test WorkbookExportError with default and custom messages."""
        exc = WorkbookExportError("/tmp/report.xlsx")
        custom = WorkbookExportError("/tmp/report.xlsx", message="disk full")

        assert exc.error_code == "FRP-300"
        assert exc.message == "Failed to write workbook to /tmp/report.xlsx"
        assert custom.message == "disk full"
        assert custom.details == {"path": "/tmp/report.xlsx"}


class TestExceptionDetails:
    """Tests for exception details handling."""

    def test_to_dict(self):
        """Test dictionary form used in log events."""
        exc = InvalidSimulationDataError("str")

        assert exc.to_dict() == {
            "error": True,
            "error_code": "FRP-100",
            "message": "Invalid simulation data: expected a record, got str",
            "details": {"received_type": "str"},
        }

    def test_error_code_override(self):
        """Test error code can be overridden per instance."""
        exc = FireReportError("Custom", error_code="FRP-999")

        assert exc.error_code == "FRP-999"

    def test_exception_can_be_raised(self):
        """Test that exceptions can be raised and caught."""
        with pytest.raises(FireReportError) as exc_info:
            raise WorkbookExportError("out.xlsx")

        assert exc_info.value.error_code == "FRP-300"
