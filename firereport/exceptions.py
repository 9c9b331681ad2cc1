"""
Custom exceptions for the fire report engine.

Provides a hierarchy of exceptions with error codes for consistent error handling.
"""
from typing import Optional, Dict, Any


class FireReportError(Exception):
    """
    Base exception for all fire report errors.

    Attributes:
        error_code: Unique error code (e.g., FRP-001)
        message: Human-readable error message
        details: Additional error context
    """
    error_code: str = "FRP-000"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or callers."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Input Errors (FRP-1XX)
class InvalidSimulationDataError(FireReportError):
    """Top-level simulation data is missing or not a structured record."""
    error_code = "FRP-100"

    def __init__(self, received_type: str, **kwargs):
        message = f"Invalid simulation data: expected a record, got {received_type}"
        super().__init__(message, details={"received_type": received_type}, **kwargs)


# Layout Errors (FRP-2XX)
class LayoutDriftError(FireReportError):
    """Positional row classification disagrees with the built row tags."""
    error_code = "FRP-200"

    def __init__(self, row_index: int, expected: str, resolved: str, **kwargs):
        message = f"Row {row_index} built as {expected} but resolved as {resolved}"
        super().__init__(
            message,
            details={"row_index": row_index, "expected": expected, "resolved": resolved},
            **kwargs,
        )


# Export Errors (FRP-3XX)
class WorkbookExportError(FireReportError):
    """Workbook could not be serialized or written."""
    error_code = "FRP-300"

    def __init__(self, path: str, message: str = None, **kwargs):
        msg = message or f"Failed to write workbook to {path}"
        super().__init__(msg, details={"path": path}, **kwargs)
