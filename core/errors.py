from __future__ import annotations

from typing import Any, Dict, Optional


class MediaArchiveError(Exception):
    """Base error for the media archive app."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(MediaArchiveError):
    """A media record is missing a required field or has an unknown enum value."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value, **kwargs})


class DataSourceError(MediaArchiveError):
    """The configured row source could not be read."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, "DATA_SOURCE_ERROR", {"source": source, **kwargs})


class TableInputError(MediaArchiveError, TypeError):
    """Columns or rows handed to the table renderer break its contract."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, "TABLE_INPUT_ERROR", {"argument": argument, **kwargs})
