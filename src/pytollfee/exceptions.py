"""Library exceptions."""

from __future__ import annotations


class PyTollFeeError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        text = message if message is not None else self.detail
        super().__init__(*([text] if text is not None else []))
        self.error_code = error_code or self.default_error_code
        self.user_message = user_message

    def __str__(self) -> str:
        return self.detail or super().__str__()


class ValidationError(PyTollFeeError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class RangeError(PyTollFeeError):
    """Raised when a year is outside the supported calendar range."""

    error_type = "range"
    default_error_code = "out_of_range"


class ConfigError(PyTollFeeError):
    """Raised when the packaged fee schedule is malformed."""

    error_type = "config"
    default_error_code = "config_error"
