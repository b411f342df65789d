"""Domain exceptions.

The submission path never lets these escape: they are converted into an
outcome value by the adapters. Only `DonationValidationError` reaches callers,
and only when the input gate was bypassed.
"""

from __future__ import annotations

from typing import Any


class DonationError(Exception):
    """Base class for all donation-flow errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class DonationValidationError(DonationError, ValueError):
    """A candidate donation is not submittable (amount or email)."""


class ResponseFormatError(DonationError):
    """A 2xx response body could not be decoded into the expected shape."""


class ConfigurationError(DonationError):
    """Settings cannot be used as given (e.g. the donation URL is not http(s))."""
