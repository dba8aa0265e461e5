"""Exception taxonomy for Quantified values."""

from __future__ import annotations

from typing import Any


class QuantifiedError(Exception):
    """Base class for all quantified errors."""


class MissingPayloadError(QuantifiedError, ValueError):
    """Raised when reading the payload of a ``None`` or ``All`` value."""


class QuantifiedParseError(QuantifiedError, ValueError):
    """Raised when text or a mapping does not describe a valid Quantified value.

    Attributes:
        source: The input that failed to decode.
    """

    def __init__(self, message: str, *, source: Any = None) -> None:
        super().__init__(message)
        self.source = source
