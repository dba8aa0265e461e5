"""quantified — a four-valued inclusion/exclusion value type."""

from __future__ import annotations

from quantified.domain.errors import MissingPayloadError, QuantifiedError, QuantifiedParseError
from quantified.domain.quantified import Quantified
from quantified.domain.text import parse, render
from quantified.domain.variants import Variant

__version__ = "0.1.0"

__all__ = [
    "MissingPayloadError",
    "Quantified",
    "QuantifiedError",
    "QuantifiedParseError",
    "Variant",
    "__version__",
    "parse",
    "render",
]
