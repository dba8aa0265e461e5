"""Canonical text form of Quantified values.

Grammar::

    None | All | Some(<payload>) | Excluding(<payload>)

Variant names are case-insensitive on input. ``render`` always emits the
payload as JSON, so ``parse(render(q), T) == q`` for JSON payloads.
On input, payload text that is not valid JSON is taken as a bare string.
"""

from __future__ import annotations

import json
import re
from typing import Any

from quantified.domain.errors import QuantifiedParseError
from quantified.domain.payloads import validate_payload
from quantified.domain.quantified import Quantified
from quantified.domain.variants import VARIANT_NAMES, carries_payload, variant_from_name

_TEXT_PATTERN = re.compile(r"^\s*([A-Za-z]+)\s*(?:\((.*)\))?\s*$", re.DOTALL)


def render(value: Quantified[Any]) -> str:
    """Render *value* in canonical text form.

    Raises:
        TypeError: If the payload is not JSON-serializable.
    """
    name = VARIANT_NAMES[value.variant]
    if value.has_payload:
        return f"{name}({json.dumps(value.payload, ensure_ascii=False)})"
    return name


def decode_payload(raw: str, payload_type: Any = Any) -> Any:
    """Decode payload text: JSON first, bare string otherwise.

    A ``str`` payload type keeps the raw text for non-string JSON
    (``Some(5)`` parses to ``"5"``).
    """
    text = raw.strip()
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        return text
    if payload_type is str and not isinstance(decoded, str):
        return text
    return decoded


def parse(text: str, payload_type: Any = Any) -> Quantified[Any]:
    """Parse the canonical text form.

    Args:
        text: Input such as ``"Some(5)"`` or ``"all"``.
        payload_type: Type the payload is validated against (default: any).

    Raises:
        QuantifiedParseError: If *text* is malformed or the payload is invalid.
    """
    match = _TEXT_PATTERN.match(text)
    if match is None:
        msg = f"Not a Quantified value: {text!r}"
        raise QuantifiedParseError(msg, source=text)

    name, raw_payload = match.groups()
    try:
        variant = variant_from_name(name)
    except ValueError as exc:
        raise QuantifiedParseError(str(exc), source=text) from exc

    if not carries_payload(variant):
        if raw_payload is not None:
            msg = f"{VARIANT_NAMES[variant]} does not take a payload: {text!r}"
            raise QuantifiedParseError(msg, source=text)
        return Quantified(variant)

    if raw_payload is None or not raw_payload.strip():
        msg = f"{VARIANT_NAMES[variant]} requires a payload: {text!r}"
        raise QuantifiedParseError(msg, source=text)

    payload = validate_payload(decode_payload(raw_payload, payload_type), payload_type, source=text)
    return Quantified(variant, payload)
