"""Payload validation through pydantic TypeAdapters.

Decoders produce raw payloads (JSON values or bare strings); this module
coerces them to the requested payload type.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import TypeAdapter, ValidationError

from quantified.domain.errors import QuantifiedParseError

# Payload kinds selectable by name (config and CLI).
PAYLOAD_TYPES: dict[str, Any] = {
    "json": Any,
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
}


@functools.lru_cache(maxsize=64)
def payload_adapter(payload_type: Any) -> TypeAdapter[Any]:
    """Return a cached TypeAdapter for *payload_type*."""
    return TypeAdapter(payload_type)


def resolve_payload_type(kind: str) -> Any:
    """Map a payload kind name to its Python type.

    Raises:
        KeyError: If *kind* is not a known payload kind.
    """
    try:
        return PAYLOAD_TYPES[kind]
    except KeyError:
        msg = f"Unknown payload type {kind!r} (expected one of: {', '.join(PAYLOAD_TYPES)})"
        raise KeyError(msg) from None


def type_name(payload_type: Any) -> str:
    return getattr(payload_type, "__name__", None) or str(payload_type)


def validate_payload(value: Any, payload_type: Any = Any, *, source: Any = None) -> Any:
    """Validate and coerce *value* to *payload_type*.

    ``Any`` accepts every value unchanged.

    Raises:
        QuantifiedParseError: If pydantic rejects the value.
    """
    if payload_type is Any:
        return value
    try:
        return payload_adapter(payload_type).validate_python(value)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        msg = f"Invalid {type_name(payload_type)} payload {value!r}: {reason}"
        raise QuantifiedParseError(msg, source=source) from exc
