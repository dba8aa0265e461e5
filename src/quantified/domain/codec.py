"""Mapping codec and pydantic integration for Quantified values.

Dict form::

    {"variant": "some", "value": 5}
    {"variant": "all"}

Pydantic models may declare ``Quantified[int]`` fields; input is accepted
as a Quantified instance, a text form, or a dict form, and output is
serialized to the dict form.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, get_args

from pydantic import BaseModel, GetCoreSchemaHandler, ValidationError, field_validator
from pydantic_core import CoreSchema, core_schema

from quantified.domain.errors import QuantifiedParseError
from quantified.domain.payloads import validate_payload
from quantified.domain.quantified import Quantified
from quantified.domain.text import parse
from quantified.domain.variants import VARIANT_NAMES, Variant, carries_payload


class QuantifiedRecord(BaseModel):
    """Validated dict form of a Quantified value."""

    model_config = {"frozen": True, "extra": "forbid"}

    variant: Variant
    value: Any = None

    @field_validator("variant", mode="before")
    @classmethod
    def _lower_variant(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def to_dict(value: Quantified[Any]) -> dict[str, Any]:
    """Encode *value* as a plain dict."""
    data: dict[str, Any] = {"variant": str(value.variant)}
    if value.has_payload:
        data["value"] = value.payload
    return data


def from_dict(data: Mapping[str, Any], payload_type: Any = Any) -> Quantified[Any]:
    """Decode a dict form produced by :func:`to_dict`.

    Raises:
        QuantifiedParseError: On unknown variants, extra keys, or a payload
            that is missing, unexpected, or invalid for *payload_type*.
    """
    try:
        record = QuantifiedRecord.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "input"
        msg = f"Invalid Quantified mapping ({location}): {error['msg']}"
        raise QuantifiedParseError(msg, source=data) from exc

    has_value = "value" in record.model_fields_set
    name = VARIANT_NAMES[record.variant]
    if carries_payload(record.variant):
        if not has_value:
            msg = f"{name} requires a 'value' key"
            raise QuantifiedParseError(msg, source=data)
        return Quantified(record.variant, validate_payload(record.value, payload_type, source=data))
    if has_value:
        msg = f"{name} does not take a 'value' key"
        raise QuantifiedParseError(msg, source=data)
    return Quantified(record.variant)


def coerce(value: Any, payload_type: Any = Any) -> Quantified[Any]:
    """Interpret *value* as a Quantified of *payload_type*.

    Accepts a Quantified instance (payload re-validated), a text form,
    or a dict form.
    """
    if isinstance(value, Quantified):
        if value.has_payload:
            return Quantified(
                value.variant, validate_payload(value.payload, payload_type, source=value)
            )
        return value
    if isinstance(value, str):
        return parse(value, payload_type)
    if isinstance(value, Mapping):
        return from_dict(value, payload_type)
    msg = f"Cannot interpret {type(value).__name__} as a Quantified value"
    raise QuantifiedParseError(msg, source=value)


def quantified_core_schema(
    source_type: Any, handler: GetCoreSchemaHandler
) -> CoreSchema:
    """Build the pydantic core schema for ``Quantified`` / ``Quantified[T]``.

    Validation goes through :func:`coerce`. The JSON schema advertises the
    text form or the dict form, with the payload typed after ``T``.
    """
    args = get_args(source_type)
    payload_type = args[0] if args else Any
    if isinstance(payload_type, TypeVar):
        payload_type = Any

    def validate(value: Any) -> Quantified[Any]:
        return coerce(value, payload_type)

    if payload_type is Any:
        payload_schema = core_schema.any_schema()
    else:
        payload_schema = handler.generate_schema(payload_type)
    record_schema = core_schema.typed_dict_schema(
        {
            "variant": core_schema.typed_dict_field(
                core_schema.literal_schema([variant.value for variant in Variant])
            ),
            "value": core_schema.typed_dict_field(payload_schema, required=False),
        }
    )

    return core_schema.no_info_plain_validator_function(
        validate,
        json_schema_input_schema=core_schema.union_schema(
            [core_schema.str_schema(), record_schema]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            to_dict, return_schema=record_schema
        ),
    )
