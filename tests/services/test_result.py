"""Tests for ServiceResult and ServiceError."""

import json
import math

import pytest
from pydantic import ValidationError

from quantified.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"variant": "all"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"variant": "all"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_QUANTIFIED", message="Not a Quantified value")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_QUANTIFIED"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="sort", data={"count": 2}, meta={"reverse": False})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 2
        assert parsed["meta"]["reverse"] is False

    def test_json_keeps_nan_and_infinity(self) -> None:
        result = ServiceResult(
            ok=True, op="parse", data={"value": float("nan"), "items": [float("inf")]}
        )
        raw = result.model_dump_json()
        assert "NaN" in raw
        parsed = json.loads(raw)
        assert math.isnan(parsed["data"]["value"])
        assert parsed["data"]["items"] == [math.inf]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="parse")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
