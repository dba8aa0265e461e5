"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from quantified.config.models import PayloadConfig, QuantifiedConfig, SortConfig


class TestDefaults:
    def test_sections(self) -> None:
        cfg = QuantifiedConfig()
        assert cfg.payload.type == "json"
        assert cfg.sort.reverse is False

    def test_frozen(self) -> None:
        cfg = SortConfig()
        with pytest.raises(ValidationError):
            cfg.reverse = True  # type: ignore[misc]


class TestValidation:
    def test_known_payload_kind(self) -> None:
        assert PayloadConfig(type="int").type == "int"

    def test_unknown_payload_kind(self) -> None:
        with pytest.raises(ValidationError):
            PayloadConfig(type="bytes")  # type: ignore[arg-type]

    def test_nested_from_dict(self) -> None:
        cfg = QuantifiedConfig.model_validate({"payload": {"type": "float"}})
        assert cfg.payload.type == "float"
        assert cfg.sort.reverse is False

    def test_unknown_section_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QuantifiedConfig.model_validate({"paylod": {"type": "int"}})
