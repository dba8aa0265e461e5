"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, quantified.toml only contains
overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

PayloadKind = Literal["json", "int", "float", "str", "bool"]


class PayloadConfig(BaseModel):
    """[payload] section."""

    model_config = {"frozen": True}

    type: PayloadKind = "json"


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    reverse: bool = False


class QuantifiedConfig(BaseModel):
    """Top-level quantified.toml model."""

    model_config = {"frozen": True, "extra": "forbid"}

    payload: PayloadConfig = Field(default_factory=PayloadConfig)
    sort: SortConfig = Field(default_factory=SortConfig)
