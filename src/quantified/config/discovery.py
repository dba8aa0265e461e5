"""Config file discovery and loading.

Walk-up finder locates quantified.toml, similar to how git finds .git/.
Supports QUANTIFIED_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from quantified.config.models import QuantifiedConfig

CONFIG_FILENAME = "quantified.toml"
CONFIG_ENV_VAR = "QUANTIFIED_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for quantified.toml.

    Returns the path to the config file, or None if not found.
    Checks QUANTIFIED_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config_data(path: Path) -> dict[str, Any]:
    """Read *path* and return only the settings it overrides.

    Sections are validated against :class:`QuantifiedConfig`; defaults the
    file does not set are left out so lower-priority sources still apply.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a section value is invalid.
    """
    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = tomllib.loads(raw)
    config = QuantifiedConfig.model_validate(data)
    return config.model_dump(exclude_unset=True)
