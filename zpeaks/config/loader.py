from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml


def load_config(path: str | None = None) -> dict[str, Any]:
    default = files("zpeaks.config").joinpath("default.yaml")
    config = yaml.safe_load(default.read_text(encoding="utf-8")) or {}
    if path:
        user = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(user, dict):
            raise ValueError(f"config file must be a mapping, got {type(user).__name__}")
        config.update(user)
    return config
