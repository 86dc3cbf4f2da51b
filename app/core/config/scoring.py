from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SCORING_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


def scoring_config_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH", "").strip()
    return Path(override) if override else DEFAULT_SCORING_PATH


def load_scoring_config(path: str | Path) -> dict[str, Any]:
    """Read a scoring YAML file; every failure surfaces as RuntimeError."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{config_path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{config_path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{config_path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{config_path}': expected a top-level mapping.")
    return parsed


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    return load_scoring_config(scoring_config_path())


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dot path such as ``ats.weights.format``; ``default`` when any key is absent."""
    current: Any = get_scoring_config()
    for key in path.split(".") if path else ():
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current if path else default
