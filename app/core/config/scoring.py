from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")


def scoring_config_path() -> Path:
    override = (os.getenv("ATS_SCORING_CONFIG") or "").strip()
    return Path(override) if override else DEFAULT_SCORING_CONFIG_PATH


@lru_cache(maxsize=4)
def _load(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(f"Scoring config not found at '{path}'. Set ATS_SCORING_CONFIG or reinstall the package")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Thresholds, weights and deductions for the ATS analyzers, cached per path."""
    return _load(scoring_config_path())


def clear_scoring_config_cache() -> None:
    _load.cache_clear()


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a nested value by dot path, e.g. 'scoring.rules.deductions.summary'.

    Missing keys and non-mapping intermediates yield ``default``.
    """
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
