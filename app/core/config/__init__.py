from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    corpus_enabled: bool
    corpus_url: str
    corpus_dataset: str
    corpus_config: str
    corpus_split: str
    corpus_max_offset: int
    corpus_timeout_s: float
    text_timeout_s: float


settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    corpus_enabled=_get_env_bool("ATS_CORPUS_ENABLED", True),
    corpus_url=_get_env("ATS_CORPUS_URL", "https://datasets-server.huggingface.co/rows")
    or "https://datasets-server.huggingface.co/rows",
    corpus_dataset=_get_env("ATS_CORPUS_DATASET", "0xnbk/resume-ats-score-v1-en") or "0xnbk/resume-ats-score-v1-en",
    corpus_config=_get_env("ATS_CORPUS_CONFIG", "default") or "default",
    corpus_split=_get_env("ATS_CORPUS_SPLIT", "train") or "train",
    # The corpus holds ~6,374 rows; leave room for a full batch.
    corpus_max_offset=_get_env_int("ATS_CORPUS_MAX_OFFSET", 6200),
    corpus_timeout_s=_get_env_float("ATS_CORPUS_TIMEOUT_S", 10.0),
    text_timeout_s=_get_env_float("ATS_TEXT_TIMEOUT_S", 20.0),
)

if settings.corpus_max_offset < 1:
    raise RuntimeError("ATS_CORPUS_MAX_OFFSET must be a positive integer.")

__all__ = ["Settings", "settings"]
