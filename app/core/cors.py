from __future__ import annotations

from typing import Any

from app.core.config import settings


def cors_options() -> dict[str, Any]:
    """Keyword arguments for CORSMiddleware built from settings.

    A wildcard origin disables credentials, browsers reject the combination.
    """
    origins = [origin for origin in settings.cors_allowed_origins if origin]
    regex = (settings.cors_allow_origin_regex or "").strip() or None
    wildcard = "*" in origins
    return {
        "allow_origins": ["*"] if wildcard else origins,
        "allow_origin_regex": None if wildcard else regex,
        "allow_credentials": not wildcard,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }
