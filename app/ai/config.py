import os
from dataclasses import dataclass

HF_ROUTER_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_MODEL = "utter-project/EuroLLM-22B-Instruct-2512:publicai"


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    base_url: str | None
    api_key: str | None


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "huggingface").strip().lower()
    model = (os.getenv("AI_MODEL") or DEFAULT_MODEL).strip()

    if provider == "huggingface":
        key = (os.getenv("HF_TOKEN") or "").strip()
        base_url = (os.getenv("AI_BASE_URL") or HF_ROUTER_BASE_URL).strip()
    else:
        key = (os.getenv("OPENAI_API_KEY") or "").strip()
        base_url = (os.getenv("AI_BASE_URL") or os.getenv("OPENAI_BASE_URL") or "").strip() or None

    if not key or _looks_like_placeholder(key):
        key = None
    return AIConfig(provider=provider, model=model, base_url=base_url, api_key=key)
