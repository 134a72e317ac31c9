from app.ai.config import load_ai_config
from app.ai.types import CompletionClient

from app.ai.providers.openai_provider import OpenAIProvider

SUPPORTED_PROVIDERS = {"huggingface", "openai"}


def get_completion_client(timeout_s: float = 20.0) -> CompletionClient | None:
    """Return a configured client, or None when no credential is available."""
    cfg = load_ai_config()

    if cfg.provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")

    if not cfg.api_key:
        return None

    # Single attempt per invocation; the caller owns the fallback.
    return OpenAIProvider(
        model=cfg.model,
        api_key=cfg.api_key,
        base_url=cfg.base_url,
        timeout_s=timeout_s,
        max_retries=0,
    )
