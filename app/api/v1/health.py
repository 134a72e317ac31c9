from fastapi import APIRouter

from app.ai.config import load_ai_config
from app.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {
        "status": "healthy",
        "corpus_enabled": settings.corpus_enabled,
        "completion_configured": load_ai_config().api_key is not None,
    }
