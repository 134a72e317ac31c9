import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from app.ats.apply import apply_suggestion, is_applicable
from app.ats.engine import ATSEngine
from app.ats.errors import SuggestionNotApplicableError, SuggestionTargetError
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.ats import (
    AnalyzeResponse,
    ApplySuggestionRequest,
    ApplySuggestionResponse,
    ScoreResult,
    SuggestionsResponse,
)
from app.schemas.resume import ResumeData

router = APIRouter()
logger = logging.getLogger(__name__)


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


@lru_cache(maxsize=1)
def get_engine() -> ATSEngine:
    return ATSEngine()


@router.post("/ats/suggestions", response_model=SuggestionsResponse)
@rate_limit()
async def ats_suggestions(
    request: Request,
    payload: ResumeData,
    engine: ATSEngine = Depends(get_engine),
    _: None = Depends(_auth),
):
    _ = request
    suggestions = await engine.generate_suggestions(payload)
    return SuggestionsResponse(suggestions=suggestions)


@router.post("/ats/score", response_model=ScoreResult)
@rate_limit()
async def ats_score(
    request: Request,
    payload: ResumeData,
    engine: ATSEngine = Depends(get_engine),
    _: None = Depends(_auth),
):
    _ = request
    return await engine.calculate_score(payload)


@router.post("/ats/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def ats_analyze(
    request: Request,
    payload: ResumeData,
    engine: ATSEngine = Depends(get_engine),
    _: None = Depends(_auth),
):
    _ = request
    suggestions, score = await engine.analyze(payload)
    return AnalyzeResponse(suggestions=suggestions, score=score)


@router.post("/ats/apply", response_model=ApplySuggestionResponse)
async def ats_apply(payload: ApplySuggestionRequest, _: None = Depends(_auth)):
    suggestion = payload.suggestion
    if not is_applicable(suggestion.field):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Suggestion '{suggestion.field}' is advisory only and cannot be applied.",
        )
    try:
        resume = apply_suggestion(payload.resume, suggestion.field, suggestion.value)
    except SuggestionTargetError as exc:
        logger.info("ats_apply_out_of_range field=%s index=%s size=%s", exc.field, exc.index, exc.size)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except SuggestionNotApplicableError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    return ApplySuggestionResponse(
        resume=resume,
        suggestion=suggestion.model_copy(update={"applied": True}),
    )
