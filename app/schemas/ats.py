from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .resume import ResumeData

SuggestionType = Literal["summary", "skill", "experience", "education", "format", "keyword"]
Priority = Literal["high", "medium", "low"]


class Suggestion(BaseModel):
    field: str
    value: str
    type: SuggestionType
    priority: Priority
    reason: str
    applied: bool = False


class ScoreResult(BaseModel):
    score: int = Field(ge=0, le=100)
    feedback: list[str] = Field(default_factory=list)


class ExternalExample(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    ats_score: float = Field(alias="atsScore")


class SuggestionsResponse(BaseModel):
    suggestions: list[Suggestion]


class AnalyzeResponse(BaseModel):
    suggestions: list[Suggestion]
    score: ScoreResult


class ApplySuggestionRequest(BaseModel):
    resume: ResumeData
    suggestion: Suggestion


class ApplySuggestionResponse(BaseModel):
    resume: ResumeData
    suggestion: Suggestion
