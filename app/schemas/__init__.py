from .ats import (
    AnalyzeResponse,
    ApplySuggestionRequest,
    ApplySuggestionResponse,
    ExternalExample,
    ScoreResult,
    Suggestion,
    SuggestionsResponse,
)
from .resume import Achievement, Education, Experience, PersonalInfo, Project, ResumeData, Skill

__all__ = [
    "Achievement",
    "AnalyzeResponse",
    "ApplySuggestionRequest",
    "ApplySuggestionResponse",
    "Education",
    "Experience",
    "ExternalExample",
    "PersonalInfo",
    "Project",
    "ResumeData",
    "ScoreResult",
    "Skill",
    "Suggestion",
    "SuggestionsResponse",
]
