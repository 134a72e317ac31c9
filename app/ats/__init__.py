from .apply import apply_suggestion, is_applicable, mark_applied
from .corpus import CorpusClient
from .engine import ATSEngine, calculate_ats_score, generate_ats_suggestions
from .errors import SuggestionApplyError, SuggestionNotApplicableError, SuggestionTargetError
from .outcome import Outcome, first_available, guarded
from .random_source import RandomSource, default_random_source
from .text_provider import TextProvider

__all__ = [
    "ATSEngine",
    "CorpusClient",
    "Outcome",
    "RandomSource",
    "SuggestionApplyError",
    "SuggestionNotApplicableError",
    "SuggestionTargetError",
    "TextProvider",
    "apply_suggestion",
    "calculate_ats_score",
    "default_random_source",
    "first_available",
    "generate_ats_suggestions",
    "guarded",
    "is_applicable",
    "mark_applied",
]
