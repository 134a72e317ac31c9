from __future__ import annotations

import asyncio
import logging

from app.ats.corpus import CorpusClient
from app.ats.dataset_analyzer import DatasetPatternAnalyzer
from app.ats.random_source import RandomSource, default_random_source
from app.ats.rule_analyzer import RuleBasedAnalyzer
from app.ats.scoring import ScoreCalculator
from app.ats.text_provider import TextProvider
from app.schemas.ats import ScoreResult, Suggestion
from app.schemas.resume import ResumeData
from app.taxonomy import KeywordTaxonomy, get_default_taxonomy

logger = logging.getLogger(__name__)


class ATSEngine:
    """Suggestion generation and scoring for one resume snapshot.

    The resume passed in is only read; results are new values for the
    caller to merge.
    """

    def __init__(
        self,
        *,
        corpus: CorpusClient | None = None,
        text_provider: TextProvider | None = None,
        rng: RandomSource | None = None,
        taxonomy: KeywordTaxonomy | None = None,
    ) -> None:
        rng = rng or default_random_source()
        taxonomy = taxonomy or get_default_taxonomy()
        corpus = corpus or CorpusClient(rng=rng)
        text_provider = text_provider or TextProvider(rng=rng, taxonomy=taxonomy)

        self._dataset = DatasetPatternAnalyzer(corpus, rng=rng)
        self._rules = RuleBasedAnalyzer(text_provider, rng=rng, taxonomy=taxonomy)
        self._scores = ScoreCalculator(corpus, taxonomy=taxonomy)

    async def generate_suggestions(self, resume: ResumeData) -> list[Suggestion]:
        dataset, rules = await asyncio.gather(
            self._dataset.analyze(resume),
            self._rules.analyze(resume),
        )
        suggestions: list[Suggestion] = []
        if dataset.available and dataset.value:
            suggestions.extend(dataset.value)
        else:
            logger.info("ats_dataset_suggestions_skipped reason=%s", dataset.reason)
        suggestions.extend(rules)
        return suggestions

    async def calculate_score(self, resume: ResumeData) -> ScoreResult:
        return await self._scores.calculate(resume)

    async def analyze(self, resume: ResumeData) -> tuple[list[Suggestion], ScoreResult]:
        suggestions, score = await asyncio.gather(
            self.generate_suggestions(resume),
            self.calculate_score(resume),
        )
        return suggestions, score


async def generate_ats_suggestions(resume: ResumeData, engine: ATSEngine | None = None) -> list[Suggestion]:
    return await (engine or ATSEngine()).generate_suggestions(resume)


async def calculate_ats_score(resume: ResumeData, engine: ATSEngine | None = None) -> ScoreResult:
    return await (engine or ATSEngine()).calculate_score(resume)
