from __future__ import annotations

import logging
from typing import Sequence

from app.ats.corpus import MAX_BATCH, CorpusClient
from app.ats.outcome import Outcome, guarded
from app.ats.patterns import (
    SUGGESTION_PATTERNS,
    average_score,
    extract_summaries,
    frequency,
    resume_text,
    round_half_up,
    skill_frequencies,
)
from app.ats.random_source import RandomSource, default_random_source, pick_from_head
from app.core.config.scoring import get_scoring_value
from app.schemas.ats import ExternalExample, Suggestion
from app.schemas.resume import ResumeData

logger = logging.getLogger(__name__)

SOURCE = "dataset_patterns"


class DatasetPatternAnalyzer:
    """Suggestions from gaps between the resume and a sample of high-scoring peers."""

    def __init__(self, corpus: CorpusClient, *, rng: RandomSource | None = None) -> None:
        self._corpus = corpus
        self._rng = rng or default_random_source()

    async def analyze(self, resume: ResumeData) -> Outcome[list[Suggestion]]:
        fetched = await guarded(
            SOURCE,
            self._corpus.fetch_high_scoring_examples(int(get_scoring_value("corpus.batch_size", MAX_BATCH))),
            self._corpus.timeout_s,
        )
        if not fetched.available or not fetched.value:
            return Outcome.unavailable(SOURCE, fetched.reason or "no_examples")

        examples = fetched.value
        logger.info("ats_dataset_analysis examples=%s", len(examples))

        suggestions = self._suggest(resume, examples)
        if not suggestions:
            return Outcome.unavailable(SOURCE, "no_gaps")

        self._rng.shuffle(suggestions)
        low = int(get_scoring_value("dataset.min_suggestions", 3))
        high = int(get_scoring_value("dataset.max_suggestions", 5))
        limit = min(len(suggestions), self._rng.randint(low, high))

        return Outcome.ok(
            SOURCE,
            [
                suggestion.model_copy(update={"field": f"dataset-pattern-{index}"})
                for index, suggestion in enumerate(suggestions[:limit])
            ],
        )

    def _suggest(self, resume: ResumeData, examples: Sequence[ExternalExample]) -> list[Suggestion]:
        texts = [example.text.lower() for example in examples]
        user_text = resume_text(resume)
        avg_score = average_score(examples)
        threshold = float(get_scoring_value("dataset.pattern_frequency_threshold", 0.7))

        suggestions: list[Suggestion] = []

        for item in SUGGESTION_PATTERNS:
            share = frequency(item.pattern, texts)
            if item.pattern.search(user_text) or share <= threshold:
                continue
            suggestions.append(
                Suggestion(
                    field="dataset-pattern",
                    value=(
                        f'Add {item.desc} to your resume. Example: "{item.example}". '
                        f"Found in {round_half_up(share * 100)}% of high-scoring resumes."
                    ),
                    type=item.type,
                    priority=item.priority,
                    reason=f"High-scoring resumes (avg score: {avg_score:.1f}) commonly include {item.desc}",
                )
            )

        summary = self._summary_gap(resume, examples)
        if summary:
            suggestions.append(summary)

        skill = self._skill_gap(resume, texts, avg_score)
        if skill:
            suggestions.append(skill)

        return suggestions

    def _summary_gap(self, resume: ResumeData, examples: Sequence[ExternalExample]) -> Suggestion | None:
        summaries = extract_summaries(examples, int(get_scoring_value("dataset.min_extracted_summary_chars", 30)))
        if not summaries:
            return None
        if len(resume.summary) >= int(get_scoring_value("summary.min_chars", 50)):
            return None

        avg_length = round_half_up(sum(len(summary) for summary in summaries) / len(summaries))
        return Suggestion(
            field="dataset-pattern",
            value=(
                f"Professional summaries in high-scoring resumes average {avg_length} characters "
                "with key skills and achievements."
            ),
            type="summary",
            priority="high",
            reason=f"High-scoring resumes typically have detailed professional summaries (avg: {avg_length} chars)",
        )

    def _skill_gap(self, resume: ResumeData, texts: Sequence[str], avg_score: float) -> Suggestion | None:
        counts = skill_frequencies(texts)
        top = [skill for skill, _ in counts.most_common(int(get_scoring_value("dataset.top_skills", 10)))]

        user_skills = [name.lower() for name in resume.skill_names()]
        if len(user_skills) >= int(get_scoring_value("skills.suggest_below", 10)):
            return None

        missing = [
            skill for skill in top if not any(user in skill or skill in user for user in user_skills)
        ]
        if not missing:
            return None

        skill = pick_from_head(self._rng, missing, int(get_scoring_value("dataset.missing_skill_candidates", 3)))
        return Suggestion(
            field="dataset-pattern",
            value=(
                f'Consider adding "{skill}" - it appears frequently in high-scoring resumes '
                f"(avg score: {avg_score:.1f})"
            ),
            type="skill",
            priority="medium",
            reason="Skills frequently found in high-ATS-scoring resumes",
        )
