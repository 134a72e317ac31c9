from __future__ import annotations

import logging

from app.ats.corpus import MAX_BATCH, CorpusClient
from app.ats.outcome import Outcome, first_available, guarded
from app.ats.patterns import (
    METRIC_RE,
    WEIGHTED_PATTERNS,
    average_score,
    experience_text,
    frequency,
    resume_text,
    round_half_up,
)
from app.core.config.scoring import get_scoring_value
from app.schemas.ats import ScoreResult
from app.schemas.resume import ResumeData
from app.taxonomy import KeywordTaxonomy, get_default_taxonomy

logger = logging.getLogger(__name__)


def _bands() -> tuple[int, int]:
    return (
        int(get_scoring_value("scoring.bands.strong", 80)),
        int(get_scoring_value("scoring.bands.fair", 60)),
    )


def _deduction(name: str, default: int) -> int:
    return int(get_scoring_value(f"scoring.rules.deductions.{name}", default))


def rule_based_score(resume: ResumeData, taxonomy: KeywordTaxonomy | None = None) -> ScoreResult:
    """Start from 100 and deduct for each missing ATS essential."""
    taxonomy = taxonomy or get_default_taxonomy()
    score = int(get_scoring_value("scoring.rules.start", 100))
    feedback: list[str] = []

    if len(resume.summary) < int(get_scoring_value("summary.min_chars", 50)):
        score -= _deduction("summary", 15)
        feedback.append("Professional summary is missing or too short")

    if len(resume.skill_names()) < int(get_scoring_value("scoring.rules.min_skills", 5)):
        score -= _deduction("skills", 10)
        feedback.append("Add more relevant skills (aim for 5-10)")

    min_description = int(get_scoring_value("experience.min_description_chars", 30))
    thin = [entry for entry in resume.experience if len((entry.description or "").strip()) < min_description]
    if thin:
        score -= _deduction("experience_descriptions", 20)
        noun = "entries" if len(thin) > 1 else "entry"
        feedback.append(f"{len(thin)} experience {noun} missing detailed descriptions")

    all_experience = experience_text(resume)
    if not taxonomy.has_action_verb(all_experience):
        score -= _deduction("action_verbs", 10)
        feedback.append("Use strong action verbs in experience descriptions")

    if not METRIC_RE.search(all_experience):
        score -= _deduction("metrics", 10)
        feedback.append("Add quantifiable results (percentages, numbers) to show impact")

    if not resume.personal_info.email or not resume.personal_info.phone:
        score -= _deduction("contact", 5)
        feedback.append("Ensure contact information is complete")

    if not resume.education:
        score -= _deduction("education", 10)
        feedback.append("Add education details")

    strong, fair = _bands()
    if score >= strong:
        feedback.insert(0, "Your resume is well-optimized for ATS systems!")
    elif score >= fair:
        feedback.insert(0, "Your resume is good but could be improved for better ATS compatibility.")
    else:
        feedback.insert(0, "Your resume needs significant improvements for ATS compatibility.")

    return ScoreResult(score=min(100, max(0, score)), feedback=feedback)


class ScoreCalculator:
    """Dataset-informed score when the corpus answers, rule-based deductions otherwise."""

    def __init__(self, corpus: CorpusClient, *, taxonomy: KeywordTaxonomy | None = None) -> None:
        self._corpus = corpus
        self._taxonomy = taxonomy or get_default_taxonomy()

    async def calculate(self, resume: ResumeData) -> ScoreResult:
        outcome = await first_available([lambda: self._dataset_based(resume), lambda: self._rule_based(resume)])
        logger.info("ats_score_calculated source=%s score=%s", outcome.source, outcome.value.score)
        return outcome.unwrap()

    async def _rule_based(self, resume: ResumeData) -> Outcome[ScoreResult]:
        return Outcome.ok("rules", rule_based_score(resume, self._taxonomy))

    async def _dataset_based(self, resume: ResumeData) -> Outcome[ScoreResult]:
        fetched = await guarded(
            "dataset_score",
            self._corpus.fetch_high_scoring_examples(int(get_scoring_value("corpus.batch_size", MAX_BATCH))),
            self._corpus.timeout_s,
        )
        if not fetched.available or not fetched.value:
            return Outcome.unavailable("dataset_score", fetched.reason or "no_examples")

        examples = fetched.value
        texts = [example.text.lower() for example in examples]
        user_text = resume_text(resume)
        threshold = float(get_scoring_value("dataset.pattern_frequency_threshold", 0.7))

        feedback: list[str] = []
        matched = 0
        total = 0
        for item in WEIGHTED_PATTERNS:
            total += item.weight
            share = frequency(item.pattern, texts)
            if item.pattern.search(user_text):
                matched += item.weight
            elif share > threshold:
                feedback.append(
                    f"Missing {item.desc} found in {round_half_up(share * 100)}% of high-scoring resumes"
                )

        pattern_score = matched / total * 100
        avg = average_score(examples)
        low = min(example.ats_score for example in examples)
        high = max(example.ats_score for example in examples)

        estimated = round_half_up(
            pattern_score * float(get_scoring_value("scoring.blend.pattern_weight", 0.6))
            + avg * float(get_scoring_value("scoring.blend.corpus_weight", 0.4))
        )
        final = round_half_up(max(low, min(high, estimated)))

        strong, fair = _bands()
        if final >= strong:
            verdict = (
                "Based on dataset analysis, your resume matches patterns from high-scoring resumes "
                f"(avg dataset score: {avg:.1f})"
            )
        elif final >= fair:
            verdict = (
                f"Your resume has some elements of high-scoring resumes (dataset avg: {avg:.1f}), "
                "but improvements are needed."
            )
        else:
            verdict = (
                f"Compared to high-scoring resumes in the dataset (avg: {avg:.1f}), "
                "your resume needs significant improvements."
            )
        feedback.insert(0, verdict)

        return Outcome.ok("dataset_score", ScoreResult(score=min(100, max(0, final)), feedback=feedback))
