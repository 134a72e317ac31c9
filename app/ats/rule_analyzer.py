"""Deterministic resume checks that need no network access.

Checks run in a fixed order and each contributes at most one suggestion,
except the per-entry experience and education checks.
"""
from __future__ import annotations

import asyncio

from app.ats.patterns import DIGIT_RE, resume_text
from app.ats.random_source import RandomSource, default_random_source, pick_from_head
from app.ats.text_provider import TextProvider
from app.core.config.scoring import get_scoring_value
from app.schemas.ats import Suggestion
from app.schemas.resume import Experience, ResumeData
from app.taxonomy import KeywordTaxonomy, get_default_taxonomy

REWRITE_VERBS = ("Developed", "Implemented", "Led", "Designed", "Created")
METRIC_HINTS = (
    "by 30%",
    "by 25%",
    "by 40%",
    "by 50%",
    "for 100+ users",
    "with 99.9% uptime",
    "reducing costs by 20%",
)


def experience_field(index: int) -> str:
    return f"experience-{index}-description"


class RuleBasedAnalyzer:
    def __init__(
        self,
        text_provider: TextProvider,
        *,
        rng: RandomSource | None = None,
        taxonomy: KeywordTaxonomy | None = None,
    ) -> None:
        self._text = text_provider
        self._rng = rng or default_random_source()
        self._taxonomy = taxonomy or get_default_taxonomy()

    async def analyze(self, resume: ResumeData) -> list[Suggestion]:
        suggestions: list[Suggestion] = []

        summary = await self._check_summary(resume)
        if summary:
            suggestions.append(summary)

        skill = self._check_missing_skill(resume)
        if skill:
            suggestions.append(skill)

        experience = await asyncio.gather(
            *(self._check_experience(resume, index, entry) for index, entry in enumerate(resume.experience))
        )
        suggestions.extend(item for item in experience if item is not None)

        suggestions.extend(self._check_education(resume))

        contact = self._check_contact(resume)
        if contact:
            suggestions.append(contact)

        keyword = self._check_keyword_density(resume)
        if keyword:
            suggestions.append(keyword)

        return suggestions

    async def _check_summary(self, resume: ResumeData) -> Suggestion | None:
        summary = resume.summary
        min_chars = int(get_scoring_value("summary.min_chars", 50))
        max_chars = int(get_scoring_value("summary.max_chars", 200))

        if len(summary) < min_chars:
            return Suggestion(
                field="summary",
                value=await self._text.summary(resume),
                type="summary",
                priority="high",
                reason="Professional summary should be 50-150 words and highlight key skills and experience",
            )
        if len(summary) > max_chars:
            truncate_to = int(get_scoring_value("summary.truncate_to", 150))
            return Suggestion(
                field="summary",
                value=summary[:truncate_to] + "...",
                type="summary",
                priority="medium",
                reason="Summary is too long. ATS-friendly summaries should be 50-150 words",
            )
        return None

    def _check_missing_skill(self, resume: ResumeData) -> Suggestion | None:
        existing = [name.lower() for name in resume.skill_names()]
        missing = [
            keyword
            for keyword in self._taxonomy.technical_keywords()
            if not any(keyword.lower() in name for name in existing)
        ]
        if not missing or len(existing) >= int(get_scoring_value("skills.suggest_below", 10)):
            return None

        skill = pick_from_head(self._rng, missing, int(get_scoring_value("skills.missing_candidates", 5)))
        return Suggestion(
            field="skill",
            value=skill,
            type="skill",
            priority="medium",
            reason=f'Adding relevant technical skills like "{skill}" can improve ATS keyword matching',
        )

    async def _check_experience(self, resume: ResumeData, index: int, entry: Experience) -> Suggestion | None:
        description = (entry.description or "").strip()

        if len(description) < int(get_scoring_value("experience.min_description_chars", 30)):
            return Suggestion(
                field=experience_field(index),
                value=await self._text.experience(entry, resume.skill_names()),
                type="experience",
                priority="high",
                reason="Experience descriptions should be detailed with action verbs and quantifiable achievements",
            )

        if not self._taxonomy.has_action_verb(description) and not description[0].islower():
            verb = self._rng.choice(REWRITE_VERBS)
            return Suggestion(
                field=experience_field(index),
                value=f"{verb} {description[0].lower()}{description[1:]}",
                type="experience",
                priority="medium",
                reason='Start bullet points with strong action verbs (e.g., "Developed", "Led", "Implemented")',
            )

        if not DIGIT_RE.search(description):
            metric = self._rng.choice(METRIC_HINTS)
            return Suggestion(
                field=experience_field(index),
                value=f'{description} (Consider adding quantifiable results, e.g., "{metric}")',
                type="experience",
                priority="medium",
                reason="Add quantifiable results (percentages, numbers) to demonstrate impact",
            )
        return None

    def _check_education(self, resume: ResumeData) -> list[Suggestion]:
        return [
            Suggestion(
                field=f"education-{index}",
                value="Complete education details improve ATS parsing",
                type="education",
                priority="high",
                reason="Education section should include degree, school name, and graduation date",
            )
            for index, entry in enumerate(resume.education)
            if not (entry.degree or "").strip() or not (entry.school or "").strip()
        ]

    def _check_contact(self, resume: ResumeData) -> Suggestion | None:
        email = resume.personal_info.email
        if email and "@" not in email:
            return Suggestion(
                field="format",
                value="Ensure email format is correct",
                type="format",
                priority="high",
                reason="ATS systems parse contact information. Ensure email format is valid",
            )
        return None

    def _check_keyword_density(self, resume: ResumeData) -> Suggestion | None:
        matched = self._taxonomy.matching_technical(resume_text(resume))
        if len(matched) >= int(get_scoring_value("keywords.min_distinct", 5)):
            return None
        if len(resume.skill_names()) >= int(get_scoring_value("skills.keyword_skill_floor", 8)):
            return None
        return Suggestion(
            field="keyword",
            value="Add more industry-relevant keywords",
            type="keyword",
            priority="medium",
            reason="ATS systems match resumes to job descriptions using keywords. Add more relevant technical terms",
        )
