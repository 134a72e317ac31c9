from __future__ import annotations

import logging
from typing import Sequence

from app.ai.factory import get_completion_client
from app.ai.types import ChatMessage, CompletionClient
from app.ats.outcome import Outcome, first_available, guarded
from app.ats.random_source import RandomSource, default_random_source
from app.core.config import settings
from app.schemas.resume import Experience, ResumeData
from app.taxonomy import KeywordTaxonomy, get_default_taxonomy

logger = logging.getLogger(__name__)

SUMMARY_LEADS = ("Experienced", "Skilled", "Proven", "Dedicated")
EXPERIENCE_VERBS = ("Developed", "Implemented", "Led", "Designed", "Optimized")

SUMMARY_MIN_CHARS = 20
EXPERIENCE_MIN_CHARS = 30
TEMPERATURE = 0.7


def _years_phrase(resume: ResumeData) -> str:
    return f"{len(resume.experience)}+ years" if resume.experience else ""


def _top_skills(resume: ResumeData) -> str:
    return ", ".join(resume.skill_names()[:3])


def tech_stack(skill_names: Sequence[str], taxonomy: KeywordTaxonomy) -> str:
    """Up to three technical keywords the candidate already lists."""
    lowered = [name.lower() for name in skill_names]
    known = [
        keyword
        for keyword in taxonomy.technical_keywords()
        if any(keyword.lower() in name for name in lowered)
    ]
    return ", ".join(known[:3]) or "modern technologies"


class TextProvider:
    """Drafts summary and experience prose: remote completion first, local template second."""

    def __init__(
        self,
        client: CompletionClient | None = None,
        *,
        rng: RandomSource | None = None,
        taxonomy: KeywordTaxonomy | None = None,
        timeout_s: float | None = None,
        use_remote: bool = True,
    ) -> None:
        self._timeout_s = timeout_s or settings.text_timeout_s
        if client is None and use_remote:
            try:
                client = get_completion_client(timeout_s=self._timeout_s)
            except ValueError as exc:
                logger.warning("ats_text_provider_misconfigured: %s", exc)
        self._client = client
        self._rng = rng or default_random_source()
        self._taxonomy = taxonomy or get_default_taxonomy()

    async def _remote(self, source: str, prompt: str, max_tokens: int, min_chars: int) -> Outcome[str]:
        if self._client is None:
            return Outcome.unavailable(source, "no_credential")

        client = self._client

        async def call() -> Outcome[str]:
            text = await client.complete(
                [ChatMessage(role="user", content=prompt)],
                max_tokens=max_tokens,
                temperature=TEMPERATURE,
            )
            text = (text or "").strip()
            if len(text) <= min_chars:
                return Outcome.unavailable(source, "too_short")
            return Outcome.ok(source, text)

        return await guarded(source, call(), self._timeout_s)

    async def summary(self, resume: ResumeData) -> str:
        role = resume.personal_info.title or "Professional"
        years = _years_phrase(resume)
        skills = _top_skills(resume)

        prompt = (
            f"Write a professional 2-3 sentence resume summary for a {role}"
            f"{f' with {years} of experience' if years else ''}"
            f"{f' and skills in {skills}' if skills else ''}. "
            "Make it ATS-friendly with relevant keywords and action verbs. Keep it concise (50-150 words)."
        )

        async def remote() -> Outcome[str]:
            return await self._remote("completion.summary", prompt, 150, SUMMARY_MIN_CHARS)

        async def template() -> Outcome[str]:
            lead = self._rng.choice(SUMMARY_LEADS)
            text = (
                f"{lead} {role.lower()}"
                f"{f' with {years} of experience' if years else ''}"
                f"{f' specializing in {skills}' if skills else ''}. "
                "Proven track record of delivering high-quality solutions and collaborating with "
                "cross-functional teams. Strong problem-solving abilities with a focus on continuous "
                "improvement and best practices."
            )
            return Outcome.ok("template.summary", text)

        outcome = await first_available([remote, template])
        return outcome.unwrap()

    async def experience(self, entry: Experience, skill_names: Sequence[str]) -> str:
        title = entry.title or "Professional"
        company = entry.company or "organization"
        stack = tech_stack(skill_names, self._taxonomy)

        prompt = (
            f"Write a professional 2-3 bullet point description for a {title} role at {company} "
            f"using {stack}. Include action verbs, quantifiable metrics (percentages or numbers), "
            "and ATS-friendly keywords. Make it concise and impactful."
        )

        async def remote() -> Outcome[str]:
            return await self._remote("completion.experience", prompt, 200, EXPERIENCE_MIN_CHARS)

        async def template() -> Outcome[str]:
            verb = self._rng.choice(EXPERIENCE_VERBS)
            text = (
                f"{verb} and maintained scalable solutions using {stack}, resulting in improved "
                "performance and user satisfaction. Collaborated with cross-functional teams to deliver "
                "projects on time and within budget. Identified and resolved technical challenges, "
                "contributing to overall team success."
            )
            return Outcome.ok("template.experience", text)

        outcome = await first_available([remote, template])
        return outcome.unwrap()
