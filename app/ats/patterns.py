from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from app.schemas.ats import ExternalExample, Priority, SuggestionType
from app.schemas.resume import ResumeData


@dataclass(frozen=True)
class SuggestionPattern:
    pattern: re.Pattern[str]
    desc: str
    example: str
    type: SuggestionType
    priority: Priority


@dataclass(frozen=True)
class WeightedPattern:
    pattern: re.Pattern[str]
    weight: int
    desc: str


SUGGESTION_PATTERNS: tuple[SuggestionPattern, ...] = (
    SuggestionPattern(
        re.compile(r"\d+%"),
        "quantifiable metrics (percentages)",
        "30% improvement",
        "experience",
        "high",
    ),
    SuggestionPattern(
        re.compile(r"\d+\+ (years?|months?|years of)", re.IGNORECASE),
        "experience duration",
        "5+ years of experience",
        "experience",
        "medium",
    ),
    SuggestionPattern(
        re.compile(
            r"\b(developed|implemented|led|designed|optimized|created|delivered|achieved"
            r"|increased|reduced|improved|managed|built|deployed)\b",
            re.IGNORECASE,
        ),
        "strong action verbs",
        "Developed, Led, Implemented",
        "experience",
        "high",
    ),
    SuggestionPattern(
        re.compile(r"\b(aws|azure|kubernetes|docker|jenkins|terraform|ansible|git|ci/cd)\b", re.IGNORECASE),
        "modern DevOps/cloud technologies",
        "AWS, Docker, Kubernetes",
        "skill",
        "medium",
    ),
    SuggestionPattern(
        re.compile(r"\d+ (projects?|teams?|users?|customers?|clients?|companies?)", re.IGNORECASE),
        "quantifiable achievements",
        "100+ users, 5 projects",
        "experience",
        "high",
    ),
    SuggestionPattern(
        re.compile(r"(bachelor|master|phd|degree|certification|certified)", re.IGNORECASE),
        "educational credentials",
        "Bachelor's degree, Certifications",
        "education",
        "medium",
    ),
)

WEIGHTED_PATTERNS: tuple[WeightedPattern, ...] = (
    WeightedPattern(re.compile(r"\d+%"), 3, "quantifiable metrics"),
    WeightedPattern(re.compile(r"\d+\+ (years?|months?)", re.IGNORECASE), 2, "experience duration"),
    WeightedPattern(
        re.compile(r"\b(developed|implemented|led|designed|optimized|created|delivered|achieved)\b", re.IGNORECASE),
        3,
        "action verbs",
    ),
    WeightedPattern(
        re.compile(r"\b(aws|azure|kubernetes|docker|jenkins|terraform)\b", re.IGNORECASE),
        2,
        "modern technologies",
    ),
    WeightedPattern(re.compile(r"\d+ (projects?|teams?|users?)", re.IGNORECASE), 3, "quantifiable achievements"),
    WeightedPattern(re.compile(r"(bachelor|master|degree|certification)", re.IGNORECASE), 1, "education credentials"),
)

SUMMARY_LABEL_RE = re.compile(r"summary[:\s]*([\s\S]+?)(?=\n|experience|education|skills|$)", re.IGNORECASE)

SKILL_KEYWORD_RE = re.compile(
    r"\b(java|python|javascript|react|node\.js|spring|sql|mongodb|docker|kubernetes|aws|azure"
    r"|git|agile|scrum|devops|machine learning|ai|ml)\b",
    re.IGNORECASE,
)

METRIC_RE = re.compile(r"\d+%|\d+\+")
DIGIT_RE = re.compile(r"\d")


def resume_text(resume: ResumeData) -> str:
    """Lower-cased summary, experience descriptions and skill names joined by spaces."""
    parts = [resume.summary]
    parts.append(" ".join(entry.description or "" for entry in resume.experience))
    parts.append(" ".join(skill.name or "" for skill in resume.skills))
    return " ".join(parts).lower()


def experience_text(resume: ResumeData) -> str:
    return " ".join(entry.description or "" for entry in resume.experience).lower()


def frequency(pattern: re.Pattern[str], texts: Iterable[str]) -> float:
    """Fraction of texts in which pattern occurs."""
    items = list(texts)
    if not items:
        return 0.0
    hits = sum(1 for text in items if pattern.search(text))
    return hits / len(items)


def extract_summaries(examples: Iterable[ExternalExample], min_chars: int = 30) -> list[str]:
    summaries: list[str] = []
    for example in examples:
        match = SUMMARY_LABEL_RE.search(example.text)
        if not match:
            continue
        summary = match.group(1).strip()
        if len(summary) > min_chars:
            summaries.append(summary)
    return summaries


def skill_frequencies(texts: Iterable[str]) -> Counter[str]:
    joined = " ".join(texts)
    return Counter(match.lower() for match in SKILL_KEYWORD_RE.findall(joined))


def average_score(examples: Iterable[ExternalExample]) -> float:
    scores = [example.ats_score for example in examples]
    return sum(scores) / len(scores) if scores else 0.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
