from __future__ import annotations

import re
import uuid
from typing import Sequence

from app.ats.errors import SuggestionNotApplicableError, SuggestionTargetError
from app.schemas.ats import Suggestion
from app.schemas.resume import ResumeData, Skill

EXPERIENCE_FIELD_RE = re.compile(r"experience-(\d+)-description")
SKILL_FIELDS = {"skill", "newSkill"}
NEW_SKILL_LEVEL = "80"


def is_applicable(field: str) -> bool:
    """Only summary, skill and experience description suggestions can change resume state."""
    return field == "summary" or field in SKILL_FIELDS or bool(EXPERIENCE_FIELD_RE.fullmatch(field))


def apply_suggestion(resume: ResumeData, field: str, value: str) -> ResumeData:
    """Return a copy of ``resume`` with the suggestion merged in."""
    if field == "summary":
        personal_info = resume.personal_info.model_copy(update={"summary": value})
        return resume.model_copy(update={"personal_info": personal_info})

    if field in SKILL_FIELDS:
        skill = Skill(id=f"skill-{uuid.uuid4().hex[:12]}", name=value, level=NEW_SKILL_LEVEL)
        return resume.model_copy(update={"skills": [*resume.skills, skill]})

    match = EXPERIENCE_FIELD_RE.fullmatch(field)
    if not match:
        raise SuggestionNotApplicableError(field)

    index = int(match.group(1))
    if index >= len(resume.experience):
        raise SuggestionTargetError(field, index, len(resume.experience))

    experience = list(resume.experience)
    experience[index] = experience[index].model_copy(update={"description": value})
    return resume.model_copy(update={"experience": experience})


def mark_applied(suggestions: Sequence[Suggestion], index: int) -> list[Suggestion]:
    """Return a new list where the suggestion at ``index`` is flagged as applied."""
    if index < 0 or index >= len(suggestions):
        raise IndexError(f"suggestion index {index} out of range")
    updated = list(suggestions)
    updated[index] = updated[index].model_copy(update={"applied": True})
    return updated
