import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.ats.rule_analyzer import RuleBasedAnalyzer  # noqa: E402
from app.ats.text_provider import SUMMARY_LEADS, TextProvider  # noqa: E402
from app.schemas.resume import Education, Experience, PersonalInfo, ResumeData, Skill  # noqa: E402


class FirstChoiceRandom:
    """Deterministic stand-in: always the first candidate, never reorders."""

    def random(self):
        return 0.0

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]

    def shuffle(self, x):
        return None


GOOD_SUMMARY = "Backend engineer focused on payment systems, reliability and developer tooling."
GOOD_DESCRIPTION = "Led migration of 12 services to Kubernetes, cutting hosting costs by 20%."


def _analyzer() -> RuleBasedAnalyzer:
    rng = FirstChoiceRandom()
    return RuleBasedAnalyzer(TextProvider(use_remote=False, rng=rng), rng=rng)


def _skills(*names: str) -> list[Skill]:
    return [Skill(id=str(i), name=name) for i, name in enumerate(names)]


def _resume(**kwargs) -> ResumeData:
    base = {
        "personal_info": PersonalInfo(title="Backend Engineer", email="ada@example.com", summary=GOOD_SUMMARY),
        "experience": [Experience(id="1", title="Engineer", company="Acme", description=GOOD_DESCRIPTION)],
        "education": [Education(id="1", degree="BSc", school="MIT")],
        "skills": _skills("Python", "Docker", "AWS", "SQL", "Git", "React", "Java", "Azure", "Scrum", "Agile"),
    }
    base.update(kwargs)
    return ResumeData(**base)


class RuleBasedAnalyzerTests(unittest.IsolatedAsyncioTestCase):
    async def test_well_formed_resume_has_no_suggestions(self):
        suggestions = await _analyzer().analyze(_resume())
        self.assertEqual(suggestions, [])

    async def test_empty_resume_scenario(self):
        resume = ResumeData(
            personal_info=PersonalInfo(summary=""),
            experience=[Experience(id="1", description="")],
            skills=[Skill(id="1", name="")],
        )
        suggestions = await _analyzer().analyze(resume)

        self.assertEqual(
            [(s.field, s.type, s.priority) for s in suggestions],
            [
                ("summary", "summary", "high"),
                ("skill", "skill", "medium"),
                ("experience-0-description", "experience", "high"),
                ("keyword", "keyword", "medium"),
            ],
        )
        self.assertTrue(suggestions[0].value.startswith(SUMMARY_LEADS[0]))
        self.assertEqual(suggestions[1].value, "Java")
        self.assertIn("modern technologies", suggestions[2].value)
        self.assertFalse(any(s.applied for s in suggestions))

    async def test_summary_within_bounds_yields_no_summary_suggestion(self):
        for summary in ("x" * 50, "y" * 120, "z" * 200):
            suggestions = await _analyzer().analyze(_resume(personal_info=PersonalInfo(summary=summary)))
            self.assertFalse([s for s in suggestions if s.type == "summary"], summary)

    async def test_long_summary_is_truncated(self):
        summary = "a" * 250
        suggestions = await _analyzer().analyze(_resume(personal_info=PersonalInfo(summary=summary)))
        self.assertEqual(suggestions[0].field, "summary")
        self.assertEqual(suggestions[0].priority, "medium")
        self.assertEqual(suggestions[0].value, "a" * 150 + "...")

    async def test_missing_skill_suggested_from_first_five_candidates(self):
        suggestions = await _analyzer().analyze(_resume(skills=_skills("Python", "Java")))
        skill = [s for s in suggestions if s.field == "skill"]
        self.assertEqual(len(skill), 1)
        self.assertEqual(skill[0].value, "JavaScript")
        self.assertIn('"JavaScript"', skill[0].reason)

    async def test_experience_without_action_verb_is_rewritten(self):
        resume = _resume(
            experience=[Experience(id="1", description="Responsible for the payments platform migration")]
        )
        suggestions = await _analyzer().analyze(resume)
        self.assertEqual(len(suggestions), 1)
        self.assertEqual(suggestions[0].field, "experience-0-description")
        self.assertEqual(suggestions[0].priority, "medium")
        self.assertEqual(suggestions[0].value, "Developed responsible for the payments platform migration")

    async def test_lowercase_start_falls_through_to_metric_check(self):
        description = "maintain billing dashboards for finance teams across regions"
        suggestions = await _analyzer().analyze(_resume(experience=[Experience(id="1", description=description)]))
        self.assertEqual(len(suggestions), 1)
        self.assertEqual(
            suggestions[0].value,
            description + ' (Consider adding quantifiable results, e.g., "by 30%")',
        )

    async def test_metric_hint_for_description_without_digits(self):
        description = "Developed the internal billing dashboard for finance"
        resume = _resume(
            experience=[
                Experience(id="1", description=GOOD_DESCRIPTION),
                Experience(id="2", description=description),
            ]
        )
        suggestions = await _analyzer().analyze(resume)
        self.assertEqual([s.field for s in suggestions], ["experience-1-description"])
        self.assertTrue(suggestions[0].value.startswith(description))

    async def test_good_experience_entries_yield_no_experience_suggestions(self):
        resume = _resume(
            experience=[
                Experience(id="1", description=GOOD_DESCRIPTION),
                Experience(id="2", description="Built 3 data pipelines processing 2M events per day"),
            ]
        )
        suggestions = await _analyzer().analyze(resume)
        self.assertFalse([s for s in suggestions if s.type == "experience"])

    async def test_incomplete_education_entries(self):
        resume = _resume(
            education=[
                Education(id="1", degree="BSc", school=""),
                Education(id="2", degree="MSc", school="ETH"),
                Education(id="3"),
            ]
        )
        suggestions = await _analyzer().analyze(resume)
        self.assertEqual([s.field for s in suggestions], ["education-0", "education-2"])
        self.assertTrue(all(s.priority == "high" for s in suggestions))

    async def test_email_without_at_sign(self):
        resume = _resume(personal_info=PersonalInfo(summary=GOOD_SUMMARY, email="ada.example.com"))
        suggestions = await _analyzer().analyze(resume)
        self.assertEqual([(s.field, s.type) for s in suggestions], [("format", "format")])

    async def test_keyword_density_suggestion(self):
        resume = _resume(skills=_skills("Excel", "Negotiation", "Python", "Java", "React", "Git", "SQL"))
        suggestions = await _analyzer().analyze(resume)
        self.assertNotIn("keyword", [s.field for s in suggestions])

        sparse = _resume(
            skills=_skills("Excel", "Negotiation"),
            experience=[Experience(id="1", description="Led a team of 4 analysts across 2 regions")],
            personal_info=PersonalInfo(summary=GOOD_SUMMARY, email="ada@example.com"),
        )
        suggestions = await _analyzer().analyze(sparse)
        self.assertIn("keyword", [s.field for s in suggestions])

    async def test_input_is_not_mutated(self):
        resume = ResumeData(experience=[Experience(id="1", description="")], skills=[Skill(id="1", name="")])
        before = resume.model_dump()
        await _analyzer().analyze(resume)
        self.assertEqual(resume.model_dump(), before)


if __name__ == "__main__":
    unittest.main()
