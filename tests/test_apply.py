import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.ats.apply import apply_suggestion, is_applicable, mark_applied  # noqa: E402
from app.ats.errors import SuggestionApplyError, SuggestionNotApplicableError, SuggestionTargetError  # noqa: E402
from app.schemas.ats import Suggestion  # noqa: E402
from app.schemas.resume import Education, Experience, PersonalInfo, ResumeData, Skill  # noqa: E402

RESUME = ResumeData(
    personal_info=PersonalInfo(name="Ada", email="ada@example.com", summary="Old summary"),
    experience=[Experience(id="1", description="first"), Experience(id="2", description="second")],
    education=[Education(id="1", degree="BSc", school="MIT")],
    skills=[Skill(id="1", name="Python", level="90")],
)


class ApplySuggestionTests(unittest.TestCase):
    def test_summary_replaces_only_the_summary(self):
        updated = apply_suggestion(RESUME, "summary", "New summary")

        self.assertEqual(updated.personal_info.summary, "New summary")
        expected = RESUME.model_dump()
        expected["personal_info"]["summary"] = "New summary"
        self.assertEqual(updated.model_dump(), expected)
        self.assertEqual(RESUME.personal_info.summary, "Old summary")

    def test_skill_appends_exactly_one_entry(self):
        updated = apply_suggestion(RESUME, "skill", "Docker")

        self.assertEqual(len(updated.skills), len(RESUME.skills) + 1)
        self.assertEqual(updated.skills[:-1], RESUME.skills)
        added = updated.skills[-1]
        self.assertEqual((added.name, added.level), ("Docker", "80"))
        self.assertTrue(added.id.startswith("skill-"))
        self.assertEqual(updated.experience, RESUME.experience)
        self.assertEqual(updated.personal_info, RESUME.personal_info)
        self.assertEqual(len(RESUME.skills), 1)

    def test_new_skill_alias(self):
        updated = apply_suggestion(RESUME, "newSkill", "Go")
        self.assertEqual(updated.skills[-1].name, "Go")

    def test_experience_description_by_index(self):
        updated = apply_suggestion(RESUME, "experience-1-description", "Led 3 launches")

        self.assertEqual([e.description for e in updated.experience], ["first", "Led 3 launches"])
        self.assertEqual(updated.experience[1].id, "2")
        self.assertEqual(RESUME.experience[1].description, "second")

    def test_out_of_range_experience_is_reported_not_applied(self):
        with self.assertRaises(SuggestionTargetError) as ctx:
            apply_suggestion(RESUME, "experience-5-description", "x")
        self.assertEqual(ctx.exception.code, "target_out_of_range")
        self.assertEqual((ctx.exception.index, ctx.exception.size), (5, 2))
        self.assertIsInstance(ctx.exception, SuggestionApplyError)
        self.assertEqual([e.description for e in RESUME.experience], ["first", "second"])

    def test_guidance_only_fields_are_rejected(self):
        for field in (
            "format",
            "keyword",
            "education-0",
            "dataset-pattern-2",
            "experience-1-title",
            "experience-0-description\n",
            " experience-0-description",
        ):
            self.assertFalse(is_applicable(field), field)
            with self.assertRaises(SuggestionNotApplicableError):
                apply_suggestion(RESUME, field, "anything")

    def test_applicable_fields(self):
        for field in ("summary", "skill", "newSkill", "experience-0-description", "experience-12-description"):
            self.assertTrue(is_applicable(field), field)

    def test_mark_applied_returns_new_list(self):
        suggestions = [
            Suggestion(field="summary", value="A", type="summary", priority="high", reason="r"),
            Suggestion(field="format", value="B", type="format", priority="high", reason="r"),
        ]
        updated = mark_applied(suggestions, 0)
        self.assertEqual([s.applied for s in updated], [True, False])
        self.assertEqual([s.applied for s in suggestions], [False, False])
        with self.assertRaises(IndexError):
            mark_applied(suggestions, 2)


if __name__ == "__main__":
    unittest.main()
