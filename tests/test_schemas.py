import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import TypeAdapter, ValidationError  # noqa: E402

from app.schemas import ExternalExample, ResumeData, ScoreResult, Suggestion  # noqa: E402


class SchemaTests(unittest.TestCase):
    def test_resume_accepts_editor_camel_case_payload(self):
        resume = ResumeData.model_validate(
            {
                "personalInfo": {"name": "Ada", "title": "Engineer", "summary": "Hi"},
                "experience": [{"id": "1", "title": "Dev", "startDate": "2020", "description": "x"}],
                "skills": [{"id": "1", "name": "", "level": "80"}, {"id": "2", "name": " Python "}],
            }
        )
        self.assertEqual(resume.personal_info.title, "Engineer")
        self.assertEqual(resume.experience[0].start_date, "2020")
        self.assertEqual(resume.skill_names(), ["Python"])
        self.assertEqual(resume.education, [])
        self.assertEqual(resume.model_dump(by_alias=True)["personalInfo"]["name"], "Ada")

    def test_null_sections_are_treated_as_empty(self):
        resume = ResumeData.model_validate(
            {
                "personalInfo": None,
                "experience": None,
                "education": None,
                "skills": [None, {"id": None, "name": "Docker"}],
                "projects": [None],
                "achievements": None,
            }
        )
        self.assertEqual(resume.summary, "")
        self.assertIsNone(resume.personal_info.email)
        self.assertEqual(resume.experience, [])
        self.assertEqual(resume.education, [])
        self.assertEqual(resume.projects, [])
        self.assertEqual(resume.skill_names(), ["Docker"])
        self.assertEqual(resume.skills[0].id, "")

    def test_empty_resume_is_valid(self):
        resume = ResumeData()
        self.assertEqual(resume.summary, "")
        self.assertEqual(resume.skill_names(), [])

    def test_suggestion_list_round_trip_preserves_applied_flags(self):
        suggestions = [
            Suggestion(field="summary", value="A", type="summary", priority="high", reason="r", applied=True),
            Suggestion(field="keyword", value="B", type="keyword", priority="medium", reason="r"),
            Suggestion(field="skill", value="Docker", type="skill", priority="medium", reason="r", applied=True),
        ]
        adapter = TypeAdapter(list[Suggestion])
        restored = adapter.validate_json(adapter.dump_json(suggestions))
        self.assertEqual([item.applied for item in restored], [True, False, True])
        self.assertEqual(restored, suggestions)

    def test_suggestion_rejects_unknown_type(self):
        with self.assertRaises(ValidationError):
            Suggestion(field="x", value="y", type="layout", priority="high", reason="r")

    def test_score_result_bounds(self):
        with self.assertRaises(ValidationError):
            ScoreResult(score=101)
        self.assertEqual(ScoreResult(score=0).feedback, [])

    def test_external_example_alias(self):
        example = ExternalExample.model_validate({"text": "resume", "atsScore": 88})
        self.assertEqual(example.ats_score, 88.0)
        self.assertEqual(ExternalExample(text="t", ats_score=71).ats_score, 71.0)


if __name__ == "__main__":
    unittest.main()
