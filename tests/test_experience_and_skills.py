import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analyzers import analyze_cv_text, analyze_experience, analyze_skills, categorize_skills  # noqa: E402
from app.analyzers.experience import (  # noqa: E402
    detect_achievements,
    estimate_years_of_experience,
    extract_job_roles,
)
from app.catalog.skills import SKILL_CATEGORIES  # noqa: E402
from tests.sample_resume import SAMPLE_CV_TEXT  # noqa: E402

EXAMPLE_TEXT = (
    "Educación\nUniversidad X 2015\n"
    "Experiencia\nDeveloper en ACME 2015 - 2020\n"
    "Habilidades\nPython, SQL"
)


class ExperienceAnalyzerTests(unittest.TestCase):
    def test_years_span_from_experience_section(self):
        result = analyze_experience(EXAMPLE_TEXT)
        self.assertEqual(result.years_of_experience, 5)

    def test_years_need_two_distinct_past_years(self):
        self.assertEqual(estimate_years_of_experience(["2019"], current_year=2024), 0)
        self.assertEqual(estimate_years_of_experience(["2019", "2019"], current_year=2024), 0)
        self.assertEqual(estimate_years_of_experience(["2015", "2030"], current_year=2024), 0)
        self.assertEqual(estimate_years_of_experience(["03/2012", "2016", "2020"], current_year=2024), 8)

    def test_roles_are_deduplicated(self):
        roles = extract_job_roles("Desarrollador Backend\nDesarrollador Backend\nIngeniero de Datos")
        self.assertEqual(len(roles), len(set(roles)))
        self.assertTrue(any(role.startswith("Desarrollador") for role in roles))
        self.assertTrue(any(role.startswith("Ingeniero") for role in roles))

    def test_achievements_and_measurable_results(self):
        text = "Lideré un equipo de cinco personas. Reduje los costes un 30% en un año."
        achievements = detect_achievements(text)
        self.assertEqual(len(achievements), 2)
        result = analyze_experience(text)
        self.assertTrue(result.has_measurable_results)
        self.assertEqual(result.achievement_count, 2)

    def test_no_measurable_results_without_numbers(self):
        result = analyze_experience("Experiencia\nDesarrollé varias aplicaciones internas.")
        self.assertEqual(result.achievements, ["Desarrollé varias aplicaciones internas."])
        self.assertFalse(result.has_measurable_results)

    def test_full_resume(self):
        result = analyze_experience(SAMPLE_CV_TEXT)
        self.assertEqual(result.years_of_experience, 5)
        self.assertGreaterEqual(result.job_count, 1)
        self.assertEqual(result.job_count, len(result.roles))
        self.assertTrue(result.has_measurable_results)


class SkillAnalyzerTests(unittest.TestCase):
    def test_example_text_skills(self):
        skills = analyze_skills(EXAMPLE_TEXT)
        self.assertIn("python", skills)
        self.assertIn("sql", skills)

    def test_returns_vocabulary_terms(self):
        skills = analyze_skills("Experto en DOCKER y Kubernetes")
        self.assertEqual(skills, ["docker", "kubernetes"])

    def test_symbol_skills_are_detected(self):
        skills = analyze_skills("Experiencia con C#, .NET y CI/CD en Azure")
        self.assertEqual(skills, ["azure", "c#", ".net", "ci/cd"])
        self.assertEqual(categorize_skills(skills)["Lenguajes de Programación"], ["c#"])
        self.assertIn("ci/cd", analyze_cv_text("Pipelines de CI/CD con Jenkins").skills)

    def test_categorize_never_drops_skills(self):
        skills = ["python", "react", "cobol", "scrum", "aws", "comunicación", "sql", "fortran"]
        categories = categorize_skills(skills)
        self.assertEqual(list(categories), list(SKILL_CATEGORIES))
        self.assertEqual(sum(len(items) for items in categories.values()), len(skills))
        self.assertEqual(categories["Otras"], ["cobol", "fortran"])

    def test_categorize_keeps_input_order(self):
        categories = categorize_skills(["typescript", "python", "javascript"])
        self.assertEqual(categories["Lenguajes de Programación"], ["typescript", "python", "javascript"])


class TextAnalyzerTests(unittest.TestCase):
    def test_basic_analysis(self):
        result = analyze_cv_text(SAMPLE_CV_TEXT)
        self.assertIn("python", result.skills)
        self.assertIn("Python", result.keywords_found)
        self.assertGreater(result.word_count, 0)
        self.assertLessEqual(result.unique_words, result.word_count)
        self.assertLessEqual(len(result.important_terms), 10)
        self.assertEqual(result.ats_score.format, 0)
        self.assertEqual(result.ats_score.total, result.ats_score.content)

    def test_important_terms_sorted_by_score(self):
        result = analyze_cv_text("python python python docker docker kubernetes")
        terms = [item.term for item in result.important_terms]
        self.assertEqual(terms, ["python", "docker", "kubernetes"])


if __name__ == "__main__":
    unittest.main()
