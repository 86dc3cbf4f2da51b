import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.models import ParsedDoc  # noqa: E402
from app.schemas.analysis import TextAnalysis  # noqa: E402
from app.scoring import calculate_ats_score, generate_recommendations  # noqa: E402
from app.scoring.recommendations import (  # noqa: E402
    MISSING_SECTION_MESSAGES,
    MSG_CONSISTENCY,
    MSG_DENSITY,
    MSG_FILE_NAME,
    MSG_GRAPHICS,
    MSG_LOW_SCORE,
    MSG_MEASURABLE_RESULTS,
    MSG_MORE_KEYWORDS,
    MSG_NO_ROLES,
    MSG_READABILITY,
    MSG_TABLES,
    MSG_TOO_LONG,
    MSG_TOO_SHORT,
    TIP_FONTS,
    TIP_HEADERS_FOOTERS,
    is_professional_file_name,
)
from app.services.analysis_service import build_analysis  # noqa: E402
from tests.sample_resume import SAMPLE_CV_TEXT  # noqa: E402


def _basic(word_count: int, keyword_count: int = 0, skill_count: int = 0) -> TextAnalysis:
    return TextAnalysis(
        keywords_found=[f"kw{index}" for index in range(keyword_count)],
        skills=[],
        word_count=word_count,
        unique_words=word_count,
        ats_score=calculate_ats_score(keyword_count, skill_count, word_count),
    )


class TextOnlyRecommendationTests(unittest.TestCase):
    def test_long_resume_without_role(self):
        result = generate_recommendations(_basic(3500, keyword_count=10, skill_count=8))
        recs = result.recommendations

        self.assertIn(MSG_TOO_LONG, recs.general)
        self.assertNotIn(MSG_LOW_SCORE, recs.general)
        self.assertEqual(recs.formatting, [TIP_FONTS, TIP_HEADERS_FOOTERS])
        self.assertEqual(recs.skills, [])
        self.assertEqual(result.total_recommendations, 3)
        self.assertEqual(result.priority, "Media")

    def test_short_low_scoring_resume(self):
        result = generate_recommendations(_basic(100))
        recs = result.recommendations

        self.assertEqual(recs.general, [MSG_TOO_SHORT, MSG_LOW_SCORE])
        self.assertEqual(recs.keywords, [MSG_MORE_KEYWORDS])
        self.assertEqual(recs.experience, [])
        self.assertEqual(result.total_recommendations, 5)
        self.assertEqual(result.priority, "Media")

    def test_target_role_adds_skill_and_phrase_suggestions(self):
        result = generate_recommendations(_basic(100), "FULLSTACK_DEVELOPER", cv_text="")
        recs = result.recommendations

        self.assertEqual(len(recs.skills), 2)
        self.assertTrue(recs.skills[0].startswith("Faltan habilidades esenciales para el rol de Desarrollador Full Stack"))
        self.assertIn("Node.js", recs.skills[0])
        phrase_tip = recs.keywords[-1]
        self.assertTrue(phrase_tip.startswith('Incluye más frases relacionadas con Desarrollador Full Stack, como: "'))
        self.assertEqual(phrase_tip.count('", "'), 2)
        self.assertEqual(result.total_recommendations, 8)
        self.assertEqual(result.priority, "Alta")

    def test_unknown_role_is_ignored(self):
        result = generate_recommendations(_basic(500, keyword_count=12, skill_count=8), "ASTRONAUT")
        self.assertEqual(result.recommendations.skills, [])
        self.assertEqual(result.total_recommendations, 2)

    def test_zero_findings_still_medium_priority(self):
        result = generate_recommendations(_basic(500, keyword_count=12, skill_count=8))
        self.assertEqual(result.total_recommendations, 2)
        self.assertEqual(result.priority, "Media")


class AggregateRecommendationTests(unittest.TestCase):
    @staticmethod
    def _aggregate(file_name: str = "cv.pdf"):
        document = ParsedDoc(file_name=file_name, source_type="pdf", text=SAMPLE_CV_TEXT, page_count=1)
        return build_analysis(document, "FULLSTACK_DEVELOPER")

    def test_generic_file_name_is_flagged(self):
        result = generate_recommendations(self._aggregate("cv.pdf"), "FULLSTACK_DEVELOPER", SAMPLE_CV_TEXT)
        self.assertIn(MSG_FILE_NAME, result.recommendations.formatting)

    def test_professional_file_name_passes(self):
        result = generate_recommendations(
            self._aggregate("Juan_Perez_CV.pdf"), "FULLSTACK_DEVELOPER", SAMPLE_CV_TEXT
        )
        self.assertNotIn(MSG_FILE_NAME, result.recommendations.formatting)
        self.assertEqual(result.recommendations.formatting[-2:], [TIP_FONTS, TIP_HEADERS_FOOTERS])

    def test_experience_findings(self):
        aggregate = self._aggregate()
        result = generate_recommendations(aggregate)
        self.assertNotIn(MSG_MEASURABLE_RESULTS, result.recommendations.experience)
        self.assertNotIn(MSG_NO_ROLES, result.recommendations.experience)

        bare = aggregate.model_copy(
            update={"experience": aggregate.experience.model_copy(update={"roles": [], "has_measurable_results": False})}
        )
        result = generate_recommendations(bare)
        self.assertEqual(result.recommendations.experience, [MSG_MEASURABLE_RESULTS, MSG_NO_ROLES])

    def test_format_issues_are_deduplicated(self):
        aggregate = self._aggregate()
        findings = aggregate.format.model_copy(update={"format_issues": ["Problema A", "Problema A", "Problema B"]})
        result = generate_recommendations(aggregate.model_copy(update={"format": findings}))
        formatting = result.recommendations.formatting
        self.assertEqual(formatting[:2], ["Problema A", "Problema B"])

    def test_low_score_reads_blended_total(self):
        aggregate = self._aggregate()
        self.assertEqual(aggregate.basic.ats_score, aggregate.ats_scores)
        low = aggregate.ats_scores.model_copy(update={"total": 10})
        result = generate_recommendations(
            aggregate.model_copy(update={"basic": aggregate.basic.model_copy(update={"ats_score": low})})
        )
        self.assertIn(MSG_LOW_SCORE, result.recommendations.general)



class FormatRecommendationTests(unittest.TestCase):
    FORMAT_MESSAGES = (MSG_READABILITY, MSG_CONSISTENCY, MSG_TABLES, MSG_GRAPHICS, MSG_DENSITY)

    @classmethod
    def setUpClass(cls):
        document = ParsedDoc(file_name="Juan_Perez_CV.pdf", source_type="pdf", text=SAMPLE_CV_TEXT, page_count=1)
        cls.aggregate = build_analysis(document, "FULLSTACK_DEVELOPER")

    def _formatting(self, score=None, **findings):
        current = self.aggregate.format
        if score:
            findings["format_score"] = current.format_score.model_copy(update=score)
        updated = self.aggregate.model_copy(update={"format": current.model_copy(update=findings)})
        return generate_recommendations(updated).recommendations.formatting

    def test_clean_format_adds_no_format_advice(self):
        formatting = self._formatting()
        for message in self.FORMAT_MESSAGES:
            self.assertNotIn(message, formatting)
        for _, message in MISSING_SECTION_MESSAGES:
            self.assertNotIn(message, formatting)

    def test_one_message_per_missing_section(self):
        sections = self.aggregate.format.section_analysis.model_copy(
            update={"missing_sections": ["habilidades", "experiencia"]}
        )
        formatting = self._formatting(section_analysis=sections)
        messages = dict(MISSING_SECTION_MESSAGES)
        self.assertNotIn(messages["educacion"], formatting)
        experience_at = formatting.index(messages["experiencia"])
        skills_at = formatting.index(messages["habilidades"])
        self.assertEqual(skills_at, experience_at + 1)

    def test_low_readability(self):
        self.assertIn(MSG_READABILITY, self._formatting(score={"readability": 59}))
        self.assertNotIn(MSG_READABILITY, self._formatting(score={"readability": 60}))

    def test_low_consistency(self):
        self.assertIn(MSG_CONSISTENCY, self._formatting(score={"consistency": 69}))
        self.assertNotIn(MSG_CONSISTENCY, self._formatting(score={"consistency": 70}))

    def test_tables(self):
        self.assertIn(MSG_TABLES, self._formatting(potential_table_count=1))

    def test_graphics_above_threshold(self):
        self.assertIn(MSG_GRAPHICS, self._formatting(graphic_elements_count=3))
        self.assertNotIn(MSG_GRAPHICS, self._formatting(graphic_elements_count=2))

    def test_dense_pages(self):
        self.assertIn(MSG_DENSITY, self._formatting(text_density=5001.0))
        self.assertNotIn(MSG_DENSITY, self._formatting(text_density=5000.0))

class FileNameTests(unittest.TestCase):
    def test_professional_names(self):
        self.assertTrue(is_professional_file_name("Juan_Perez_CV.pdf"))
        self.assertTrue(is_professional_file_name("Ana Gomez Resume.docx"))
        self.assertTrue(is_professional_file_name("maria_lopez_curriculum_vitae.pdf"))

    def test_generic_names(self):
        self.assertFalse(is_professional_file_name("cv.pdf"))
        self.assertFalse(is_professional_file_name("resume-final(2).pdf"))
        self.assertFalse(is_professional_file_name("Juan_Perez_CV.txt"))


if __name__ == "__main__":
    unittest.main()
