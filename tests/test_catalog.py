import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.catalog import JobRoleCatalog, get_available_roles, get_role_by_id  # noqa: E402
from app.catalog.keywords import find_phrases  # noqa: E402
from app.catalog.skills import OTHER, SKILL_CATEGORIES, find_skill_definition, get_skill_category  # noqa: E402
import app.catalog.skills as skills_catalog  # noqa: E402


class JobRoleCatalogTests(unittest.TestCase):
    def test_available_roles(self):
        roles = get_available_roles()
        self.assertEqual(
            roles,
            [
                "FRONTEND_DEVELOPER",
                "BACKEND_DEVELOPER",
                "FULLSTACK_DEVELOPER",
                "DEVOPS_ENGINEER",
                "DATA_SCIENTIST",
            ],
        )

    def test_lookup_is_case_insensitive(self):
        role = get_role_by_id(" backend_developer ")
        self.assertIsNotNone(role)
        self.assertEqual(role.title, "Desarrollador Backend")
        self.assertIn("Python", role.essential_skills)

    def test_unknown_or_empty_role_is_none(self):
        self.assertIsNone(get_role_by_id("ASTRONAUT"))
        self.assertIsNone(get_role_by_id(None))
        self.assertIsNone(get_role_by_id(""))

    def test_profiles_are_immutable(self):
        role = get_role_by_id("FULLSTACK_DEVELOPER")
        with self.assertRaises(Exception):
            role.title = "Otro"

    def test_invalid_catalog_file_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "roles.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                JobRoleCatalog(path)


class SkillCatalogTests(unittest.TestCase):
    def test_categories(self):
        self.assertEqual(len(SKILL_CATEGORIES), 7)
        self.assertEqual(SKILL_CATEGORIES[-1], OTHER)
        self.assertFalse(hasattr(skills_catalog, "TOOLS"))
        self.assertEqual(get_skill_category("python"), "Lenguajes de Programación")
        self.assertEqual(get_skill_category("Scrum"), "Metodologías")
        self.assertEqual(get_skill_category("cobol"), OTHER)

    def test_alias_resolution(self):
        definition = find_skill_definition("k8s")
        self.assertIsNotNone(definition)
        self.assertEqual(definition.name, "Kubernetes")
        self.assertEqual(get_skill_category("golang"), "Lenguajes de Programación")

    def test_find_phrases_is_case_insensitive(self):
        found = find_phrases("Soy EXPERTO EN Python", ("experto en", "certified in"))
        self.assertEqual(found, ["experto en"])


if __name__ == "__main__":
    unittest.main()
