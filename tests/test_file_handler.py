import json
import sys
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.errors import DocumentNotFoundError  # noqa: E402
from app.services.file_handler import (  # noqa: E402
    analysis_file_name,
    ensure_directories,
    locate_resume_file,
    save_analysis_json,
    upload_path,
)


class LocateResumeTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.samples = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _touch(self, name: str) -> Path:
        path = self.samples / name
        path.write_bytes(b"x")
        return path

    def test_preferred_name_wins(self):
        preferred = self._touch("cv.pdf")
        self._touch("old_resume.docx")
        self.assertEqual(locate_resume_file(self.samples), preferred)

    def test_single_candidate_fallback(self):
        self._touch("notes.pdf")
        candidate = self._touch("Ana_Gomez_Curriculum.docx")
        self.assertEqual(locate_resume_file(self.samples), candidate)

    def test_multiple_candidates_are_ambiguous(self):
        self._touch("cv_2023.pdf")
        self._touch("resume.docx")
        with self.assertRaises(DocumentNotFoundError) as ctx:
            locate_resume_file(self.samples)
        self.assertIn("varios", str(ctx.exception))

    def test_no_candidates(self):
        self._touch("cv.txt")
        with self.assertRaises(DocumentNotFoundError):
            locate_resume_file(self.samples)

    def test_missing_directory(self):
        with self.assertRaises(DocumentNotFoundError):
            locate_resume_file(self.samples / "missing")


class PersistenceTests(unittest.TestCase):
    def test_file_name_is_filesystem_safe(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, 600000, tzinfo=timezone.utc)
        self.assertEqual(analysis_file_name(moment), "analisis-2024-01-02T03-04-05-600000+00-00.json")

    def test_save_writes_readable_utf8(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "nested" / "output"
            path = save_analysis_json({"seccion": "Educación", "total": 80}, output)

            self.assertTrue(path.is_file())
            self.assertTrue(path.name.startswith("analisis-"))
            raw = path.read_text(encoding="utf-8")
            self.assertIn("Educación", raw)
            self.assertIn('\n  "total": 80', raw)
            self.assertEqual(json.loads(raw)["total"], 80)

    def test_ensure_directories_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a" / "b"
            ensure_directories(target)
            ensure_directories(target)
            self.assertTrue(target.is_dir())

    def test_upload_paths_are_unique(self):
        with tempfile.TemporaryDirectory() as tmp:
            first = upload_path("Mi CV.PDF", tmp)
            second = upload_path("Mi CV.PDF", tmp)
            self.assertNotEqual(first, second)
            self.assertEqual(first.suffix, ".pdf")
            self.assertEqual(first.parent, Path(tmp))


if __name__ == "__main__":
    unittest.main()
