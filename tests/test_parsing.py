import sys
import tempfile
import unittest
from pathlib import Path

from docx import Document
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.errors import (  # noqa: E402
    DocumentNotFoundError,
    ParseFailureError,
    UnsupportedFormatError,
)
from app.parsing.parse import ensure_supported, parse_document  # noqa: E402


class ParsingFacadeTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_docx_paragraphs_become_lines(self):
        path = self.root / "Ana_Gomez_CV.docx"
        document = Document()
        document.add_paragraph("Ana Gómez")
        document.add_paragraph("")
        document.add_paragraph("Experiencia")
        document.save(str(path))

        parsed = parse_document(path)
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.file_name, "Ana_Gomez_CV.docx")
        self.assertEqual(parsed.text, "Ana Gómez\nExperiencia")
        self.assertEqual(parsed.page_count, 1)
        self.assertEqual(parsed.parsing_warnings, [])

    def test_blank_pdf_reports_warning(self):
        path = self.root / "scan.pdf"
        writer = PdfWriter()
        writer.add_blank_page(width=612, height=792)
        writer.add_blank_page(width=612, height=792)
        with path.open("wb") as handle:
            writer.write(handle)

        parsed = parse_document(path)
        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertEqual(parsed.page_count, 2)
        self.assertEqual(len(parsed.parsing_warnings), 1)

    def test_unsupported_extension(self):
        path = self.root / "cv.txt"
        path.write_text("Juan Pérez", encoding="utf-8")
        with self.assertRaises(UnsupportedFormatError) as ctx:
            parse_document(path)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.extension, ".txt")

    def test_missing_file(self):
        with self.assertRaises(DocumentNotFoundError):
            parse_document(self.root / "cv.pdf")

    def test_corrupt_pdf_is_a_parse_failure(self):
        path = self.root / "cv.pdf"
        path.write_bytes(b"this is not a pdf")
        with self.assertRaises(ParseFailureError):
            parse_document(path)

    def test_extension_check_is_case_insensitive(self):
        self.assertEqual(ensure_supported("CV.PDF"), ".pdf")
        self.assertEqual(ensure_supported("cv.Docx"), ".docx")
        with self.assertRaises(UnsupportedFormatError):
            ensure_supported("cv")


if __name__ == "__main__":
    unittest.main()
