from __future__ import annotations

import logging
import math
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from app.core.errors import DocumentNotFoundError, ParseFailureError, UnsupportedFormatError

from .models import ParsedDoc

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx")
DOCX_CHARS_PER_PAGE = 3000


def _parse_pdf(source: str) -> tuple[str, int, list[str]]:
    warnings: list[str] = []
    reader = PdfReader(source)
    text_parts: list[str] = []
    for page in reader.pages:
        page_text = (page.extract_text() or "").strip()
        if page_text:
            text_parts.append(page_text)
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n\n".join(text_parts), max(1, len(reader.pages)), warnings


def _parse_docx(source: str) -> tuple[str, int, list[str]]:
    warnings: list[str] = []
    document = Document(source)
    paragraphs = [p.text for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    text = "\n".join(paragraphs)
    # DOCX carries no reliable page count; estimate from text length.
    estimated_pages = max(1, math.ceil(len(text) / DOCX_CHARS_PER_PAGE))
    return text, estimated_pages, warnings


def _extension_of(file_name: str) -> str:
    return Path(file_name).suffix.lower()


def ensure_supported(file_name: str) -> str:
    extension = _extension_of(file_name)
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(extension)
    return extension


def _parse(source: str, file_name: str) -> ParsedDoc:
    extension = ensure_supported(file_name)
    parser = _parse_pdf if extension == ".pdf" else _parse_docx
    try:
        text, page_count, warnings = parser(source)
    except Exception as exc:
        logger.warning("document_parse_failed file=%s error=%s", file_name, exc)
        raise ParseFailureError(f"No se pudo extraer el texto de '{file_name}': {exc}") from exc

    return ParsedDoc(
        file_name=file_name,
        source_type=extension.lstrip("."),
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str | Path) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise DocumentNotFoundError(f"El archivo no existe: {path}")
    return _parse(str(path), path.name)
