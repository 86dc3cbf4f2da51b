from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from app.catalog import get_available_roles, get_role_by_id
from app.core.config import settings
from app.core.errors import AnalysisError, DocumentNotFoundError, ParseFailureError, UnsupportedFormatError
from app.schemas.analysis import AnalysisReport
from app.services.analysis_service import analyze_file
from app.services.file_handler import ensure_directories, locate_resume_file

logger = logging.getLogger(__name__)

RECOMMENDATION_LABELS = (
    ("general", "General"),
    ("keywords", "Palabras clave"),
    ("skills", "Habilidades"),
    ("experience", "Experiencia"),
    ("formatting", "Formato"),
)


def _remedies(exc: Exception) -> list[str]:
    if isinstance(exc, DocumentNotFoundError):
        return [
            f"Coloca tu CV en '{settings.samples_dir}' con el nombre 'cv.pdf' o 'cv.docx'.",
            "O indica la ruta exacta con --file ruta/al/cv.pdf.",
        ]
    if isinstance(exc, UnsupportedFormatError):
        return ["Convierte el documento a PDF o DOCX antes de analizarlo."]
    if isinstance(exc, ParseFailureError):
        return [
            "Comprueba que el archivo no esté dañado ni protegido con contraseña.",
            "Si es un PDF escaneado, exporta una versión con texto seleccionable.",
        ]
    return ["Revisa el archivo e inténtalo de nuevo."]


def _print_failure(exc: Exception) -> None:
    print(f"Error analizando el CV: {exc}", file=sys.stderr)
    print("Posibles soluciones:", file=sys.stderr)
    for remedy in _remedies(exc):
        print(f"  - {remedy}", file=sys.stderr)


def format_report(report: AnalysisReport) -> str:
    info = report.document_info
    role = get_role_by_id(info.target_role)
    scores = report.ats_scores
    lines = [
        "=" * 60,
        "RESULTADOS DEL ANÁLISIS ATS",
        "=" * 60,
        f"Archivo: {info.file_name} ({info.file_type}, {info.pages} páginas, {info.character_count} caracteres)",
        f"Puesto objetivo: {role.title if role else 'General'}",
        "",
        f"Puntuación ATS total: {scores.total}/100",
        f"  Contenido: {scores.content}/100",
        f"  Formato: {scores.format}/100",
        f"  Palabras clave: {scores.components.keywords}/100",
        f"  Habilidades: {scores.components.skills}/100",
        f"  Extensión: {scores.components.word_count}/100",
        "",
        f"Palabras: {report.basic.word_count} ({report.basic.unique_words} únicas)",
        f"Años de experiencia estimados: {report.experience.years_of_experience}",
        f"Palabras clave encontradas: {report.keywords.keyword_count}",
        "",
        "Habilidades por categoría:",
    ]
    for category, skills in report.categorized_skills.items():
        if skills:
            lines.append(f"  {category}: {', '.join(skills)}")

    lines.extend(["", f"Recomendaciones ({report.total_recommendations}, prioridad {report.priority}):"])
    for field, label in RECOMMENDATION_LABELS:
        items = getattr(report.recommendations, field)
        if not items:
            continue
        lines.append(f"  {label}:")
        lines.extend(f"    - {item}" for item in items)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a résumé for ATS compatibility.")
    parser.add_argument("--file", help="Path to a PDF or DOCX résumé. Defaults to a lookup in --samples-dir.")
    parser.add_argument("--samples-dir", default=settings.samples_dir, help="Directory searched when --file is omitted.")
    parser.add_argument(
        "--role",
        default=settings.default_target_role,
        help=f"Target role id ({', '.join(get_available_roles())}).",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not write the JSON result to the output directory.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    ensure_directories()

    try:
        path = Path(args.file) if args.file else locate_resume_file(args.samples_dir)
        report = analyze_file(path, args.role, persist=not args.no_save)
    except AnalysisError as exc:
        _print_failure(exc)
        return 1
    except Exception as exc:
        logger.exception("cli_analysis_failed error=%s", exc)
        _print_failure(exc)
        return 1

    print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
