from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_value
from app.core.rounding import round_half_up
from app.parsing.models import ParsedDoc
from app.schemas.analysis import FormatAnalysis, FormatScore, SectionAnalysis
from app.text import detect_sections, present_sections

CRITICAL_SECTIONS: tuple[tuple[str, str], ...] = (
    ("experiencia", "experiencia laboral"),
    ("educacion", "educación"),
    ("habilidades", "habilidades"),
)

_TABLE_ROW_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\|.*\|"),
    re.compile(r"\t.*\t"),
    re.compile(r"\s{3,}[^\s]+\s{3,}"),
    re.compile(r"^\s*[•\-\*]\s+.*\s{4,}.*$"),
    re.compile(r"^\s*\d+[\.\)]\s+.*\s{4,}.*$"),
)
_TABLE_MIN_ROWS = 3

_GRAPHIC_CHARS_RE = re.compile(
    r"[☑☐☒√✓✔✕✖✗]"  # check marks
    r"|[▪■□▫▬▭▮▯]"  # blocks
    r"|[◆◇◈◉○●◌◍]"  # shapes
    r"|[↑↓←→↔↕⇑⇓⇐⇒]"  # arrows
    r"|[─-╿]"  # box drawing
)
_SEPARATOR_LINE_RE = re.compile(r"^[=\-_*]{5,}$")

_DATE_FORMAT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    re.compile(r"\d{1,2}-\d{1,2}-\d{2,4}"),
    re.compile(r"\d{2,4}/\d{1,2}/\d{1,2}"),
    re.compile(r"\d{2,4}-\d{1,2}-\d{1,2}"),
    re.compile(r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* \d{2,4}\b"),
    re.compile(r"\b\d{2,4} (?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\b"),
    re.compile(r"\b(?:Ene|Feb|Mar|Abr|May|Jun|Jul|Ago|Sep|Oct|Nov|Dic)[a-z]* \d{2,4}\b"),
    re.compile(r"\b\d{2,4} (?:Ene|Feb|Mar|Abr|May|Jun|Jul|Ago|Sep|Oct|Nov|Dic)[a-z]*\b"),
)
_BULLET_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\s*•", re.MULTILINE),
    re.compile(r"^\s*\*", re.MULTILINE),
    re.compile(r"^\s*-", re.MULTILINE),
    re.compile(r"^\s*\+", re.MULTILINE),
    re.compile(r"^\s*>", re.MULTILINE),
    re.compile(r"^\s*◦", re.MULTILINE),
    re.compile(r"^\s*▪", re.MULTILINE),
    re.compile(r"^\s*✓", re.MULTILINE),
    re.compile(r"^\s*\d+\.", re.MULTILINE),
    re.compile(r"^\s*\(\d+\)", re.MULTILINE),
)
_MULTI_SPACE_RE = re.compile(r"  +")

ISSUE_NO_SECTIONS = (
    "No se detectan secciones claramente definidas. Los sistemas ATS necesitan secciones claras "
    "para categorizar correctamente la información."
)
ISSUE_LONG_LINES = (
    "Líneas de texto demasiado largas. Esto suele indicar un formato de múltiples columnas que los "
    "ATS no pueden procesar correctamente. Utiliza un diseño de una sola columna."
)
ISSUE_SHORT_LINES = (
    "Líneas de texto muy cortas. Podría indicar un formato demasiado fragmentado que dificulta la "
    "lectura automática. Evita el uso excesivo de saltos de línea."
)
ISSUE_GRAPHICS = (
    "Se detectaron posibles elementos gráficos o caracteres especiales. Los sistemas ATS pueden "
    "confundirse con estos elementos. Usa formato de texto simple."
)
ISSUE_DATE_FORMATS = (
    "Formatos de fecha inconsistentes en la sección de experiencia. Usa un único formato de fecha "
    "para mejorar la legibilidad ATS."
)
ISSUE_BULLET_STYLES = (
    "Estilos de viñetas inconsistentes en el CV. Usa un solo tipo de viñeta para mejorar la "
    "coherencia y la legibilidad ATS."
)
ISSUE_HEADER_CASE = (
    "Capitalización inconsistente en los encabezados de sección. Usa un estilo consistente para "
    "los títulos de sección."
)
ISSUE_SPACING = (
    "Uso excesivo de espacios múltiples. Los sistemas ATS pueden interpretar incorrectamente el "
    "espaciado. Usa un solo espacio entre palabras."
)
ISSUE_DENSITY = (
    "El CV tiene una alta densidad de texto por página. Los sistemas ATS prefieren documentos con "
    "espaciado adecuado. Considera añadir más espacio en blanco para mejorar la legibilidad."
)


def _cfg(key: str, default: float) -> float:
    return get_scoring_value(f"format.{key}", default)


def average_characters_per_line(text: str) -> int:
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return 0
    return round_half_up(sum(len(line) for line in lines) / len(lines))


def count_table_blocks(text: str) -> int:
    """Count runs of at least three consecutive table-looking lines."""
    tables = 0
    consecutive = 0
    for line in text.split("\n"):
        if any(pattern.search(line) for pattern in _TABLE_ROW_PATTERNS):
            consecutive += 1
            if consecutive >= _TABLE_MIN_ROWS:
                tables += 1
                consecutive = 0
        else:
            consecutive = 0
    return tables


def count_graphic_elements(text: str) -> int:
    count = len(_GRAPHIC_CHARS_RE.findall(text))
    count += sum(1 for line in text.split("\n") if _SEPARATOR_LINE_RE.match(line.strip()))
    return count


def _styles_used(text: str, patterns: tuple[re.Pattern[str], ...]) -> int:
    return sum(1 for pattern in patterns if pattern.search(text))


def _header_case(line: str) -> str:
    if line == line.upper():
        return "uppercase"
    if line[0] == line[0].upper():
        return "capitalized"
    return "lowercase"


def consistency_issues(text: str, sections: dict[str, str]) -> list[str]:
    issues: list[str] = []

    experience = sections.get("experiencia")
    if experience and _styles_used(experience, _DATE_FORMAT_PATTERNS) > 1:
        issues.append(ISSUE_DATE_FORMATS)

    if _styles_used(text, _BULLET_PATTERNS) > 1:
        issues.append(ISSUE_BULLET_STYLES)

    cases: set[str] = set()
    for name in present_sections(sections):
        lines = [line.strip() for line in sections[name].split("\n") if line.strip()]
        if lines:
            cases.add(_header_case(lines[0]))
    if len(cases) > 1:
        issues.append(ISSUE_HEADER_CASE)

    max_double_spaces = int(_cfg("consistency.max_double_spaces", 10))
    if len(_MULTI_SPACE_RE.findall(text)) > max_double_spaces:
        issues.append(ISSUE_SPACING)

    return issues


def analyze_format(text: str, document: ParsedDoc | None = None) -> FormatAnalysis:
    sections = detect_sections(text)
    present = present_sections(sections)
    issues: list[str] = []

    section_count = len(present)
    if section_count < int(_cfg("structure.min_sections", 3)):
        issues.append(ISSUE_NO_SECTIONS)
        structure = int(_cfg("structure.low_score", 30))
    elif section_count < int(_cfg("structure.full_sections", 5)):
        structure = int(_cfg("structure.mid_score", 70))
    else:
        structure = 100

    min_chars = int(_cfg("sections.min_content_chars", 50))
    missing = [
        (name, label)
        for name, label in CRITICAL_SECTIONS
        if len(sections.get(name) or "") < min_chars
    ]
    if missing:
        labels = ", ".join(label for _, label in missing)
        issues.append(
            f"Secciones importantes con contenido insuficiente o ausente: {labels}. "
            "Los sistemas ATS buscan estas secciones específicamente."
        )
    sections_score = max(0, 100 - len(missing) * int(_cfg("sections.penalty_per_missing", 33)))

    avg_chars = average_characters_per_line(text)
    if avg_chars > _cfg("readability.long_line_chars", 100):
        issues.append(ISSUE_LONG_LINES)
        readability = int(_cfg("readability.long_line_score", 40))
    elif avg_chars < _cfg("readability.short_line_chars", 20) and len(text) > _cfg("readability.short_line_min_text", 1000):
        issues.append(ISSUE_SHORT_LINES)
        readability = int(_cfg("readability.short_line_score", 60))
    else:
        readability = 100

    tables = count_table_blocks(text)
    if tables > 0:
        issues.append(
            f"Se detectaron posibles tablas ({tables}). Los sistemas ATS suelen tener problemas para "
            "procesar información en formato de tabla. Convierte las tablas a listas con viñetas o texto sencillo."
        )
        max_penalties = int(_cfg("readability.max_table_penalties", 3))
        readability -= int(_cfg("readability.table_penalty", 20)) * min(tables, max_penalties)

    graphics = count_graphic_elements(text)
    if graphics > _cfg("readability.graphic_threshold", 2):
        issues.append(ISSUE_GRAPHICS)
        readability -= int(_cfg("readability.graphic_penalty", 15))
    readability = max(0, readability)

    found_consistency_issues = consistency_issues(text, sections)
    issues.extend(found_consistency_issues)
    consistency = max(0, 100 - len(found_consistency_issues) * int(_cfg("consistency.penalty_per_issue", 20)))

    total = round_half_up(
        structure * _cfg("weights.structure", 0.25)
        + readability * _cfg("weights.readability", 0.35)
        + sections_score * _cfg("weights.sections", 0.25)
        + consistency * _cfg("weights.consistency", 0.15)
    )

    page_count = document.page_count if document is not None else 1
    if page_count > _cfg("pages.warn_above", 2):
        severity = "considerablemente largo" if page_count > _cfg("pages.severe_above", 4) else "ligeramente largo"
        issues.append(
            f"El CV tiene {page_count} páginas, lo que es {severity}. La mayoría de reclutadores prefieren "
            "CVs de 1-2 páginas, y los sistemas ATS pueden tener problemas con documentos extensos. "
            "Considera priorizar la información más relevante."
        )

    text_density = len(text) / (page_count or 1)
    if text_density > _cfg("density.max_chars_per_page", 5000):
        issues.append(ISSUE_DENSITY)

    return FormatAnalysis(
        format_score=FormatScore(
            structure=structure,
            readability=readability,
            sections=sections_score,
            consistency=consistency,
            total=min(100, max(0, total)),
        ),
        format_issues=issues,
        section_count=section_count,
        has_detected_sections=section_count > 2,
        avg_characters_per_line=avg_chars,
        potential_table_count=tables,
        graphic_elements_count=graphics,
        text_density=float(text_density),
        section_analysis=SectionAnalysis(
            present_sections=present,
            missing_sections=[name for name, _ in missing],
        ),
    )
