from __future__ import annotations

import re
from dataclasses import dataclass

from .ordered import OrderedSet

OTHER_SECTION = "other"
MAX_HEADER_CHARS = 50

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"(?:\+?\d{1,3}[- ]?)?\(?(?:\d{2,3})\)?[- ]?\d{3,4}[- ]?\d{3,4}")


@dataclass(frozen=True)
class SectionRule:
    name: str
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.patterns)


def _rule(name: str, *patterns: str) -> SectionRule:
    return SectionRule(name=name, patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns))


# Evaluated top to bottom; the first rule that matches a line claims it.
# "Lenguajes" therefore lands in habilidades even though idiomas lists it too.
SECTION_RULES: tuple[SectionRule, ...] = (
    _rule(
        "contacto",
        r"\b(?:contacto|información personal|datos personales|datos de contacto|información de contacto)\b",
        r"\b(?:contact information|personal information|contact details)\b",
        r"^[^@\n]{0,40}[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}",
    ),
    _rule(
        "educacion",
        r"\b(?:educación|formación académica|estudios|formación|títulos académicos)\b",
        r"\b(?:education|academic background|studies|qualifications|degrees)\b",
    ),
    _rule(
        "experiencia",
        r"\b(?:experiencia(?:\s+laboral|\s+profesional)?|trayectoria(?:\s+profesional)?|historial(?:\s+laboral)?)\b",
        r"\b(?:experience|work experience|professional experience|employment history|career history)\b",
    ),
    _rule(
        "habilidades",
        r"\b(?:habilidades|competencias|skills|aptitudes|conocimientos|capacidades)\b",
        r"\b(?:skills|competencies|technical skills|core competencies)\b",
        r"\b(?:conocimientos técnicos|habilidades técnicas|lenguajes|technologies)\b",
    ),
    _rule(
        "proyectos",
        r"\b(?:proyectos|portfolio|trabajos realizados|proyectos destacados)\b",
        r"\b(?:projects|portfolio|relevant projects|case studies)\b",
    ),
    _rule(
        "idiomas",
        r"\b(?:idiomas|lenguajes|conocimientos de idiomas|nivel de idiomas)\b",
        r"\b(?:languages|language skills|language proficiency)\b",
    ),
    _rule(
        "certificaciones",
        r"\b(?:certificaciones|certificados|diplomas|acreditaciones|cursos)\b",
        r"\b(?:certifications|certificates|credentials|accreditations|courses)\b",
    ),
    _rule(
        "referencias",
        r"\b(?:referencias|recomendaciones|contactos de referencia)\b",
        r"\b(?:references|recommendations|referees)\b",
    ),
    _rule(
        "resumen",
        r"\b(?:resumen|perfil|perfil profesional|objetivo profesional|sobre mí|acerca de mí)\b",
        r"\b(?:summary|profile|professional profile|career objective|about me)\b",
    ),
    _rule(
        "logros",
        r"\b(?:logros|reconocimientos|éxitos|premios|méritos)\b",
        r"\b(?:achievements|accomplishments|honors|awards|recognitions)\b",
    ),
)

SECTION_NAMES: tuple[str, ...] = tuple(rule.name for rule in SECTION_RULES) + (OTHER_SECTION,)

_YEAR = r"(?:20\d{2}|19\d{2})"
_MONTH = r"(?:0?[1-9]|1[0-2])"
_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"{_MONTH}[/\-]{_YEAR}"),
    re.compile(rf"{_YEAR}[/\-]{_MONTH}"),
    re.compile(rf"\b{_YEAR}\b"),
    re.compile(rf"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* {_YEAR}\b", re.IGNORECASE),
    re.compile(rf"\b{_YEAR} (?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\b", re.IGNORECASE),
    re.compile(rf"\b(?:Ene|Feb|Mar|Abr|May|Jun|Jul|Ago|Sep|Oct|Nov|Dic)[a-z]* {_YEAR}\b", re.IGNORECASE),
    re.compile(rf"\b{_YEAR} (?:Ene|Feb|Mar|Abr|May|Jun|Jul|Ago|Sep|Oct|Nov|Dic)[a-z]*\b", re.IGNORECASE),
    re.compile(rf"\b\d{{1,2}}[/\-]{_MONTH}[/\-]{_YEAR}\b"),
    re.compile(rf"\b{_YEAR}[/\-]{_MONTH}[/\-]\d{{1,2}}\b"),
)


def clean_text(text: str) -> str:
    """Lower-case, replace punctuation with spaces and collapse whitespace."""
    lowered = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def strip_punctuation(text: str) -> str:
    """Lower-case and replace punctuation with spaces, keeping line structure."""
    return _NON_WORD_RE.sub(" ", text.lower())


def classify_header(line: str) -> str | None:
    stripped = line.strip()
    if not stripped or len(stripped) >= MAX_HEADER_CHARS:
        return None
    for rule in SECTION_RULES:
        if rule.matches(stripped):
            return rule.name
    return None


def detect_sections(text: str) -> dict[str, str]:
    """Split a résumé into named sections keyed by header detection.

    Each header owns the lines strictly between itself and the next header.
    Lines before the first header go to ``other``; when no header is found the
    whole text does. A section whose header repeats accumulates the content of
    every occurrence, so no line is dropped.
    """
    lines = text.split("\n")
    headers: list[tuple[int, str]] = []
    for index, line in enumerate(lines):
        name = classify_header(line)
        if name is not None:
            headers.append((index, name))

    if not headers:
        return {OTHER_SECTION: text}

    sections: dict[str, str] = {OTHER_SECTION: "\n".join(lines[: headers[0][0]]).strip()}
    for position, (index, name) in enumerate(headers):
        end = headers[position + 1][0] if position + 1 < len(headers) else len(lines)
        content = "\n".join(lines[index + 1 : end]).strip()
        previous = sections.get(name)
        if previous and content:
            sections[name] = f"{previous}\n{content}"
        elif not previous:
            sections[name] = content
    return sections


def present_sections(sections: dict[str, str]) -> list[str]:
    return [name for name, content in sections.items() if name != OTHER_SECTION and content]


def extract_dates(text: str) -> list[str]:
    found: OrderedSet[str] = OrderedSet()
    for pattern in _DATE_PATTERNS:
        found.update(match.group(0) for match in pattern.finditer(text))
    return found.to_list()


def extract_emails(text: str) -> list[str]:
    return _EMAIL_RE.findall(text)


def extract_phone_numbers(text: str) -> list[str]:
    return _PHONE_RE.findall(text)
