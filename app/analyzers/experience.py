from __future__ import annotations

import re
from datetime import datetime

from app.schemas.analysis import ExperienceAnalysis
from app.text import OrderedSet, detect_sections, extract_dates

_COMMON_TITLES: tuple[str, ...] = (
    "desarrollador", "developer", "ingeniero", "engineer", "arquitecto", "architect",
    "programador", "programmer", "analista", "analyst", "diseñador", "designer",
    "líder", "lead", "jefe", "head", "director", "manager", "consultor", "consultant",
    "devops", "fullstack", "frontend", "backend", "full stack", "front end", "back end",
    "qa", "tester", "sre", "data scientist", "científico de datos",
)
_TITLE_RE = re.compile(rf"\b(?:{'|'.join(_COMMON_TITLES)})\s+[\w\s]{{2,30}}\b", re.IGNORECASE)

_ACHIEVEMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:logré|logrado|conseguí|conseguido|desarrollé|desarrollado|implementé|implementado)\b.*?\.",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:reduje|reducido|aumenté|aumentado|mejoré|mejorado|optimicé|optimizado)\b.*?\.",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:lideré|liderado|dirigí|dirigido|gestioné|gestionado|coordiné|coordinado)\b.*?\.",
        re.IGNORECASE,
    ),
)
_MEASURABLE_RE = re.compile(r"\d+%|\d+ veces|incremento|aumento|reducción|optimización", re.IGNORECASE)
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def estimate_years_of_experience(dates: list[str], *, current_year: int | None = None) -> int:
    """Span between the oldest and newest past year mentioned; 0 with fewer than two years."""
    ceiling = current_year if current_year is not None else datetime.now().year
    years: set[int] = set()
    for date in dates:
        match = _YEAR_RE.search(date)
        if match:
            year = int(match.group(0))
            if year <= ceiling:
                years.add(year)
    if len(years) < 2:
        return 0
    return max(years) - min(years)


def extract_job_roles(text: str) -> list[str]:
    return OrderedSet(match.group(0).strip() for match in _TITLE_RE.finditer(text)).to_list()


def detect_achievements(text: str) -> list[str]:
    found: OrderedSet[str] = OrderedSet()
    for pattern in _ACHIEVEMENT_PATTERNS:
        found.update(match.group(0).strip() for match in pattern.finditer(text))
    return found.to_list()


def analyze_experience(text: str) -> ExperienceAnalysis:
    sections = detect_sections(text)
    experience_text = sections.get("experiencia") or text

    years = estimate_years_of_experience(extract_dates(experience_text))
    roles = extract_job_roles(experience_text)
    achievements = detect_achievements(experience_text)

    return ExperienceAnalysis(
        years_of_experience=years,
        roles=roles,
        job_count=len(roles),
        achievements=achievements,
        achievement_count=len(achievements),
        has_measurable_results=any(_MEASURABLE_RE.search(item) for item in achievements),
    )
