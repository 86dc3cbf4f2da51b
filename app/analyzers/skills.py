from __future__ import annotations

import re

from app.catalog.skills import COMMON_SKILLS, SKILL_CATEGORIES, get_skill_category
from app.text import clean_text

_SYMBOL_RE = re.compile(r"[^\w\s]")


def analyze_skills(text: str) -> list[str]:
    """Return the catalog skills whose name appears anywhere in ``text``.

    Plain names are searched in the cleaned text; names carrying symbols
    ("c#", ".net", "ci/cd") in the lower-cased raw text, where the symbols survive.
    """
    cleaned = clean_text(text)
    lowered = text.lower()
    return [
        skill
        for skill in COMMON_SKILLS
        if skill in (lowered if _SYMBOL_RE.search(skill) else cleaned)
    ]


def categorize_skills(skills: list[str]) -> dict[str, list[str]]:
    categories: dict[str, list[str]] = {category: [] for category in SKILL_CATEGORIES}
    for skill in skills:
        categories[get_skill_category(skill)].append(skill)
    return categories
