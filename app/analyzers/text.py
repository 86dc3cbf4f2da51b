from __future__ import annotations

from app.catalog.keywords import COMMON_JOB_KEYWORDS
from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import TermScore, TextAnalysis
from app.scoring.score_calculator import calculate_ats_score
from app.text import clean_text, filter_tokens, rank_terms, tokenize

from .keywords import keyword_present
from .skills import analyze_skills


def find_catalog_keywords(text: str) -> list[str]:
    cleaned = clean_text(text)
    lowered = text.lower()
    return [keyword for keyword in COMMON_JOB_KEYWORDS if keyword_present(keyword, cleaned, lowered)]


def analyze_cv_text(text: str) -> TextAnalysis:
    cleaned = clean_text(text)
    tokens = tokenize(cleaned)
    filtered = filter_tokens(tokens)

    keywords_found = find_catalog_keywords(text)
    skills = analyze_skills(text)
    count = int(get_scoring_value("text.important_terms", 10))

    return TextAnalysis(
        keywords_found=keywords_found,
        skills=skills,
        word_count=len(tokens),
        unique_words=len(set(tokens)),
        ats_score=calculate_ats_score(len(keywords_found), len(skills), len(filtered)),
        important_terms=[TermScore(**item) for item in rank_terms(filtered, count)],
    )
