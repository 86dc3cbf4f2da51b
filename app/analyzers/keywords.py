from __future__ import annotations

import re
from collections import Counter

from app.catalog.job_roles import JobRoleProfile
from app.catalog.keywords import (
    COMMON_JOB_KEYWORDS,
    KEYWORDS_BY_INDUSTRY,
    NEGATIVE_KEYWORDS,
    STRENGTH_INDICATORS,
    find_phrases,
)
from app.core.config.scoring import get_scoring_value
from app.core.rounding import round_half_up
from app.schemas.analysis import (
    KeyPhraseCoverage,
    KeyPhraseHit,
    KeywordAnalysis,
    KeywordMatch,
    ProfileKeywordCoverage,
    ProfileKeywordHit,
    ProfileMatch,
    WordFrequency,
)
from app.text import clean_text, cosine_similarity, filter_tokens, tokenize

_SYMBOL_RE = re.compile(r"[^\w\s]")


def _boundary_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b")


def symbol_term_pattern(keyword: str) -> re.Pattern[str] | None:
    """Pattern for terms such as C++ or C# that collapse to a single letter without their symbols.

    These are searched in the lower-cased raw text, bounded by non-word characters,
    so "C++" never matches "C#" or an address abbreviation like "C/".
    """
    if len(clean_text(keyword)) > 1 or not _SYMBOL_RE.search(keyword):
        return None
    return re.compile(rf"(?<!\w){re.escape(keyword.lower())}(?!\w)")


def count_occurrences(cleaned: str, term: str) -> int:
    if not term:
        return 0
    return len(_boundary_pattern(term).findall(cleaned))


def contains_term(cleaned: str, term: str) -> bool:
    """Substring test; single-character terms such as "r" must stand alone as a word."""
    if len(term) == 1:
        return count_occurrences(cleaned, term) > 0
    return bool(term) and term in cleaned


def _contexts(haystack: str, pattern: re.Pattern[str]) -> list[str]:
    """Up to ``keywords.max_contexts`` windows around the hits of ``pattern``."""
    width = int(get_scoring_value("keywords.context_chars", 50))
    limit = int(get_scoring_value("keywords.max_contexts", 3))
    contexts: list[str] = []
    for match in pattern.finditer(haystack):
        start = max(0, match.start() - width)
        end = min(len(haystack), match.end() + width)
        contexts.append(haystack[start:end].strip())
        if len(contexts) >= limit:
            break
    return contexts


def match_keyword(keyword: str, cleaned: str, lowered: str) -> KeywordMatch | None:
    """Locate a catalog keyword in a text given as ``clean_text`` output and as ``lower()`` output."""
    pattern = symbol_term_pattern(keyword)
    if pattern is None:
        term = clean_text(keyword)
        if not contains_term(cleaned, term):
            return None
        haystack, pattern = cleaned, _boundary_pattern(term)
    elif pattern.search(lowered) is None:
        return None
    else:
        haystack = lowered
    return KeywordMatch(
        keyword=keyword,
        occurrence_count=len(pattern.findall(haystack)),
        context_snippets=_contexts(haystack, pattern),
    )


def keyword_present(keyword: str, cleaned: str, lowered: str) -> bool:
    pattern = symbol_term_pattern(keyword)
    if pattern is not None:
        return pattern.search(lowered) is not None
    return contains_term(cleaned, clean_text(keyword))


def word_frequency(text: str) -> list[WordFrequency]:
    counts = Counter(filter_tokens(tokenize(text)))
    return [WordFrequency(word=word, count=count) for word, count in counts.most_common()]


def _profile_coverage(cleaned: str, lowered: str, skills: tuple[str, ...]) -> ProfileKeywordCoverage:
    hits = []
    for skill in skills:
        match = match_keyword(skill, cleaned, lowered)
        hits.append(
            ProfileKeywordHit(
                keyword=skill,
                found=match is not None,
                count=match.occurrence_count if match is not None else 0,
            )
        )
    found_count = sum(1 for hit in hits if hit.found)
    percentage = round_half_up(found_count / len(skills) * 100) if skills else 0
    return ProfileKeywordCoverage(
        keywords=hits,
        found_count=found_count,
        total_count=len(skills),
        percentage=percentage,
    )


def _key_phrase_coverage(cleaned: str, phrases: tuple[str, ...]) -> KeyPhraseCoverage:
    threshold = get_scoring_value("keywords.close_match_similarity", 70)
    hits = []
    for phrase in phrases:
        exact = clean_text(phrase) in cleaned
        similarity = 0 if exact else round_half_up(cosine_similarity(cleaned, phrase) * 100)
        hits.append(KeyPhraseHit(phrase=phrase, exact_match=exact, similarity=min(100, similarity)))
    return KeyPhraseCoverage(
        phrases=hits,
        exact_matches=sum(1 for hit in hits if hit.exact_match),
        close_matches=sum(1 for hit in hits if not hit.exact_match and hit.similarity > threshold),
        total_phrases=len(phrases),
    )


def keyword_recommendations(matches: list[KeywordMatch], job_profile: JobRoleProfile | None) -> list[str]:
    recommendations: list[str] = []
    if len(matches) < int(get_scoring_value("keywords.min_keywords", 10)):
        recommendations.append("Incluye más palabras clave relevantes para aumentar la compatibilidad ATS.")

    if job_profile is None:
        return recommendations

    found = {match.keyword.lower() for match in matches}
    missing_essential = [skill for skill in job_profile.essential_skills if skill.lower() not in found]
    if missing_essential:
        recommendations.append(
            f"Incluye estas habilidades esenciales para el puesto de {job_profile.title}: "
            f"{', '.join(missing_essential)}."
        )

    limit = int(get_scoring_value("keywords.max_missing_preferred", 3))
    missing_preferred = [skill for skill in job_profile.preferred_skills if skill.lower() not in found][:limit]
    if missing_preferred:
        recommendations.append(f"Considera añadir estas habilidades preferidas: {', '.join(missing_preferred)}.")
    return recommendations


def analyze_keywords(text: str, job_profile: JobRoleProfile | None = None) -> KeywordAnalysis:
    cleaned = clean_text(text)
    lowered = text.lower()

    matches: list[KeywordMatch] = []
    for keyword in COMMON_JOB_KEYWORDS:
        match = match_keyword(keyword, cleaned, lowered)
        if match is not None:
            matches.append(match)

    profile_match = None
    if job_profile is not None:
        profile_match = ProfileMatch(
            essential_keywords=_profile_coverage(cleaned, lowered, job_profile.essential_skills),
            preferred_keywords=_profile_coverage(cleaned, lowered, job_profile.preferred_skills),
            key_phrases=_key_phrase_coverage(cleaned, job_profile.key_phrases),
        )

    total_occurrences = sum(match.occurrence_count for match in matches)
    filtered_count = len(filter_tokens(tokenize(cleaned)))
    density = total_occurrences / filtered_count * 100 if filtered_count else 0.0

    industry_matches = {}
    for industry, keywords in KEYWORDS_BY_INDUSTRY.items():
        found = find_phrases(text, keywords)
        if found:
            industry_matches[industry] = found

    top_words = int(get_scoring_value("keywords.top_words", 10))
    return KeywordAnalysis(
        matches=matches,
        keyword_count=len(matches),
        total_keyword_occurrences=total_occurrences,
        keyword_density=density,
        most_frequent_words=word_frequency(text)[:top_words],
        profile_match=profile_match,
        industry_matches=industry_matches,
        negative_keywords=find_phrases(text, NEGATIVE_KEYWORDS),
        strength_indicators=find_phrases(text, STRENGTH_INDICATORS),
        recommendations=keyword_recommendations(matches, job_profile),
    )
