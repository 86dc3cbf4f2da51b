from .nlp import (
    STOPWORDS,
    content_tokens,
    cosine_similarity,
    extract_entities,
    extract_key_terms,
    filter_tokens,
    rank_terms,
    tokenize,
)
from .ordered import OrderedSet
from .processor import (
    OTHER_SECTION,
    SECTION_NAMES,
    SECTION_RULES,
    classify_header,
    clean_text,
    detect_sections,
    extract_dates,
    extract_emails,
    extract_phone_numbers,
    present_sections,
    strip_punctuation,
)

__all__ = [
    "OrderedSet",
    "OTHER_SECTION",
    "SECTION_NAMES",
    "SECTION_RULES",
    "STOPWORDS",
    "classify_header",
    "clean_text",
    "content_tokens",
    "cosine_similarity",
    "detect_sections",
    "extract_dates",
    "extract_emails",
    "extract_entities",
    "extract_key_terms",
    "extract_phone_numbers",
    "filter_tokens",
    "present_sections",
    "rank_terms",
    "strip_punctuation",
    "tokenize",
]
