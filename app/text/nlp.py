from __future__ import annotations

import math
import re
from collections import Counter

from sklearn.feature_extraction.text import TfidfVectorizer

from .ordered import OrderedSet
from .processor import strip_punctuation

_TOKEN_RE = re.compile(r"\w+")
_ORG_RE = re.compile(
    r"\b(?:[A-Z][a-z]+ )+(?:Inc|LLC|Ltd|SA|SL|GmbH|Corp|Company|Technologies|Solutions)\b"
)
_ENTITY_DATE_RE = re.compile(
    r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* \d{4}\b"
    r"|\b\d{1,2}/\d{1,2}/\d{4}\b"
    r"|\b\d{4}\b"
)

MIN_TOKEN_CHARS = 3

STOPWORDS = frozenset(
    {
        # English
        "about", "above", "after", "again", "all", "also", "am", "an", "and", "another",
        "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
        "between", "both", "but", "by", "came", "can", "cannot", "come", "could", "did",
        "do", "does", "doing", "during", "each", "few", "for", "from", "further", "get",
        "got", "has", "had", "he", "have", "her", "here", "him", "himself", "his", "how",
        "if", "in", "into", "is", "it", "its", "itself", "like", "make", "many", "me",
        "might", "more", "most", "much", "must", "my", "myself", "never", "now", "of",
        "on", "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own",
        "said", "same", "see", "should", "since", "so", "some", "still", "such", "take",
        "than", "that", "the", "their", "theirs", "them", "themselves", "then", "there",
        "these", "they", "this", "those", "through", "to", "too", "under", "until", "up",
        "very", "was", "way", "we", "well", "were", "what", "where", "when", "which",
        "while", "who", "whom", "with", "would", "why", "you", "your", "yours", "yourself",
        # Spanish
        "como", "con", "contra", "cual", "cuando", "del", "desde", "donde", "durante",
        "el", "ella", "ellas", "ellos", "en", "entre", "era", "eran", "es", "esa", "esas",
        "ese", "eso", "esos", "esta", "estaba", "estas", "este", "esto", "estos", "fue",
        "fueron", "ha", "han", "hasta", "la", "las", "le", "les", "lo", "los", "mas",
        "más", "mi", "mis", "muy", "nos", "nuestra", "nuestro", "para", "pero", "por",
        "que", "se", "ser", "sin", "sobre", "son", "su", "sus", "también", "tiene", "todo",
        "todos", "un", "una", "unas", "uno", "unos", "ya",
    }
)


def tokenize(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


def filter_tokens(tokens: list[str]) -> list[str]:
    return [token for token in tokens if token not in STOPWORDS and len(token) >= MIN_TOKEN_CHARS]


def content_tokens(text: str) -> list[str]:
    """Tokens of ``text`` with punctuation, stopwords and short tokens removed."""
    return filter_tokens(tokenize(strip_punctuation(text)))


def rank_terms(tokens: list[str], count: int) -> list[dict[str, float | str]]:
    """Top ``count`` terms of a single-document TF-IDF index over ``tokens``.

    With one document every idf is 1, so ranking follows term frequency; ties
    keep first-occurrence order.
    """
    if not tokens or count <= 0:
        return []

    vectorizer = TfidfVectorizer(analyzer=lambda doc: doc, norm=None, lowercase=False)
    matrix = vectorizer.fit_transform([tokens])
    vocabulary = vectorizer.get_feature_names_out()
    scores = matrix.toarray()[0]

    first_seen: dict[str, int] = {}
    for index, token in enumerate(tokens):
        first_seen.setdefault(token, index)

    ranked = sorted(
        zip(vocabulary, scores),
        key=lambda item: (-item[1], first_seen[str(item[0])]),
    )
    return [{"term": str(term), "tfidf": float(score)} for term, score in ranked[:count]]


def extract_key_terms(text: str, count: int = 10) -> list[dict[str, float | str]]:
    return rank_terms(content_tokens(text), count)


def cosine_similarity(left_text: str, right_text: str) -> float:
    """Cosine similarity of raw term-frequency vectors over the union vocabulary."""
    left = Counter(filter_tokens(tokenize(left_text)))
    right = Counter(filter_tokens(tokenize(right_text)))
    if not left or not right:
        return 0.0

    dot = sum(left[term] * right[term] for term in left.keys() & right.keys())
    left_norm = math.sqrt(sum(value * value for value in left.values()))
    right_norm = math.sqrt(sum(value * value for value in right.values()))
    if left_norm <= 0 or right_norm <= 0:
        return 0.0
    return dot / (left_norm * right_norm)


def extract_entities(text: str) -> dict[str, list[str]]:
    return {
        "organizations": OrderedSet(_ORG_RE.findall(text)).to_list(),
        "dates": OrderedSet(_ENTITY_DATE_RE.findall(text)).to_list(),
    }
