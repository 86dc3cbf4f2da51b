from .experience import analyze_experience
from .format import analyze_format
from .keywords import analyze_keywords
from .skills import analyze_skills, categorize_skills
from .text import analyze_cv_text

__all__ = [
    "analyze_cv_text",
    "analyze_experience",
    "analyze_format",
    "analyze_keywords",
    "analyze_skills",
    "categorize_skills",
]
