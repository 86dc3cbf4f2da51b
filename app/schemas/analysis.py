from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisModel(BaseModel):
    """Immutable result object serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class KeywordMatch(AnalysisModel):
    keyword: str
    occurrence_count: int
    context_snippets: list[str] = Field(default_factory=list, max_length=3)


class ProfileKeywordHit(AnalysisModel):
    keyword: str
    found: bool
    count: int


class ProfileKeywordCoverage(AnalysisModel):
    keywords: list[ProfileKeywordHit] = Field(default_factory=list)
    found_count: int = 0
    total_count: int = 0
    percentage: int = 0


class KeyPhraseHit(AnalysisModel):
    phrase: str
    exact_match: bool
    similarity: int = Field(ge=0, le=100)


class KeyPhraseCoverage(AnalysisModel):
    phrases: list[KeyPhraseHit] = Field(default_factory=list)
    exact_matches: int = 0
    close_matches: int = 0
    total_phrases: int = 0


class ProfileMatch(AnalysisModel):
    essential_keywords: ProfileKeywordCoverage
    preferred_keywords: ProfileKeywordCoverage
    key_phrases: KeyPhraseCoverage


class WordFrequency(AnalysisModel):
    word: str
    count: int


class KeywordAnalysis(AnalysisModel):
    matches: list[KeywordMatch] = Field(default_factory=list)
    keyword_count: int = 0
    total_keyword_occurrences: int = 0
    keyword_density: float = 0.0
    most_frequent_words: list[WordFrequency] = Field(default_factory=list)
    profile_match: ProfileMatch | None = None
    industry_matches: dict[str, list[str]] = Field(default_factory=dict)
    negative_keywords: list[str] = Field(default_factory=list)
    strength_indicators: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class ExperienceAnalysis(AnalysisModel):
    years_of_experience: int = 0
    roles: list[str] = Field(default_factory=list)
    job_count: int = 0
    achievements: list[str] = Field(default_factory=list)
    achievement_count: int = 0
    has_measurable_results: bool = False


class FormatScore(AnalysisModel):
    structure: int = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    sections: int = Field(ge=0, le=100)
    consistency: int = Field(ge=0, le=100)
    total: int = Field(ge=0, le=100)


class SectionAnalysis(AnalysisModel):
    present_sections: list[str] = Field(default_factory=list)
    missing_sections: list[str] = Field(default_factory=list)


class FormatAnalysis(AnalysisModel):
    format_score: FormatScore
    format_issues: list[str] = Field(default_factory=list)
    section_count: int = 0
    has_detected_sections: bool = False
    avg_characters_per_line: int = 0
    potential_table_count: int = 0
    graphic_elements_count: int = 0
    text_density: float = 0.0
    section_analysis: SectionAnalysis = Field(default_factory=SectionAnalysis)


class ScoreComponents(AnalysisModel):
    keywords: int
    skills: int
    word_count: int
    format: int


class ScoreWeights(AnalysisModel):
    keywords: float
    skills: float
    word_count: float
    format: float


class ATSScore(AnalysisModel):
    total: int = Field(ge=0, le=100)
    content: int = Field(ge=0, le=100)
    format: int = Field(ge=0, le=100)
    components: ScoreComponents
    weights: ScoreWeights


class TermScore(AnalysisModel):
    term: str
    tfidf: float


class TextAnalysis(AnalysisModel):
    keywords_found: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    word_count: int = 0
    unique_words: int = 0
    ats_score: ATSScore
    important_terms: list[TermScore] = Field(default_factory=list)


class Entities(AnalysisModel):
    organizations: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)


class ContactInfo(AnalysisModel):
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)


class DocumentInfo(AnalysisModel):
    file_type: str
    file_name: str
    pages: int
    character_count: int
    target_role: str | None = None


class Recommendations(AnalysisModel):
    general: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    formatting: list[str] = Field(default_factory=list)

    def total(self) -> int:
        return sum(
            len(items)
            for items in (self.general, self.keywords, self.skills, self.experience, self.formatting)
        )


Priority = Literal["Alta", "Media"]


class RecommendationSet(AnalysisModel):
    recommendations: Recommendations
    total_recommendations: int
    priority: Priority


class AnalysisResult(AnalysisModel):
    basic: TextAnalysis
    experience: ExperienceAnalysis
    keywords: KeywordAnalysis
    format: FormatAnalysis
    categorized_skills: dict[str, list[str]] = Field(default_factory=dict)
    entities: Entities = Field(default_factory=Entities)
    key_terms: list[TermScore] = Field(default_factory=list)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    ats_scores: ATSScore
    document_info: DocumentInfo


class AnalysisReport(AnalysisResult):
    recommendations: Recommendations
    priority: Priority
    total_recommendations: int
