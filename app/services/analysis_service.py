from __future__ import annotations

import logging
from pathlib import Path

from app.analyzers import (
    analyze_cv_text,
    analyze_experience,
    analyze_format,
    analyze_keywords,
    categorize_skills,
)
from app.catalog import get_role_by_id
from app.core.config import settings
from app.core.config.scoring import get_scoring_value
from app.parsing.models import ParsedDoc
from app.parsing.parse import parse_document
from app.schemas.analysis import (
    AnalysisReport,
    AnalysisResult,
    ContactInfo,
    DocumentInfo,
    Entities,
    TermScore,
)
from app.scoring import calculate_ats_score, generate_recommendations
from app.text import extract_emails, extract_entities, extract_key_terms, extract_phone_numbers

from .file_handler import save_analysis_json

logger = logging.getLogger(__name__)


def build_analysis(document: ParsedDoc, target_role: str | None = None) -> AnalysisResult:
    """Run every analyzer over the document text and assemble the aggregate."""
    text = document.text
    role = get_role_by_id(target_role)
    logger.info(
        "analysis_started file=%s pages=%s chars=%s role=%s",
        document.file_name,
        document.page_count,
        len(text),
        role.role_id if role else "general",
    )

    basic = analyze_cv_text(text)
    experience = analyze_experience(text)
    keywords = analyze_keywords(text, role)
    format_findings = analyze_format(text, document)

    ats_scores = calculate_ats_score(
        keywords.keyword_count or len(basic.keywords_found),
        len(basic.skills),
        basic.word_count,
        format_findings,
    )
    key_terms = extract_key_terms(text, int(get_scoring_value("text.key_terms", 15)))

    return AnalysisResult(
        basic=basic.model_copy(update={"ats_score": ats_scores}),
        experience=experience,
        keywords=keywords,
        format=format_findings,
        categorized_skills=categorize_skills(basic.skills),
        entities=Entities(**extract_entities(text)),
        key_terms=[TermScore(**item) for item in key_terms],
        contact=ContactInfo(emails=extract_emails(text), phones=extract_phone_numbers(text)),
        ats_scores=ats_scores,
        document_info=DocumentInfo(
            file_type=document.source_type.upper(),
            file_name=document.file_name,
            pages=document.page_count,
            character_count=len(text),
            target_role=target_role,
        ),
    )


def run_analysis(
    document: ParsedDoc,
    target_role: str | None = None,
    *,
    persist: bool | None = None,
    output_dir: str | Path | None = None,
) -> AnalysisReport:
    analysis = build_analysis(document, target_role)
    recommendation_set = generate_recommendations(analysis, target_role, cv_text=document.text)

    should_persist = settings.persist_results if persist is None else persist
    if should_persist:
        save_analysis_json(analysis.model_dump(mode="json", by_alias=True), output_dir)

    logger.info(
        "analysis_completed file=%s total=%s recommendations=%s priority=%s",
        document.file_name,
        analysis.ats_scores.total,
        recommendation_set.total_recommendations,
        recommendation_set.priority,
    )
    return AnalysisReport(
        **dict(analysis),
        recommendations=recommendation_set.recommendations,
        priority=recommendation_set.priority,
        total_recommendations=recommendation_set.total_recommendations,
    )


def analyze_file(
    file_path: str | Path,
    target_role: str | None = None,
    *,
    persist: bool | None = None,
    output_dir: str | Path | None = None,
) -> AnalysisReport:
    document = parse_document(file_path)
    return run_analysis(document, target_role, persist=persist, output_dir=output_dir)


def analyze_upload(file_path: str | Path, file_name: str, target_role: str | None = None) -> AnalysisReport:
    """Analyze a stored upload, reporting the name the client sent instead of the storage name."""
    document = parse_document(file_path).model_copy(update={"file_name": file_name})
    return run_analysis(document, target_role)
