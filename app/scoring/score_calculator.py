from __future__ import annotations

from app.core.config.scoring import get_scoring_value
from app.core.rounding import round_half_up
from app.schemas.analysis import ATSScore, FormatAnalysis, ScoreComponents, ScoreWeights


def score_weights() -> ScoreWeights:
    return ScoreWeights(
        keywords=float(get_scoring_value("ats.weights.keywords", 0.30)),
        skills=float(get_scoring_value("ats.weights.skills", 0.25)),
        word_count=float(get_scoring_value("ats.weights.word_count", 0.05)),
        format=float(get_scoring_value("ats.weights.format", 0.40)),
    )


def calculate_ats_score(
    keyword_count: int,
    skill_count: int,
    word_count: int,
    format_analysis: FormatAnalysis | None = None,
) -> ATSScore:
    """Weighted 0-100 compatibility score.

    Content weights are renormalized by ``1 - format weight`` so the content
    score stands on its own; the total blends it with the format score only
    when format findings are supplied.
    """
    weights = score_weights()
    keyword_target = float(get_scoring_value("ats.targets.keywords", 10))
    skill_target = float(get_scoring_value("ats.targets.skills", 8))
    word_target = float(get_scoring_value("ats.targets.word_count", 300))

    keyword_score = min(keyword_count / keyword_target, 1) * 100
    skill_score = min(skill_count / skill_target, 1) * 100
    word_count_score = 100.0 if word_count > word_target else word_count / word_target * 100

    content_share = 1 - weights.format
    content = (
        keyword_score * weights.keywords
        + skill_score * weights.skills
        + word_count_score * weights.word_count
    ) / content_share

    format_total = 0
    total = content
    if format_analysis is not None:
        format_total = format_analysis.format_score.total
        total = content * content_share + format_total * weights.format

    return ATSScore(
        total=min(100, round_half_up(total)),
        content=min(100, round_half_up(content)),
        format=format_total,
        components=ScoreComponents(
            keywords=round_half_up(keyword_score),
            skills=round_half_up(skill_score),
            word_count=round_half_up(word_count_score),
            format=format_total,
        ),
        weights=weights,
    )
