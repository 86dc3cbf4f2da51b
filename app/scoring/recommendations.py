from __future__ import annotations

import logging
import re

from app.catalog import get_role_by_id
from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import AnalysisResult, Recommendations, RecommendationSet, TextAnalysis

logger = logging.getLogger(__name__)

_NAME_TOKENS = r"(?:CV|Resume|Curriculum|Vitae|Currículum|Résumé)"
PROFESSIONAL_FILE_NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^[A-Za-z]+(?:_[A-Za-z]+)*_{_NAME_TOKENS}(?:_[A-Za-z]+)*\.(?:pdf|docx)$", re.IGNORECASE),
    re.compile(rf"^[A-Za-z]+(?: [A-Za-z]+)* {_NAME_TOKENS}(?: [A-Za-z]+)*\.(?:pdf|docx)$", re.IGNORECASE),
)

MSG_TOO_SHORT = "El CV es demasiado corto. Considera añadir más detalles sobre tu experiencia y habilidades."
MSG_TOO_LONG = "El CV es bastante extenso. Considera acortarlo para mantener la atención del reclutador."
MSG_LOW_SCORE = "La puntuación ATS es baja. Sigue las recomendaciones específicas para mejorarla."
MSG_MORE_KEYWORDS = "Incluye más palabras clave relevantes para el sector tecnológico."
MSG_MEASURABLE_RESULTS = (
    'Añade resultados cuantificables en tu experiencia laboral (ej: "Aumenté el rendimiento en un 25%", '
    '"Reduje los tiempos de carga en un 40%").'
)
MSG_NO_ROLES = (
    "No se detectan roles claros en tu experiencia. Asegúrate de incluir títulos de puesto específicos y destacados."
)
MSG_FILE_NAME = (
    'Nombra tu archivo CV de forma profesional, como "Nombre_Apellido_CV.pdf". Evita caracteres especiales, '
    'espacios y nombres genéricos como "cv.pdf" o "resume.pdf".'
)
MISSING_SECTION_MESSAGES: tuple[tuple[str, str], ...] = (
    (
        "educacion",
        "Añade una sección clara de Educación con títulos, instituciones y fechas. "
        "Esta sección es fundamental para los sistemas ATS.",
    ),
    (
        "experiencia",
        "Incluye una sección de Experiencia Laboral bien estructurada con empresa, cargo, fechas y "
        "responsabilidades. Usa formato consistente para cada entrada.",
    ),
    (
        "habilidades",
        "Añade una sección específica de Habilidades Técnicas donde enumeres tus competencias. "
        "Los ATS buscan esta sección para filtrar candidatos.",
    ),
)
MSG_READABILITY = (
    "El formato tiene problemas de legibilidad. Usa párrafos cortos, viñetas simples y evita diseños "
    "complejos que los ATS no pueden procesar correctamente."
)
MSG_CONSISTENCY = (
    "Hay inconsistencias en el formato. Mantén la misma estructura, estilo de viñetas y formato de fechas "
    "en todo el documento para mejorar la legibilidad ATS."
)
MSG_TABLES = (
    "Reemplaza las tablas por listas con viñetas. Las tablas son uno de los principales problemas para los "
    "sistemas ATS, ya que suelen leer de izquierda a derecha y de arriba a abajo, mezclando información de "
    "diferentes celdas."
)
MSG_GRAPHICS = (
    "Elimina símbolos especiales, líneas decorativas y caracteres no estándar. Usa solo texto plano con "
    "viñetas simples (•) para garantizar la compatibilidad con ATS."
)
MSG_DENSITY = (
    "Tu CV tiene demasiada información concentrada. Aumenta el espacio entre secciones, usa márgenes "
    "adecuados y considera eliminar detalles menos relevantes para mejorar la legibilidad."
)
TIP_FONTS = (
    "Usa fuentes estándar como Arial, Calibri, Times New Roman o Helvetica. Las fuentes decorativas o poco "
    "comunes pueden causar problemas con los sistemas ATS."
)
TIP_HEADERS_FOOTERS = (
    "Evita poner información importante en encabezados o pies de página. Muchos sistemas ATS no pueden leer "
    "estas áreas del documento."
)


def is_professional_file_name(file_name: str) -> bool:
    return any(pattern.match(file_name) for pattern in PROFESSIONAL_FILE_NAME_PATTERNS)


def _missing(required: tuple[str, ...], present: list[str]) -> list[str]:
    lowered = {item.lower() for item in present}
    return [item for item in required if item.lower() not in lowered]


def _role_recommendations(
    target_role: str,
    skills: list[str],
    cv_text: str,
    buckets: dict[str, list[str]],
) -> None:
    role = get_role_by_id(target_role)
    if role is None:
        logger.info("recommendations_unknown_role role=%s", target_role)
        return

    missing_essential = _missing(role.essential_skills, skills)
    if missing_essential:
        buckets["skills"].append(
            f"Faltan habilidades esenciales para el rol de {role.title}: {', '.join(missing_essential)}."
        )

    missing_preferred = _missing(role.preferred_skills, skills)
    if missing_preferred:
        buckets["skills"].append(
            f"Considera añadir estas habilidades preferidas para el rol de {role.title}: "
            f"{', '.join(missing_preferred)}."
        )

    lowered_text = cv_text.lower()
    missing_phrases = [phrase for phrase in role.key_phrases if phrase.lower() not in lowered_text]
    found_phrases = len(role.key_phrases) - len(missing_phrases)
    if found_phrases < len(role.key_phrases) / 2:
        sample = missing_phrases[: int(get_scoring_value("recommendations.sample_key_phrases", 3))]
        quoted = '", "'.join(sample)
        buckets["keywords"].append(f'Incluye más frases relacionadas con {role.title}, como: "{quoted}", etc.')


def _format_recommendations(analysis: AnalysisResult, formatting: list[str]) -> None:
    findings = analysis.format
    for issue in findings.format_issues:
        if issue not in formatting:
            formatting.append(issue)

    if not is_professional_file_name(analysis.document_info.file_name):
        formatting.append(MSG_FILE_NAME)

    missing_sections = findings.section_analysis.missing_sections
    for section, message in MISSING_SECTION_MESSAGES:
        if section in missing_sections:
            formatting.append(message)

    if findings.format_score.readability < get_scoring_value("recommendations.readability_floor", 60):
        formatting.append(MSG_READABILITY)
    if findings.format_score.consistency < get_scoring_value("recommendations.consistency_floor", 70):
        formatting.append(MSG_CONSISTENCY)
    if findings.potential_table_count > 0:
        formatting.append(MSG_TABLES)
    if findings.graphic_elements_count > get_scoring_value("format.readability.graphic_threshold", 2):
        formatting.append(MSG_GRAPHICS)
    if findings.text_density > get_scoring_value("format.density.max_chars_per_page", 5000):
        formatting.append(MSG_DENSITY)


def generate_recommendations(
    analysis: AnalysisResult | TextAnalysis,
    target_role: str | None = None,
    cv_text: str = "",
) -> RecommendationSet:
    """Map analysis findings to categorized suggestions.

    ``analysis`` is either the full aggregate or a bare text-analysis result;
    with the latter only the content rules apply, plus the fixed tips.
    ``cv_text`` is the raw document text used for key-phrase lookups.
    """
    buckets: dict[str, list[str]] = {
        "general": [],
        "keywords": [],
        "skills": [],
        "experience": [],
        "formatting": [],
    }
    aggregate = analysis if isinstance(analysis, AnalysisResult) else None
    basic = aggregate.basic if aggregate is not None else analysis

    if basic.word_count < get_scoring_value("recommendations.min_word_count", 300):
        buckets["general"].append(MSG_TOO_SHORT)
    if basic.word_count > get_scoring_value("recommendations.max_word_count", 1000):
        buckets["general"].append(MSG_TOO_LONG)
    if basic.ats_score.total < get_scoring_value("recommendations.low_score", 50):
        buckets["general"].append(MSG_LOW_SCORE)

    keyword_count = aggregate.keywords.keyword_count if aggregate is not None else len(basic.keywords_found)
    if keyword_count < get_scoring_value("recommendations.min_keywords", 10):
        buckets["keywords"].append(MSG_MORE_KEYWORDS)

    if target_role:
        _role_recommendations(target_role, basic.skills, cv_text, buckets)

    if aggregate is not None:
        if not aggregate.experience.has_measurable_results:
            buckets["experience"].append(MSG_MEASURABLE_RESULTS)
        if not aggregate.experience.roles:
            buckets["experience"].append(MSG_NO_ROLES)
        _format_recommendations(aggregate, buckets["formatting"])

    buckets["formatting"].extend((TIP_FONTS, TIP_HEADERS_FOOTERS))

    recommendations = Recommendations(**buckets)
    total = recommendations.total()
    high_priority_above = get_scoring_value("recommendations.high_priority_above", 5)
    return RecommendationSet(
        recommendations=recommendations,
        total_recommendations=total,
        priority="Alta" if total > high_priority_above else "Media",
    )
