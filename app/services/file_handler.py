from __future__ import annotations

import json
import logging
import os
import secrets
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.core.config import settings
from app.core.errors import DocumentNotFoundError
from app.parsing.parse import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

RESUME_NAME_HINTS = ("cv", "resume", "curriculum")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_directories(*directories: str | Path) -> None:
    targets = directories or (settings.samples_dir, settings.output_dir, settings.uploads_dir)
    for directory in targets:
        os.makedirs(directory, exist_ok=True)


def locate_resume_file(samples_dir: str | Path, preferred_name: str = "cv.pdf") -> Path:
    """Resolve the résumé to analyze inside ``samples_dir``.

    The preferred file wins when it exists. Otherwise exactly one supported
    file whose name mentions cv, resume or curriculum must be present.
    """
    directory = Path(samples_dir)
    preferred = directory / preferred_name
    if preferred.is_file():
        return preferred

    if not directory.is_dir():
        raise DocumentNotFoundError(f"El directorio de muestras no existe: {directory}")

    candidates = sorted(
        path
        for path in directory.iterdir()
        if path.is_file()
        and path.suffix.lower() in SUPPORTED_EXTENSIONS
        and any(hint in path.name.lower() for hint in RESUME_NAME_HINTS)
    )
    if not candidates:
        raise DocumentNotFoundError(
            f"No se encontró ningún CV en {directory}. Coloca un archivo PDF o DOCX llamado '{preferred_name}'."
        )
    if len(candidates) > 1:
        names = ", ".join(path.name for path in candidates)
        raise DocumentNotFoundError(
            f"Se encontraron varios CVs en {directory} ({names}). Indica cuál analizar con --file."
        )

    logger.info("resume_file_fallback preferred=%s found=%s", preferred_name, candidates[0].name)
    return candidates[0]


def analysis_file_name(moment: datetime | None = None) -> str:
    stamp = (moment or _utc_now()).isoformat().replace(":", "-").replace(".", "-")
    return f"analisis-{stamp}.json"


def save_analysis_json(payload: dict[str, Any], output_dir: str | Path | None = None) -> Path:
    directory = Path(output_dir or settings.output_dir)
    ensure_directories(directory)
    target = directory / analysis_file_name()
    with target.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)
    logger.info("analysis_saved path=%s", target)
    return target


def upload_path(file_name: str, uploads_dir: str | Path | None = None) -> Path:
    """Unique path inside the uploads directory, keeping the original suffix."""
    directory = Path(uploads_dir or settings.uploads_dir)
    ensure_directories(directory)
    suffix = Path(file_name).suffix.lower()
    return directory / f"{int(_utc_now().timestamp() * 1000)}-{secrets.token_hex(4)}{suffix}"
