import asyncio
import logging
import os

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import AnalysisError
from app.core.rate_limit import analyze_rate_limit
from app.parsing.parse import SUPPORTED_EXTENSIONS, ensure_supported
from app.schemas.api import AnalyzeResponse, ErrorResponse
from app.services.analysis_service import analyze_upload
from app.services.file_handler import upload_path

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_CHUNK_BYTES = 64 * 1024
MSG_NO_FILE = "No se ha subido ningún archivo"
MSG_UNSUPPORTED = "Formato de archivo no soportado. Por favor, suba un archivo PDF o DOCX."
MSG_PROCESSING_FAILED = "Error procesando el CV"


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=payload)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Analyze a résumé",
    description=f"Upload a résumé ({', '.join(SUPPORTED_EXTENSIONS)}) and score it against a target job role.",
)
@analyze_rate_limit
async def analyze_resume(
    request: Request,
    cv: UploadFile | None = File(None),
    role: str | None = Form(None),
):
    if cv is None or not cv.filename:
        return _error(status.HTTP_400_BAD_REQUEST, MSG_NO_FILE)

    file_name = os.path.basename(cv.filename)
    try:
        ensure_supported(file_name)
    except AnalysisError:
        return _error(status.HTTP_400_BAD_REQUEST, MSG_UNSUPPORTED)

    max_bytes = settings.max_upload_mb * 1024 * 1024
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await cv.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            return _error(
                status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                f"Archivo demasiado grande. El tamaño máximo permitido es {settings.max_upload_mb} MB.",
            )
        chunks.append(chunk)

    target_role = (role or "").strip() or settings.default_target_role
    destination = upload_path(file_name)
    logger.info("analyze_upload_received file=%s bytes=%s role=%s", file_name, total, target_role)
    try:
        destination.write_bytes(b"".join(chunks))
        report = await asyncio.to_thread(analyze_upload, destination, file_name, target_role)
    except AnalysisError as exc:
        if exc.status_code == status.HTTP_400_BAD_REQUEST:
            return _error(status.HTTP_400_BAD_REQUEST, str(exc))
        logger.warning("analyze_failed file=%s error=%s", file_name, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_PROCESSING_FAILED, str(exc))
    except Exception as exc:
        logger.exception("analyze_failed file=%s error=%s", file_name, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_PROCESSING_FAILED, str(exc))
    finally:
        destination.unlink(missing_ok=True)

    return AnalyzeResponse(analysis=report)
