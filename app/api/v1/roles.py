import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.catalog import get_job_role_catalog
from app.schemas.api import ErrorResponse, RoleSummary

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/roles", response_model=list[RoleSummary], summary="List target job roles")
async def list_roles():
    try:
        catalog = get_job_role_catalog()
        return [RoleSummary(id=role_id, title=catalog.get(role_id).title) for role_id in catalog.role_ids()]
    except Exception as exc:
        logger.exception("roles_listing_failed error=%s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Error al obtener roles disponibles").model_dump(exclude_none=True),
        )
