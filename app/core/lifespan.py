from contextlib import asynccontextmanager
import logging

from app.catalog import get_job_role_catalog
from app.core.config.scoring import get_scoring_config
from app.services.file_handler import ensure_directories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    ensure_directories()
    catalog = get_job_role_catalog()
    get_scoring_config()
    logger.info("startup_ready roles=%s", len(catalog.role_ids()))
    yield
