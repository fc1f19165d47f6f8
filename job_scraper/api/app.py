import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from job_scraper.api.routes import router
from job_scraper.config.settings import settings
from job_scraper.core.service import ScraperService

logger = logging.getLogger(__name__)


def create_app(service: Optional[ScraperService] = None) -> FastAPI:
    """
    Build the HTTP app around one ScraperService (a default one when not given).
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.scraper_service.aclose()
        logger.info("Scraper service closed.")

    app = FastAPI(title="Job Scraper", lifespan=lifespan)
    app.state.scraper_service = service or ScraperService()
    app.include_router(router)
    return app
