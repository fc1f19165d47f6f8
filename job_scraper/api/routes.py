"""
HTTP routes for job extraction.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import Field

from job_scraper.core.errors import (
    NetworkError,
    RenderError,
    SchemaValidationError,
    ScrapeTimeoutError,
    ScraperError,
    UnsupportedDomainError,
    UpstreamServiceError,
)
from job_scraper.core.models import CamelModel, ExtractionMode, ScrapeOptions
from job_scraper.core.service import ScraperService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/job-scraper", tags=["job_scraper"])

ERROR_STATUS = {
    UnsupportedDomainError: 422,
    SchemaValidationError: 502,
    UpstreamServiceError: 502,
    NetworkError: 502,
    RenderError: 502,
    ScrapeTimeoutError: 504,
}


class ScrapeRequest(CamelModel):
    url: str = Field(min_length=1)
    skip_cache: bool = False
    method: ExtractionMode = ExtractionMode.AUTO
    ai_model: Optional[str] = None

    def to_options(self) -> ScrapeOptions:
        return ScrapeOptions(
            skip_cache=self.skip_cache, mode=self.method, ai_model=self.ai_model
        )


def get_service(request: Request) -> ScraperService:
    return request.app.state.scraper_service


def status_for(error: ScraperError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


@router.post("/scrape")
async def scrape_job(
    request: ScrapeRequest, service: ScraperService = Depends(get_service)
) -> Dict[str, Any]:
    """Extract one job posting; the record is returned with camelCase keys."""
    try:
        record = await service.scrape(request.url, request.to_options())
    except ScraperError as e:
        status = status_for(e)
        logger.error(f"Scrape failed for {request.url} [{status}]: {e.message}")
        raise HTTPException(status_code=status, detail=e.to_dict()) from e
    return record.to_wire()


@router.get("/can-scrape")
async def can_scrape(
    url: str = Query(..., min_length=1),
    service: ScraperService = Depends(get_service),
) -> Dict[str, Any]:
    return service.can_scrape_report(url)


@router.get("/supported-domains")
async def supported_domains(service: ScraperService = Depends(get_service)):
    return {"domains": service.supported_domains()}


@router.get("/cache/stats")
async def cache_stats(service: ScraperService = Depends(get_service)):
    return service.cache_stats().model_dump()


@router.post("/cache/clear")
async def clear_cache(service: ScraperService = Depends(get_service)):
    service.clear_cache()
    return {"success": True}
