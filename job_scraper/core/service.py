"""
ScraperService - the single entry point for job extraction.

Routes a URL to a strategy by mode, falls back in auto mode (AI first, then
the portal extractor) and caches successful results by normalized URL.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from job_scraper.adapters.base import JobExtractor
from job_scraper.ai.extractor import AiUniversalExtractor
from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.core.cache import ResultCache
from job_scraper.core.errors import ScraperError, UnsupportedDomainError
from job_scraper.core.models import CacheStats, ExtractionMode, JobRecord, ScrapeOptions
from job_scraper.core.registry import PortalRegistry, build_default_registry
from job_scraper.core.urls import extract_domain, normalize_url

logger = logging.getLogger(__name__)

PortalFactory = Callable[[str], Optional[JobExtractor]]


class ScraperService:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[PortalRegistry] = None,
        cache: Optional[ResultCache] = None,
        ai_extractor: Optional[AiUniversalExtractor] = None,
        portal_factory: Optional[PortalFactory] = None,
    ):
        self.settings = settings or default_settings
        self.registry = registry if registry is not None else build_default_registry()
        self.cache = cache if cache is not None else ResultCache(self.settings.CACHE_TTL_SECONDS)
        self.ai_extractor = ai_extractor or AiUniversalExtractor(self.settings)
        self.portal_factory = portal_factory or (
            lambda url: self.registry.create_extractor(url, self.settings)
        )

    async def scrape(self, url: str, options: Optional[ScrapeOptions] = None) -> JobRecord:
        """
        Extract a job posting.

        Modes:
        - ai: AI extractor only;
        - portal-specific: the registered portal extractor only, UnsupportedDomainError otherwise;
        - auto: AI first, the portal extractor when AI fails and the domain is registered.

        Raises the error of the last strategy attempted.
        """
        options = options or ScrapeOptions()
        key = normalize_url(url)

        if not options.skip_cache:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info(f"Cache hit for {key}")
                return cached

        if options.mode == ExtractionMode.AI:
            record = await self._run_ai(key, options.ai_model)
        elif options.mode == ExtractionMode.PORTAL_SPECIFIC:
            if not self.registry.has_portal_extractor(key):
                raise UnsupportedDomainError(
                    f"No portal-specific extractor for {extract_domain(key) or key}. "
                    f"Supported domains: {', '.join(self.registry.supported_domains())}",
                    strategy=ExtractionMode.PORTAL_SPECIFIC.value,
                    url=key,
                )
            record = await self._run_portal(key)
        else:
            record = await self._run_auto(key, options.ai_model)

        self.cache.set(key, record)
        return record

    async def _run_auto(self, url: str, model: Optional[str]) -> JobRecord:
        try:
            return await self._run_ai(url, model)
        except Exception as e:
            if not self.registry.has_portal_extractor(url):
                raise
            reason = e.message if isinstance(e, ScraperError) else str(e)
            logger.warning(
                f"AI extraction failed for {url} ({type(e).__name__}: {reason}), "
                f"falling back to portal-specific extractor"
            )
        return await self._run_portal(url)

    async def _run_ai(self, url: str, model: Optional[str]) -> JobRecord:
        started = time.monotonic()
        try:
            record = await self.ai_extractor.extract(url, model)
        except Exception:
            logger.error(f"Strategy 'ai' failed after {time.monotonic() - started:.2f}s")
            raise
        logger.info(f"Strategy 'ai' succeeded in {time.monotonic() - started:.2f}s")
        return record

    async def _run_portal(self, url: str) -> JobRecord:
        extractor = self.portal_factory(url)
        if extractor is None:
            raise UnsupportedDomainError(
                f"No portal-specific extractor for {url}",
                strategy=ExtractionMode.PORTAL_SPECIFIC.value,
                url=url,
            )

        started = time.monotonic()
        try:
            record = await extractor.extract(url)
        except ScraperError:
            logger.error(
                f"Strategy '{extractor.name}' failed after {time.monotonic() - started:.2f}s"
            )
            raise
        finally:
            await extractor.release()

        logger.info(
            f"Strategy '{extractor.name}' succeeded in {time.monotonic() - started:.2f}s"
        )
        return record

    def can_scrape(self, url: str) -> bool:
        # The AI extractor accepts any URL
        return True

    def has_portal_extractor(self, url: str) -> bool:
        return self.registry.has_portal_extractor(url)

    def supported_domains(self) -> List[str]:
        return self.registry.supported_domains()

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def can_scrape_report(self, url: str) -> Dict[str, Any]:
        has_portal = self.has_portal_extractor(url)
        return {
            "canScrape": self.can_scrape(url),
            "hasPortalSpecific": has_portal,
            "supportedDomains": self.supported_domains(),
            "aiAvailable": self.ai_extractor.available,
            "recommendedMethod": (
                ExtractionMode.AUTO.value if has_portal else ExtractionMode.AI.value
            ),
        }

    async def aclose(self):
        await self.ai_extractor.aclose()
