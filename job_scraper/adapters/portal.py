"""
PortalExtractor - the one extraction algorithm shared by every job board.

A board is described by a PortalProfile (selectors, keyword tables, source tag);
this module renders the page and turns it into a JobRecord:
- JobPosting JSON-LD first, DOM selectors as fallback;
- DOM enrichment for fields the structured data left empty.
"""

import logging
import time
from typing import Callable, Optional

from playwright.async_api import Error as PlaywrightError, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from pydantic import ValidationError

from job_scraper.adapters.base import JobExtractor, PortalProfile
from job_scraper.adapters.extraction.dom import enrich_from_dom, record_from_dom
from job_scraper.adapters.extraction.json_ld import (
    extract_json_ld,
    fragment_to_record,
    parse_json_ld,
)
from job_scraper.adapters.utils import parse_html
from job_scraper.browser.consent import dismiss_cookie_banners
from job_scraper.browser.manager import BrowserSession
from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.core.errors import (
    NetworkError,
    RenderError,
    ScrapeTimeoutError,
    ScraperError,
)
from job_scraper.core.models import JobRecord
from job_scraper.core.rate_limit import page_limiter
from job_scraper.core.urls import normalize_url

logger = logging.getLogger(__name__)

SessionFactory = Callable[[Settings, str], BrowserSession]


def classify_browser_error(
    error: Exception, strategy: str, url: str
) -> ScraperError:
    """Map a Playwright failure onto the scraper error taxonomy."""
    if isinstance(error, PlaywrightTimeoutError):
        return ScrapeTimeoutError(
            f"Timed out rendering {url}: {error}", strategy=strategy, url=url
        )
    if isinstance(error, PlaywrightError) and "net::" in str(error):
        return NetworkError(
            f"Could not reach {url}: {error}", strategy=strategy, url=url
        )
    return RenderError(f"Failed to render {url}: {error}", strategy=strategy, url=url)


class PortalExtractor(JobExtractor):
    """
    Renders a job page with Playwright and extracts it using the board's profile.
    Each extract() call opens its own rendering session and always releases it.
    """

    def __init__(
        self,
        profile: PortalProfile,
        settings: Optional[Settings] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        self.profile = profile
        self.settings = settings or default_settings
        self.session_factory = session_factory or BrowserSession
        self.name = profile.domain
        self._session: Optional[BrowserSession] = None

    def can_handle(self, url: str) -> bool:
        return self.profile.can_handle(url)

    async def extract(self, url: str) -> JobRecord:
        url = normalize_url(url)
        started = time.monotonic()
        logger.info(f"[{self.profile.display_name}] Extracting {url}")

        async with page_limiter:
            try:
                self._session = self.session_factory(self.settings, self.profile.domain)
                page = await self._session.new_page()
                await self._load(page, url)
                html = await page.content()
                record = self.parse_page(html, url)
            except ScraperError:
                raise
            except Exception as e:
                error = classify_browser_error(e, self.name, url)
                logger.error(f"[{self.profile.display_name}] {error.message}")
                raise error from e
            finally:
                await self.release()

        logger.info(
            f"[{self.profile.display_name}] Extracted '{record.title}' at "
            f"{record.company_name} in {time.monotonic() - started:.2f}s"
        )
        return record

    async def release(self) -> None:
        session, self._session = self._session, None
        if session is not None:
            await session.close()

    async def _load(self, page: Page, url: str):
        """
        Navigate and wait until the offer is on screen. The readiness selector
        and cookie banners are best effort.
        """
        wait_until = (
            "networkidle" if self.settings.WAIT_FOR_NETWORK_IDLE else "domcontentloaded"
        )
        await page.goto(
            url, wait_until=wait_until, timeout=self.settings.NAVIGATION_TIMEOUT
        )
        await page.wait_for_load_state("domcontentloaded")

        ready = self.profile.selectors.ready
        if ready:
            try:
                await page.wait_for_selector(
                    ready, timeout=self.settings.SELECTOR_TIMEOUT
                )
            except PlaywrightError as e:
                logger.warning(
                    f"[{self.profile.display_name}] '{ready}' did not appear on {url}: {e}"
                )

        await dismiss_cookie_banners(page)

    def parse_page(self, html: str, url: str) -> JobRecord:
        """
        Turn rendered HTML into a record: structured data when the page has a
        JobPosting, DOM selectors otherwise, then DOM enrichment either way.
        """
        soup = parse_html(html)
        json_ld = extract_json_ld(soup)

        record = None
        if json_ld:
            logger.debug(f"[{self.profile.display_name}] Using JobPosting JSON-LD")
            try:
                record = fragment_to_record(
                    parse_json_ld(json_ld), url, self.profile.source_type
                )
            except ValidationError as e:
                logger.warning(
                    f"[{self.profile.display_name}] JSON-LD on {url} does not fit a record, "
                    f"falling back to DOM selectors: {e.error_count()} errors"
                )
        else:
            logger.info(
                f"[{self.profile.display_name}] No JSON-LD found, falling back to DOM selectors"
            )

        if record is None:
            record = record_from_dom(soup, self.profile, url)

        enrich_from_dom(record, soup, self.profile)
        return record
