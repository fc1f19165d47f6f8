import logging
from typing import Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from job_scraper.config.settings import Settings, settings as default_settings
from job_scraper.browser.user_agent import UserAgentProvider
from job_scraper.browser.launch import create_browser
from job_scraper.browser.context import create_context

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    One rendering session: Playwright, a browser and a context owned by a
    single extraction. Use as an async context manager; close() is idempotent.
    """

    def __init__(self, config: Optional[Settings] = None, domain: str = ""):
        self.config = config or default_settings
        self.domain = domain
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    @property
    def is_open(self) -> bool:
        return self._playwright is not None

    async def initialize(self):
        """
        Starts Playwright, the browser and the context if not already running.
        """
        if self._playwright is None:
            self._playwright = await async_playwright().start()
            logger.debug("Playwright started.")

        if self._browser is None:
            self._browser = await create_browser(self._playwright, self.config)

        if self._context is None:
            user_agent = UserAgentProvider.get(self.config.USER_AGENT)
            logger.debug(f"Using User Agent: {user_agent}")
            self._context = await create_context(
                self._browser, self.config, user_agent, self.domain
            )

    async def new_page(self) -> Page:
        """
        Creates a new page with the navigation timeout as its default timeout.
        """
        await self.initialize()
        page = await self._context.new_page()
        page.set_default_timeout(self.config.NAVIGATION_TIMEOUT)
        return page

    async def close(self):
        """
        Closes the context and browser and stops Playwright. Safe to call twice.
        Teardown errors are logged, never raised, so they cannot mask the
        extraction outcome.
        """
        if self._context:
            try:
                await self._context.close()
            except Exception as e:
                logger.warning(f"Error closing browser context: {e}")
            self._context = None

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
            self._playwright = None
            logger.debug("Rendering session released.")

    async def __aenter__(self) -> "BrowserSession":
        try:
            await self.initialize()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
