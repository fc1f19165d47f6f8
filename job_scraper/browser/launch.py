import logging
from playwright.async_api import Browser, Playwright

from job_scraper.config.settings import Settings

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
    "--no-sandbox",
    "--no-first-run",
    "--disable-gpu",
    "--mute-audio",
]


async def create_browser(playwright: Playwright, config: Settings) -> Browser:
    """
    Launch the configured browser engine.
    """
    browser_type = getattr(playwright, config.BROWSER_TYPE, None)
    if browser_type is None:
        raise ValueError(
            f"Unknown BROWSER_TYPE '{config.BROWSER_TYPE}' "
            "(expected chromium, firefox or webkit)"
        )

    kwargs = {"headless": config.HEADLESS}
    # Chromium-only switches
    if config.BROWSER_TYPE == "chromium":
        kwargs["args"] = LAUNCH_ARGS

    browser = await browser_type.launch(**kwargs)
    logger.info(
        f"Browser launched ({config.BROWSER_TYPE}, Headless: {config.HEADLESS})."
    )
    return browser
