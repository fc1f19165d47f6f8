"""
Browser context factory: user agent, locale, proxy and injected cookies.
"""

import logging
from typing import Dict, List, Optional

from playwright.async_api import Browser, BrowserContext

from job_scraper.config.settings import Settings

logger = logging.getLogger(__name__)


def get_proxy_config(config: Settings) -> Optional[Dict[str, str]]:
    """
    Playwright proxy dict from PROXY_* settings, or None when no proxy is set.
    """
    if not config.PROXY_SERVER:
        return None

    proxy = {"server": config.PROXY_SERVER}
    if config.PROXY_USERNAME:
        proxy["username"] = config.PROXY_USERNAME
    if config.PROXY_PASSWORD:
        proxy["password"] = config.PROXY_PASSWORD
    logger.info(f"Using proxy: {config.PROXY_SERVER}")
    return proxy


def cookies_for_domain(cookies: List[Dict[str, str]], domain: str) -> List[Dict[str, str]]:
    """
    Keep the configured cookies that apply to *domain* and give each one a path,
    which Playwright requires alongside an explicit domain.
    """
    selected = []
    for cookie in cookies:
        cookie_domain = cookie.get("domain", "").lstrip(".")
        if not cookie_domain:
            continue
        if domain and not (
            domain == cookie_domain or domain.endswith(f".{cookie_domain}")
        ):
            continue
        selected.append({"path": "/", **cookie})
    return selected


async def create_context(
    browser: Browser,
    config: Settings,
    user_agent: str,
    domain: str = "",
) -> BrowserContext:
    """
    Create a browser context for one extraction.

    Args:
        browser: Browser instance
        config: Settings to read proxy, HTTPS and cookie options from
        user_agent: User agent for every request in the context
        domain: Domain being extracted; only cookies for it are injected

    Returns:
        BrowserContext instance
    """
    context = await browser.new_context(
        user_agent=user_agent,
        viewport={"width": 1920, "height": 1080},
        locale="en-US",
        proxy=get_proxy_config(config),
        ignore_https_errors=config.IGNORE_HTTPS_ERRORS,
    )

    cookies = cookies_for_domain(config.COOKIES, domain)
    if cookies:
        await context.add_cookies(cookies)
        logger.debug(f"Injected {len(cookies)} cookies for {domain or 'all domains'}")

    return context
