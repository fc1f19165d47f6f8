"""
Cookie-consent overlay dismissal.
"""

import logging

from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Polish and English consent buttons seen on the supported boards, plus OneTrust
CONSENT_SELECTORS = [
    'button:has-text("Akceptuj")',
    'button:has-text("Accept")',
    'button:has-text("Zgadzam się")',
    'button:has-text("Agree")',
    '[data-test="button-acceptAll"]',
    "#onetrust-accept-btn-handler",
    ".cookie-accept",
    ".accept-cookies",
]


async def dismiss_cookie_banners(page: Page) -> bool:
    """
    Click the first visible consent button. Best effort: returns False when
    nothing was dismissed and never raises.
    """
    for selector in CONSENT_SELECTORS:
        try:
            button = page.locator(selector).first
            if await button.is_visible(timeout=1000):
                await button.click(timeout=2000)
                logger.debug(f"Closed cookie banner via '{selector}'")
                await page.wait_for_timeout(500)
                return True
        except Exception as e:
            logger.debug(f"Consent selector '{selector}' not usable: {e}")
            continue
    return False
