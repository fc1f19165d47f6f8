"""
Small helpers shared by every portal: HTML-to-text and selector lookups over
a parsed page. No scraping logic lives here.
"""

import logging
import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCTUATION = re.compile(r" ([.,;:!?])")


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def strip_html(html: str) -> str:
    """
    Plain text from an HTML fragment: scripts and styles dropped, entities
    decoded, whitespace collapsed.
    """
    if not html:
        return ""
    soup = parse_html(html)
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = collapse_whitespace(soup.get_text(" "))
    return _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)


def _select_first(soup: BeautifulSoup, selectors: Sequence[str]) -> Optional[Tag]:
    for selector in selectors:
        try:
            element = soup.select_one(selector)
        except Exception as e:
            logger.debug(f"Selector '{selector}' could not be applied: {e}")
            continue
        if element is not None:
            return element
    return None


def select_text(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    """
    Text of the first element matched by any selector (tried in order), or ''.
    """
    for selector in selectors:
        try:
            element = soup.select_one(selector)
        except Exception as e:
            logger.debug(f"Selector '{selector}' could not be applied: {e}")
            continue
        if element is not None:
            text = collapse_whitespace(element.get_text(" "))
            if text:
                return text
    return ""


def select_all_texts(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    """Texts of every element matched by the first selector that matches anything."""
    for selector in selectors:
        try:
            elements = soup.select(selector)
        except Exception as e:
            logger.debug(f"Selector '{selector}' could not be applied: {e}")
            continue
        texts = [collapse_whitespace(el.get_text(" ")) for el in elements]
        texts = [text for text in texts if text]
        if texts:
            return texts
    return []


def select_html(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    """Inner HTML of the first matching element, or ''."""
    element = _select_first(soup, selectors)
    if element is None:
        return ""
    return element.decode_contents()


def select_attr(soup: BeautifulSoup, selectors: Sequence[str], attr: str) -> Optional[str]:
    element = _select_first(soup, selectors)
    if element is None:
        return None
    value = element.get(attr)
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip() if value else None
