"""
DOM heuristics over a rendered job page, driven by a portal's selector table.

Two entry points:
- enrich_from_dom fills fields the structured data left empty;
- record_from_dom builds a whole record when the page has no JobPosting JSON-LD.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from job_scraper.adapters.base import KeywordMap, PortalProfile
from job_scraper.adapters.extraction.salary import parse_salary_range
from job_scraper.adapters.utils import (
    select_all_texts,
    select_attr,
    select_html,
    select_text,
    strip_html,
)
from job_scraper.core.models import JobRecord, Location

logger = logging.getLogger(__name__)


def match_keywords(text: str, keywords: KeywordMap) -> Optional[str]:
    """Canonical value of the first keyword group found in *text* (case-insensitive)."""
    if not text:
        return None
    lowered = text.lower()
    for words, value in keywords:
        if any(word in lowered for word in words):
            return value
    return None


def parse_location(text: str, has_street: bool) -> Location:
    parts = [part.strip() for part in text.split(",")] if text else []
    city = parts[0] if parts else ""
    street = parts[1] if has_street and len(parts) > 1 and parts[1] else None
    return Location(city=city, street=street)


def enrich_from_dom(
    record: JobRecord, soup: BeautifulSoup, profile: PortalProfile
) -> List[str]:
    """
    Fill still-empty skills, salary, workplace type and experience level from
    the page. Populated fields are never overwritten. Returns the names of the
    fields that were filled.
    """
    selectors = profile.selectors
    filled: List[str] = []

    if not record.required_skills:
        skills = select_all_texts(soup, selectors.skills)
        if skills:
            record.required_skills = list(dict.fromkeys(skills))
            filled.append("required_skills")

    if not record.salary:
        salary = parse_salary_range(
            select_text(soup, selectors.salary), profile.salary_contract_type
        )
        if salary:
            record.salary = salary
            filled.append("salary")

    if not record.workplace_type:
        workplace = match_keywords(
            select_text(soup, selectors.workplace), profile.workplace_keywords
        )
        if workplace:
            record.workplace_type = workplace
            if workplace == "remote":
                record.location.remote = True
            elif workplace == "hybrid":
                record.location.hybrid = True
            filled.append("workplace_type")

    if not record.experience_level:
        experience = match_keywords(
            select_text(soup, selectors.experience), profile.experience_keywords
        )
        if experience:
            record.experience_level = experience
            filled.append("experience_level")

    logger.debug(
        f"Enriched {profile.display_name} record from page: "
        f"{', '.join(filled) if filled else 'nothing to add'}"
    )
    return filled


def record_from_dom(
    soup: BeautifulSoup, profile: PortalProfile, source_url: str
) -> JobRecord:
    """
    Build a record purely from the portal's DOM selectors. Missing title or
    company become placeholders.
    """
    selectors = profile.selectors

    title = select_text(soup, selectors.title)
    company = select_text(soup, selectors.company)
    if not title:
        logger.warning(f"All selectors failed for title on {source_url}")
    if not company:
        logger.warning(f"All selectors failed for company on {source_url}")

    return JobRecord(
        title=title,
        company_name=company,
        description=strip_html(select_html(soup, selectors.description)),
        location=parse_location(
            select_text(soup, selectors.location), profile.location_has_street
        ),
        required_skills=select_all_texts(soup, selectors.skills),
        nice_to_have_skills=[],
        company_logo_url=select_attr(soup, selectors.logo, "src"),
        source_url=source_url,
        source_type=profile.source_type,
    )
