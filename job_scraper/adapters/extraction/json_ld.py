"""
JSON-LD extraction: locate a schema.org JobPosting in the rendered page and
project it onto the canonical record.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from job_scraper.adapters.extraction.salary import salary_from_json_ld
from job_scraper.adapters.utils import strip_html
from job_scraper.core.models import JobRecord, ListingFragment, Location, SourceType

logger = logging.getLogger(__name__)

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


def _is_job_posting(item: Any) -> bool:
    if not isinstance(item, dict):
        return False
    item_type = item.get("@type", "")
    if isinstance(item_type, list):
        return "JobPosting" in item_type
    return item_type == "JobPosting"


def _candidates(data: Any) -> Iterable[Dict[str, Any]]:
    """Top-level object, array members and @graph members, in that order."""
    if isinstance(data, dict):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            yield from (item for item in graph if isinstance(item, dict))
    elif isinstance(data, list):
        for item in data:
            yield from _candidates(item)


def extract_json_ld(soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
    """
    Return the first JobPosting found in any ld+json script, or None.
    Unparseable blocks are skipped.
    """
    for script in soup.select(JSON_LD_SELECTOR):
        content = script.string or script.get_text()
        if not content or not content.strip():
            continue
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping invalid JSON-LD block: {e}")
            continue

        for item in _candidates(data):
            if _is_job_posting(item):
                return item
    return None


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _text(value: Any) -> Optional[str]:
    """A string scalar, or the first string of a list. Anything else is dropped."""
    for entry in _as_list(value):
        if isinstance(entry, str):
            return entry.strip() or None
    return None


def _first_address(job_location: Any) -> Optional[Dict[str, Any]]:
    for place in _as_list(job_location):
        if isinstance(place, dict) and isinstance(place.get("address"), dict):
            return place["address"]
    return None


def _company_logo(org: Dict[str, Any]) -> Optional[str]:
    logo = org.get("logo")
    if isinstance(logo, dict):
        return _text(logo.get("url"))
    return _text(logo)


def _skills(value: Any) -> List[str]:
    skills: List[str] = []
    for entry in _as_list(value):
        if isinstance(entry, str):
            skills.extend(part.strip() for part in entry.split(","))
        elif isinstance(entry, dict) and entry.get("name"):
            skills.append(str(entry["name"]))
    return [skill for skill in skills if skill]


def map_employment_type(value: Any) -> Optional[str]:
    """
    schema.org employmentType (FULL_TIME, PART_TIME, INTERN, CONTRACTOR, ...)
    to the canonical working time. The last recognised entry wins.
    """
    working_time = None
    for entry in _as_list(value):
        if not isinstance(entry, str):
            continue
        normalized = entry.lower()
        if "part" in normalized:
            working_time = "part_time"
        elif "intern" in normalized:
            working_time = "internship"
        elif "freelance" in normalized or "contract" in normalized:
            working_time = "freelance"
        elif "full" in normalized or "time" in normalized:
            working_time = "full_time"
    return working_time


def parse_json_ld(json_ld: Dict[str, Any]) -> ListingFragment:
    """
    Map a JobPosting object field by field into a ListingFragment.
    """
    fragment = ListingFragment(raw=json_ld)

    fragment.title = _text(json_ld.get("title"))

    description = _text(json_ld.get("description"))
    if description:
        fragment.description = strip_html(description)

    org = json_ld.get("hiringOrganization")
    if isinstance(org, dict):
        fragment.company_name = _text(org.get("name")) or _text(org.get("legalName"))
        fragment.company_logo_url = _company_logo(org)
    else:
        fragment.company_name = _text(org)

    address = _first_address(json_ld.get("jobLocation"))
    if address:
        fragment.city = _text(address.get("addressLocality")) or ""
        fragment.street = _text(address.get("streetAddress"))

    if str(json_ld.get("jobLocationType", "")).upper() == "TELECOMMUTE":
        fragment.remote = True

    fragment.published_at = _text(json_ld.get("datePosted"))

    fragment.skills = _skills(json_ld.get("skills"))
    fragment.working_time = map_employment_type(json_ld.get("employmentType"))
    fragment.salary = salary_from_json_ld(json_ld)

    return fragment


def fragment_to_record(
    fragment: ListingFragment, source_url: str, source_type: SourceType
) -> JobRecord:
    """
    Project a fragment onto the canonical record. Missing title and company
    become placeholders; other gaps stay empty for enrichment.
    """
    location = Location(city=fragment.city or "", street=fragment.street)
    if fragment.remote:
        location.remote = True

    return JobRecord(
        title=fragment.title,
        company_name=fragment.company_name,
        description=fragment.description or "",
        location=location,
        required_skills=fragment.skills,
        nice_to_have_skills=[],
        workplace_type="remote" if fragment.remote else None,
        working_time=fragment.working_time,
        salary=fragment.salary,
        company_logo_url=fragment.company_logo_url,
        source_url=source_url,
        source_type=source_type,
        published_at=fragment.published_at,
        raw_data=fragment.raw,
    )
