"""
pracuj.pl: rich JobPosting JSON-LD plus stable data-test attributes.
"""

from job_scraper.adapters.base import PortalProfile, PortalSelectors
from job_scraper.adapters.pracuj import selectors

PRACUJ_PROFILE = PortalProfile(
    domain="pracuj.pl",
    source_type="pracuj.pl",
    name="Pracuj.pl",
    selectors=PortalSelectors(
        title=selectors.TITLE_SELECTORS,
        company=selectors.COMPANY_SELECTORS,
        description=selectors.DESCRIPTION_SELECTORS,
        location=selectors.LOCATION_SELECTORS,
        skills=selectors.SKILL_SELECTORS,
        salary=selectors.SALARY_SELECTORS,
        logo=selectors.LOGO_SELECTORS,
        workplace=selectors.WORKPLACE_SELECTORS,
        experience=selectors.EXPERIENCE_SELECTORS,
    ),
    workplace_keywords=selectors.WORKPLACE_KEYWORDS,
    experience_keywords=selectors.EXPERIENCE_KEYWORDS,
    salary_contract_type="permanent",
    location_has_street=True,
)
