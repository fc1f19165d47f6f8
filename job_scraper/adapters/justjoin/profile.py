"""
Profiles for the Just Join IT platform. justjoin.it and rocketjobs.pl run
on the same site builder, so both are built from one selector table and
differ only in domain and source tag.
"""

from job_scraper.adapters.base import PortalProfile, PortalSelectors
from job_scraper.adapters.justjoin import selectors
from job_scraper.core.models import SourceType

JUSTJOIN_SELECTORS = PortalSelectors(
    title=selectors.TITLE_SELECTORS,
    company=selectors.COMPANY_SELECTORS,
    description=selectors.DESCRIPTION_SELECTORS,
    location=selectors.LOCATION_SELECTORS,
    skills=selectors.SKILL_SELECTORS,
    salary=selectors.SALARY_SELECTORS,
    logo=selectors.LOGO_SELECTORS,
    workplace=selectors.WORKPLACE_SELECTORS,
    experience=selectors.EXPERIENCE_SELECTORS,
    ready=selectors.TITLE_SELECTOR,
)


def justjoin_platform_profile(domain: str, source_type: SourceType, name: str) -> PortalProfile:
    return PortalProfile(
        domain=domain,
        source_type=source_type,
        name=name,
        selectors=JUSTJOIN_SELECTORS,
        workplace_keywords=selectors.WORKPLACE_KEYWORDS,
        experience_keywords=selectors.EXPERIENCE_KEYWORDS,
        salary_contract_type="b2b",
    )


JUSTJOIN_PROFILE = justjoin_platform_profile("justjoin.it", "justjoin.it", "JustJoinIT")

ROCKETJOBS_PROFILE = justjoin_platform_profile("rocketjobs.pl", "rocketjobs.pl", "RocketJobs")
