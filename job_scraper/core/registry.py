"""
Domain -> portal profile routing.
"""

import logging
from typing import Dict, Iterable, List, Optional

from job_scraper.adapters.base import PortalProfile
from job_scraper.adapters.justjoin.profile import JUSTJOIN_PROFILE, ROCKETJOBS_PROFILE
from job_scraper.adapters.portal import PortalExtractor, SessionFactory
from job_scraper.adapters.pracuj.profile import PRACUJ_PROFILE
from job_scraper.config.settings import Settings
from job_scraper.core.urls import domain_matches, extract_domain

logger = logging.getLogger(__name__)


class PortalRegistry:
    """
    Immutable set of known job boards. Built once and handed to the
    orchestrator; there is no global instance and no runtime registration.
    """

    def __init__(self, profiles: Iterable[PortalProfile]):
        self._profiles: Dict[str, PortalProfile] = {}
        for profile in profiles:
            if profile.domain in self._profiles:
                raise ValueError(f"Duplicate portal domain: {profile.domain}")
            self._profiles[profile.domain] = profile

    def resolve(self, url: str) -> Optional[PortalProfile]:
        """Profile whose domain equals the URL's domain or is a parent of it."""
        domain = extract_domain(url)
        if not domain:
            return None
        for registered, profile in self._profiles.items():
            if domain_matches(domain, registered):
                return profile
        return None

    def create_extractor(
        self,
        url: str,
        settings: Optional[Settings] = None,
        session_factory: Optional[SessionFactory] = None,
    ) -> Optional[PortalExtractor]:
        profile = self.resolve(url)
        if profile is None:
            return None
        logger.debug(f"Routing {url} to {profile.display_name} extractor")
        return PortalExtractor(profile, settings, session_factory)

    def has_portal_extractor(self, url: str) -> bool:
        return self.resolve(url) is not None

    def supported_domains(self) -> List[str]:
        return list(self._profiles)

    def __contains__(self, domain: str) -> bool:
        return domain in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def build_default_registry() -> PortalRegistry:
    return PortalRegistry([PRACUJ_PROFILE, JUSTJOIN_PROFILE, ROCKETJOBS_PROFILE])
