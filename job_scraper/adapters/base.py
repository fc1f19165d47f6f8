from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

from job_scraper.core.models import ContractType, JobRecord, SourceType
from job_scraper.core.urls import domain_matches, extract_domain

# ((keywords...), canonical value); first entry whose keyword occurs in the text wins
KeywordMap = Tuple[Tuple[Tuple[str, ...], str], ...]


class JobExtractor(ABC):
    """
    Interface shared by every extraction strategy.
    """

    name: str = "extractor"

    @abstractmethod
    def can_handle(self, url: str) -> bool:
        """
        Whether this extractor applies to the URL.
        """
        pass

    @abstractmethod
    async def extract(self, url: str) -> JobRecord:
        """
        Extract a single job posting.
        Args:
            url (str): The job posting URL.
        Returns:
            JobRecord: The canonical record.
        Raises:
            ScraperError: a classified failure; no partial record is returned.
        """
        pass

    @abstractmethod
    async def release(self) -> None:
        """
        Free any resources held by the extractor. Idempotent.
        """
        pass


@dataclass(frozen=True)
class PortalSelectors:
    """
    CSS selectors for one job board, each field tried in order.
    """

    title: Tuple[str, ...] = ()
    company: Tuple[str, ...] = ()
    description: Tuple[str, ...] = ()
    location: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    salary: Tuple[str, ...] = ()
    logo: Tuple[str, ...] = ()
    workplace: Tuple[str, ...] = ()
    experience: Tuple[str, ...] = ()
    # Waited for after navigation; absence is logged, not fatal
    ready: Optional[str] = None


@dataclass(frozen=True)
class PortalProfile:
    """
    Everything that distinguishes one job board from another. The extraction
    algorithm itself is shared (see adapters.portal.PortalExtractor).
    """

    domain: str
    source_type: SourceType
    selectors: PortalSelectors
    workplace_keywords: KeywordMap = ()
    experience_keywords: KeywordMap = ()
    salary_contract_type: ContractType = "permanent"
    # Location text is "city, street" rather than just the city
    location_has_street: bool = False
    name: str = field(default="")

    @property
    def display_name(self) -> str:
        return self.name or self.domain

    def can_handle(self, url: str) -> bool:
        return domain_matches(extract_domain(url), self.domain)
