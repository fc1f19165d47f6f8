from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

PLACEHOLDER_TITLE = "Unknown Position"
PLACEHOLDER_COMPANY = "Unknown Company"

WorkplaceType = Literal["hybrid", "remote", "on-site", "office", "mobile"]
WorkingTime = Literal["full_time", "part_time", "freelance", "internship"]
ExperienceLevel = Literal["junior", "mid", "senior", "c_level"]
ContractType = Literal[
    "permanent",
    "b2b",
    "mandate_contract",
    "any",
    "freelance",
    "internship",
    "contract",
]
SourceType = Literal[
    "pracuj.pl",
    "justjoin.it",
    "rocketjobs.pl",
    "linkedin",
    "nofluffjobs",
    "other",
]


class ExtractionMode(str, Enum):
    AI = "ai"
    PORTAL_SPECIFIC = "portal-specific"
    AUTO = "auto"


class CamelModel(BaseModel):
    """Base for models exchanged with callers: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def clean_string_list(values: Optional[List[Any]]) -> List[str]:
    """Strip, drop blanks and duplicates, keep first-seen order."""
    seen = set()
    cleaned: List[str] = []
    for value in values or []:
        if value is None:
            continue
        text = str(value).strip()
        if text and text not in seen:
            seen.add(text)
            cleaned.append(text)
    return cleaned


class Location(CamelModel):
    city: str = ""
    street: Optional[str] = None
    remote: Optional[bool] = None
    hybrid: Optional[bool] = None


class Salary(CamelModel):
    from_: Optional[float] = Field(default=None, alias="from")
    to: Optional[float] = None
    currency: str
    type: ContractType
    gross: Optional[bool] = None

    @model_validator(mode="after")
    def check_range(self) -> "Salary":
        if self.from_ is not None and self.to is not None and self.from_ > self.to:
            raise ValueError(
                f"salary lower bound {self.from_} exceeds upper bound {self.to}"
            )
        return self


class JobRecord(CamelModel):
    """
    Canonical job posting record. Every extraction strategy produces one of these.
    """

    title: str = PLACEHOLDER_TITLE
    company_name: str = PLACEHOLDER_COMPANY
    description: str = ""
    location: Location = Field(default_factory=Location)

    required_skills: List[str] = Field(default_factory=list)
    nice_to_have_skills: List[str] = Field(default_factory=list)

    workplace_type: Optional[WorkplaceType] = None
    working_time: Optional[WorkingTime] = None
    experience_level: Optional[ExperienceLevel] = None

    salary: Optional[List[Salary]] = None
    languages: Optional[List[str]] = None
    company_logo_url: Optional[str] = None

    source_url: str
    source_type: SourceType = "other"
    published_at: Optional[str] = None

    # Kept for traceability only; nothing downstream reads it
    raw_data: Optional[Dict[str, Any]] = None

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return PLACEHOLDER_TITLE
        return str(value).strip()

    @field_validator("company_name", mode="before")
    @classmethod
    def default_company(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return PLACEHOLDER_COMPANY
        return str(value).strip()

    @field_validator("required_skills", "nice_to_have_skills", mode="before")
    @classmethod
    def clean_skills(cls, value: Any) -> List[str]:
        return clean_string_list(value)

    @property
    def has_placeholders(self) -> bool:
        return self.title == PLACEHOLDER_TITLE or self.company_name == PLACEHOLDER_COMPANY

    def to_wire(self) -> Dict[str, Any]:
        """camelCase dict for the RPC surface and the CLI."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ListingFragment(BaseModel):
    """
    Loosely typed job data pulled out of a page's JobPosting JSON-LD block.
    Every field is optional; gaps are left for DOM enrichment.
    """

    title: Optional[str] = None
    company_name: Optional[str] = None
    company_logo_url: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    remote: Optional[bool] = None
    skills: List[str] = Field(default_factory=list)
    working_time: Optional[WorkingTime] = None
    salary: Optional[List[Salary]] = None
    published_at: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


class ScrapeOptions(CamelModel):
    skip_cache: bool = False
    mode: ExtractionMode = Field(default=ExtractionMode.AUTO, alias="method")
    ai_model: Optional[str] = None


class CacheStats(BaseModel):
    size: int
    keys: List[str]
