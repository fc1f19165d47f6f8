"""
Shape the LLM must answer with. Mirrors JobRecord without the fields the
extractor stamps itself (source URL, source type, raw data).
"""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator

from job_scraper.core.models import (
    CamelModel,
    ExperienceLevel,
    JobRecord,
    Location,
    Salary,
    SourceType,
    WorkingTime,
    WorkplaceType,
    clean_string_list,
)


class ExtractedJob(CamelModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="Job title/position name")
    company_name: str = Field(description="Company name")
    description: str = Field(default="", description="Full job description")
    location: Location = Field(default_factory=Location)
    required_skills: List[str] = Field(
        default_factory=list,
        description="Required technical skills, technologies, languages",
    )
    nice_to_have_skills: List[str] = Field(
        default_factory=list, description="Nice to have skills, optional technologies"
    )
    workplace_type: Optional[WorkplaceType] = None
    working_time: Optional[WorkingTime] = None
    experience_level: Optional[ExperienceLevel] = None
    salary: Optional[List[Salary]] = Field(
        default=None, description="Salary ranges, one per contract type"
    )
    languages: Optional[List[str]] = Field(
        default=None, description="Required languages (e.g., English, Polish)"
    )
    company_logo_url: Optional[str] = None
    published_at: Optional[str] = Field(
        default=None, description="Publication date (ISO format)"
    )

    @field_validator("required_skills", "nice_to_have_skills", mode="before")
    @classmethod
    def clean_skills(cls, value: Any) -> List[str]:
        return clean_string_list(value)

    @classmethod
    def response_format(cls) -> Dict[str, Any]:
        """OpenAI `response_format` asking for JSON matching this model."""
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "job_posting",
                "schema": cls.model_json_schema(by_alias=True),
            },
        }

    def to_record(self, source_url: str, source_type: SourceType = "other") -> JobRecord:
        return JobRecord(
            **self.model_dump(exclude_none=True),
            source_url=source_url,
            source_type=source_type,
        )
