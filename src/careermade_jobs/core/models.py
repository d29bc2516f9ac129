"""Core data models for CareerMade job postings."""

import math
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobType(str, Enum):
    """Employment types an employer can pick in the posting wizard."""
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    FREELANCE = "Freelance"
    INTERNSHIP = "Internship"
    VOLUNTEER = "Volunteer"


class ListingScope(str, Enum):
    """Which collection of postings a listing page shows."""
    PUBLIC = "public"
    EMPLOYER = "employer"


def _number_or_none(value: Any) -> Optional[float]:
    """Coerce loosely typed numeric payload values, dropping anything unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    # Non-finite amounts count as missing.
    return number if math.isfinite(number) else None


def _text_or_none(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class _PayloadModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Location(_PayloadModel):
    """Where a job is based."""
    city: Optional[str] = Field(None, description="City name")
    state: Optional[str] = Field(None, description="State or region name")

    @field_validator("city", "state", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class ExperienceRange(_PayloadModel):
    """Years of experience an employer asks for."""
    min_years: Optional[float] = Field(None, alias="minYears", description="Minimum years required")
    max_years: Optional[float] = Field(None, alias="maxYears", description="Maximum years accepted")

    @field_validator("min_years", "max_years", mode="before")
    @classmethod
    def _coerce_years(cls, value: Any) -> Optional[float]:
        return _number_or_none(value)


class SalaryRange(_PayloadModel):
    """Annual compensation in currency units."""
    min: Optional[float] = Field(None, description="Minimum annual salary")
    max: Optional[float] = Field(None, description="Maximum annual salary")
    currency: Optional[str] = Field(None, description="Currency code")

    @field_validator("min", "max", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Optional[float]:
        return _number_or_none(value)

    @field_validator("currency", mode="before")
    @classmethod
    def _stringify_currency(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class Posting(_PayloadModel):
    """One employer job listing as returned by the jobs API."""
    id: Optional[str] = Field(None, alias="_id", description="Posting identifier")
    title: str = Field("", description="Job title")
    specialization_text: str = Field(
        "", alias="specialization", description="Free-text specialization entered by the employer"
    )
    organization_name: Optional[str] = Field(None, alias="organizationName", description="Hiring organization")
    description: Optional[str] = Field(None, description="Job description")
    location: Location = Field(default_factory=Location, description="Job location")
    job_type: Optional[JobType] = Field(None, alias="jobType", description="Employment type")
    experience_required: ExperienceRange = Field(
        default_factory=ExperienceRange, alias="experienceRequired", description="Experience requirement"
    )
    salary: SalaryRange = Field(default_factory=SalaryRange, description="Salary range")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")
    responsibilities: List[str] = Field(default_factory=list, description="Role responsibilities")
    requirements: List[str] = Field(default_factory=list, description="Qualifications and skills required")
    benefits: List[str] = Field(default_factory=list, description="Offered benefits")
    skills: List[str] = Field(default_factory=list, description="Key skills")

    @field_validator("title", "specialization_text", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("id", "organization_name", "description", mode="before")
    @classmethod
    def _stringify_optional(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)

    @field_validator("location", "experience_required", "salary", mode="before")
    @classmethod
    def _nested_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, BaseModel)) else {}

    @field_validator("job_type", mode="before")
    @classmethod
    def _known_job_type(cls, value: Any) -> Optional[JobType]:
        if isinstance(value, JobType):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for job_type in JobType:
            if job_type.value.lower() == wanted:
                return job_type
        return None

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
        return value if isinstance(value, datetime) else None

    @field_validator("responsibilities", "requirements", "benefits", "skills", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [str(item) for item in value if item is not None]


class ClassificationResult(BaseModel):
    """Taxonomy path inferred for a posting."""
    model_config = ConfigDict(frozen=True)

    category: str = Field("Other", description="Top-level category")
    subcategory: str = Field("Other", description="Subcategory within the category")
    field: str = Field("Other", description="Field within the subcategory")


class PostingListField(str, Enum):
    """Named list fields a posting carries."""
    RESPONSIBILITIES = "responsibilities"
    REQUIREMENTS = "requirements"
    BENEFITS = "benefits"
    SKILLS = "skills"


def get_list_field(posting: Posting, list_field: PostingListField) -> List[str]:
    """Return a copy of one of the posting's named list fields."""
    if list_field is PostingListField.RESPONSIBILITIES:
        return list(posting.responsibilities)
    if list_field is PostingListField.REQUIREMENTS:
        return list(posting.requirements)
    if list_field is PostingListField.BENEFITS:
        return list(posting.benefits)
    if list_field is PostingListField.SKILLS:
        return list(posting.skills)
    raise ValueError(f"Unknown posting list field: {list_field!r}")


def add_to_list_field(posting: Posting, list_field: PostingListField, value: str) -> Posting:
    """
    Append a trimmed value to a named list field.

    Empty and duplicate values are ignored and the same posting is returned.
    """
    item = (value or "").strip()
    current = get_list_field(posting, list_field)
    if not item or item in current:
        return posting
    return posting.model_copy(update={list_field.value: current + [item]})


def remove_from_list_field(posting: Posting, list_field: PostingListField, value: str) -> Posting:
    """Drop every occurrence of a value from a named list field."""
    current = get_list_field(posting, list_field)
    if value not in current:
        return posting
    return posting.model_copy(update={list_field.value: [item for item in current if item != value]})


def postings_from_payload(payload: Any) -> List[Posting]:
    """
    Build postings from a jobs API response.

    Accepts ``{"data": {"items": [...]}}``, ``{"items": [...]}`` or a bare list.
    Items that are not JSON objects are skipped.
    """
    items: Any = payload
    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            items = data["items"]
        else:
            items = payload.get("items")
    if not isinstance(items, list):
        return []
    return [Posting.model_validate(item) for item in items if isinstance(item, dict)]
