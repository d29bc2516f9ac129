"""Core data models."""

from .models import (
    ClassificationResult,
    ExperienceRange,
    JobType,
    ListingScope,
    Location,
    Posting,
    PostingListField,
    SalaryRange,
    add_to_list_field,
    get_list_field,
    postings_from_payload,
    remove_from_list_field,
)

__all__ = [
    "ClassificationResult",
    "ExperienceRange",
    "JobType",
    "ListingScope",
    "Location",
    "Posting",
    "PostingListField",
    "SalaryRange",
    "add_to_list_field",
    "get_list_field",
    "postings_from_payload",
    "remove_from_list_field",
]
