"""Occupational taxonomy and posting classification."""

from .classifier import (
    CATEGORY_RULES,
    DOCTOR_SUBCATEGORY_RULES,
    KeywordRule,
    MatchScope,
    category_of,
    classify,
    field_of,
    subcategory_of,
)
from .registry import (
    JOB_TYPES,
    LOCATIONS,
    OTHER,
    SPECIALIZATIONS,
    TaxonomyRegistry,
    default_registry,
)

__all__ = [
    "CATEGORY_RULES",
    "DOCTOR_SUBCATEGORY_RULES",
    "KeywordRule",
    "MatchScope",
    "category_of",
    "classify",
    "field_of",
    "subcategory_of",
    "JOB_TYPES",
    "LOCATIONS",
    "OTHER",
    "SPECIALIZATIONS",
    "TaxonomyRegistry",
    "default_registry",
]
