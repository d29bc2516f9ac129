"""Per-option facet counts for listing sidebars.

Counts are taken over the whole collection visible to the user (an
employer's own postings, or all public postings), not over the subset left
after other facets are applied. They stay fixed for a page load.
"""

from enum import Enum
from typing import Dict, Iterable, List, Sequence

from careermade_jobs.core.models import Posting
from careermade_jobs.listing.filters import matches_job_type, matches_location, matches_specialization
from careermade_jobs.taxonomy.classifier import classify
from careermade_jobs.taxonomy.registry import TaxonomyRegistry, default_registry


class FacetDimension(str, Enum):
    """Filterable dimensions that show per-option counts."""
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    FIELD = "field"
    LOCATION = "location"
    JOB_TYPE = "job_type"
    SPECIALIZATION = "specialization"


TAXONOMY_DIMENSIONS = (FacetDimension.CATEGORY, FacetDimension.SUBCATEGORY, FacetDimension.FIELD)


def _taxonomy_label(posting: Posting, dimension: FacetDimension, registry: TaxonomyRegistry) -> str:
    result = classify(posting, registry)
    if dimension is FacetDimension.CATEGORY:
        return result.category
    if dimension is FacetDimension.SUBCATEGORY:
        return result.subcategory
    return result.field


def posting_matches_option(
    posting: Posting,
    dimension: FacetDimension,
    option: str,
    registry: TaxonomyRegistry = default_registry,
) -> bool:
    """Whether a single posting counts towards ``option`` of ``dimension``."""
    if dimension in TAXONOMY_DIMENSIONS:
        return _taxonomy_label(posting, dimension, registry).lower() == option.lower()
    if dimension is FacetDimension.LOCATION:
        return matches_location(posting, option)
    if dimension is FacetDimension.JOB_TYPE:
        return matches_job_type(posting, option)
    return matches_specialization(posting, option)


def count_by_option(
    postings: Iterable[Posting],
    dimension: FacetDimension,
    option: str,
    registry: TaxonomyRegistry = default_registry,
) -> int:
    """Count the postings that match ``option`` along ``dimension``."""
    return sum(1 for posting in postings if posting_matches_option(posting, dimension, option, registry))


def facet_counts(
    postings: Iterable[Posting],
    dimension: FacetDimension,
    options: Sequence[str],
    registry: TaxonomyRegistry = default_registry,
) -> Dict[str, int]:
    """Count every option of a dimension, keeping the options' display order."""
    items: List[Posting] = list(postings)
    if dimension in TAXONOMY_DIMENSIONS:
        # Classify once per posting rather than once per option.
        labels = [_taxonomy_label(posting, dimension, registry).lower() for posting in items]
        return {option: labels.count(option.lower()) for option in options}
    return {option: count_by_option(items, dimension, option, registry) for option in options}
