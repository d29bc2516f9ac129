"""
CareerMade Jobs: taxonomy classification and faceted filtering for a
healthcare job board.

Postings fetched from the jobs API are classified into a three-level
occupational taxonomy (Category -> Subcategory -> Field), filtered against
a jobseeker's facet selection, counted per facet option and paginated.
"""

__version__ = "0.1.0"

from careermade_jobs.core.models import ClassificationResult, ListingScope, Posting, postings_from_payload
from careermade_jobs.listing.facets import FacetDimension, count_by_option
from careermade_jobs.listing.filters import FilterState, apply_filters
from careermade_jobs.listing.pagination import paginate
from careermade_jobs.listing.view import JobListing
from careermade_jobs.taxonomy.classifier import classify
from careermade_jobs.taxonomy.registry import TaxonomyRegistry, default_registry

__all__ = [
    "ClassificationResult",
    "ListingScope",
    "Posting",
    "postings_from_payload",
    "FacetDimension",
    "count_by_option",
    "FilterState",
    "apply_filters",
    "paginate",
    "JobListing",
    "classify",
    "TaxonomyRegistry",
    "default_registry",
]
