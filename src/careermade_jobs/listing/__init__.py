"""Faceted filtering, facet counts and pagination for job listings."""

from .facets import FacetDimension, count_by_option, facet_counts
from .filters import CascadeInvariantError, FilterState, apply_filters
from .formatting import applied_filters_count, format_salary_lpa, time_ago
from .pagination import InvalidPageSizeError, Page, clamp_page, paginate
from .query import LANDING_CATEGORY_SPECIALTIES, filter_state_from_query
from .view import JobListing

__all__ = [
    "FacetDimension",
    "count_by_option",
    "facet_counts",
    "CascadeInvariantError",
    "FilterState",
    "apply_filters",
    "applied_filters_count",
    "format_salary_lpa",
    "time_ago",
    "InvalidPageSizeError",
    "Page",
    "clamp_page",
    "paginate",
    "LANDING_CATEGORY_SPECIALTIES",
    "filter_state_from_query",
    "JobListing",
]
