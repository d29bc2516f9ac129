"""Listing page session: base postings, active filters and page cursor."""

from typing import Dict, List, Optional, Sequence

from careermade_jobs.config import settings
from careermade_jobs.core.models import ListingScope, Posting
from careermade_jobs.listing.facets import FacetDimension, facet_counts
from careermade_jobs.listing.filters import FilterState, apply_filters
from careermade_jobs.listing.pagination import Page, clamp_page, paginate, total_pages_for
from careermade_jobs.taxonomy.registry import TaxonomyRegistry, default_registry
from careermade_jobs.utils.logging import get_logger, log_filter_state

logger = get_logger(__name__)


class JobListing:
    """
    State of one listing page for the lifetime of a page load.

    Holds the unfiltered collection fetched for the visible scope, the
    current :class:`FilterState` and the page number. Applying a new filter
    state always sends the cursor back to page 1.
    """

    def __init__(
        self,
        postings: Sequence[Posting],
        scope: ListingScope = ListingScope.PUBLIC,
        page_size: Optional[int] = None,
        registry: TaxonomyRegistry = default_registry,
        initial_filters: Optional[FilterState] = None,
    ):
        self.logger = logger.bind(component="job_listing", scope=scope.value)
        self.postings: List[Posting] = list(postings)
        self.scope = scope
        self.page_size = page_size if page_size is not None else settings.page_size
        self.registry = registry

        # Raises InvalidPageSizeError for a non-positive page size.
        total_pages_for(0, self.page_size)

        self.filters = FilterState()
        self.results: List[Posting] = list(self.postings)
        self.page_number = 1
        if initial_filters is not None:
            self.apply(initial_filters)

        self.logger.info(
            "Listing loaded",
            postings_count=len(self.postings),
            page_size=self.page_size,
        )

    @property
    def total_pages(self) -> int:
        return total_pages_for(len(self.results), self.page_size)

    @property
    def has_results(self) -> bool:
        return bool(self.results)

    def apply(self, filters: FilterState) -> List[Posting]:
        """Filter the base collection with ``filters`` and reset to page 1."""
        self.results = apply_filters(self.postings, filters, self.scope, self.registry)
        self.filters = filters
        self.page_number = 1
        self.logger.info(
            "Filters applied",
            matched=len(self.results),
            total=len(self.postings),
            **log_filter_state(filters),
        )
        return self.results

    def clear_filters(self) -> List[Posting]:
        """
        Reset every facet.

        Jobseekers keep their search text; employers' "clear all" also
        empties the search box.
        """
        keep_query = self.scope is ListingScope.PUBLIC
        return self.apply(self.filters.cleared(keep_query=keep_query))

    def current_page(self) -> Page[Posting]:
        return paginate(self.results, self.page_size, self.page_number)

    def go_to(self, page_number: int) -> Page[Posting]:
        self.page_number = clamp_page(page_number, self.total_pages)
        return self.current_page()

    def next_page(self) -> Page[Posting]:
        return self.go_to(self.page_number + 1)

    def previous_page(self) -> Page[Posting]:
        return self.go_to(self.page_number - 1)

    def facet_counts(self, dimension: FacetDimension, options: Sequence[str]) -> Dict[str, int]:
        """Per-option counts over the unfiltered collection of this scope."""
        return facet_counts(self.postings, dimension, options, self.registry)

    def category_options(self) -> List[str]:
        return self.registry.categories()

    def subcategory_options(self) -> List[str]:
        """Subcategories offered for the selected category; none until one is chosen."""
        if self.filters.category is None:
            return []
        return self.registry.subcategories_of(self.filters.category)

    def field_options(self) -> List[str]:
        """Fields offered for the selected subcategory; none until one is chosen."""
        if self.filters.category is None or self.filters.subcategory is None:
            return []
        return self.registry.fields_of(self.filters.category, self.filters.subcategory)
