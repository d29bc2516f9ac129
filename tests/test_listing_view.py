"""Tests for the listing page session."""

import pytest

from careermade_jobs.config import settings
from careermade_jobs.core.models import ListingScope
from careermade_jobs.listing.facets import FacetDimension
from careermade_jobs.listing.filters import FilterState
from careermade_jobs.listing.pagination import InvalidPageSizeError
from careermade_jobs.listing.view import JobListing


def ids(postings):
    return [posting.id for posting in postings]


class TestJobListing:
    """Filtering, paging and facet options on one listing."""

    def test_starts_unfiltered_on_first_page(self, mixed_postings):
        listing = JobListing(mixed_postings, page_size=2)

        assert listing.filters.is_empty
        assert listing.page_number == 1
        assert listing.total_pages == 3
        assert ids(listing.current_page().items) == ["a", "b"]

    def test_default_page_size_from_settings(self, mixed_postings):
        assert JobListing(mixed_postings).page_size == settings.page_size

    def test_invalid_page_size(self, mixed_postings):
        with pytest.raises(InvalidPageSizeError):
            JobListing(mixed_postings, page_size=0)

    def test_page_navigation_is_clamped(self, mixed_postings):
        listing = JobListing(mixed_postings, page_size=2)

        assert ids(listing.next_page().items) == ["c", "d"]
        assert ids(listing.next_page().items) == ["e"]
        assert listing.next_page().page_number == 3
        assert listing.previous_page().page_number == 2
        assert listing.go_to(99).page_number == 3
        assert listing.go_to(-4).page_number == 1

    def test_apply_resets_to_first_page(self, mixed_postings):
        listing = JobListing(mixed_postings, page_size=2)
        listing.go_to(3)

        results = listing.apply(FilterState().with_category("Doctor"))

        assert ids(results) == ["a", "d"]
        assert listing.page_number == 1
        assert listing.total_pages == 1

    def test_no_results(self, mixed_postings):
        listing = JobListing(mixed_postings)
        listing.apply(FilterState().with_category("Insurance"))

        assert not listing.has_results
        assert listing.total_pages == 1
        assert listing.current_page().is_empty

    def test_initial_filters(self, mixed_postings):
        listing = JobListing(mixed_postings, initial_filters=FilterState().toggle_location("Pune"))

        assert ids(listing.results) == ["c", "d"]
        assert listing.filters.locations == frozenset({"Pune"})

    def test_clear_filters_keeps_query_for_jobseekers(self, mixed_postings):
        listing = JobListing(mixed_postings)
        listing.apply(FilterState().with_category("Doctor").with_query("pune"))

        listing.clear_filters()

        assert listing.filters.query == "pune"
        assert listing.filters.category is None
        assert ids(listing.results) == ["c", "d"]

    def test_clear_filters_clears_query_for_employers(self, mixed_postings):
        listing = JobListing(mixed_postings, scope=ListingScope.EMPLOYER)
        listing.apply(FilterState().with_query("fortis"))
        assert ids(listing.results) == ["c"]

        listing.clear_filters()

        assert listing.filters.is_empty
        assert len(listing.results) == len(mixed_postings)

    def test_facet_counts_ignore_active_filters(self, mixed_postings):
        listing = JobListing(mixed_postings)
        listing.apply(FilterState().with_category("Doctor"))

        counts = listing.facet_counts(FacetDimension.CATEGORY, listing.category_options())

        assert counts["Nurse"] == 1
        assert counts["Doctor"] == 2

    def test_child_options_follow_selection(self, mixed_postings):
        listing = JobListing(mixed_postings)
        assert listing.subcategory_options() == []
        assert listing.field_options() == []

        listing.apply(FilterState().with_category("Doctor"))
        assert listing.subcategory_options()[0] == "Specialist"
        assert listing.field_options() == []

        listing.apply(listing.filters.with_subcategory("RMO"))
        assert listing.field_options()[0] == "Emergency RMO"

    def test_base_collection_is_copied(self, mixed_postings):
        listing = JobListing(mixed_postings)
        mixed_postings.clear()
        assert len(listing.postings) == 5
