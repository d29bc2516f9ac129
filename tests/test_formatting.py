"""Tests for listing display helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from careermade_jobs.config import settings
from careermade_jobs.listing.filters import FilterState
from careermade_jobs.listing.formatting import (
    EMPTY_SALARY,
    applied_filters_count,
    format_salary_lpa,
    time_ago,
)

NOW = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)


class TestFormatSalary:

    def test_lpa_label(self):
        assert format_salary_lpa(2500000) == f"{settings.currency_symbol}25.0 LPA"

    def test_rounds_to_one_decimal(self):
        assert format_salary_lpa(480000).endswith("4.8 LPA")

    @pytest.mark.parametrize("amount", [None, 0])
    def test_missing_amount(self, amount):
        assert format_salary_lpa(amount) == EMPTY_SALARY

    def test_custom_unit(self):
        assert format_salary_lpa(2500000, salary_unit=1000000).endswith("2.5 LPA")


class TestTimeAgo:

    @pytest.mark.parametrize(
        "age,expected",
        [
            (timedelta(hours=3), "Today"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=14), "2 weeks ago"),
            (timedelta(days=29), "4 weeks ago"),
            (timedelta(days=65), "2 months ago"),
            (timedelta(days=-2), "Today"),
        ],
    )
    def test_relative_labels(self, age, expected):
        assert time_ago(NOW - age, now=NOW) == expected

    def test_naive_timestamp_treated_as_utc(self):
        assert time_ago(datetime(2024, 3, 28, 12, 0), now=NOW) == "3 days ago"

    def test_missing_timestamp(self):
        assert time_ago(None, now=NOW) == ""


class TestAppliedFiltersCount:

    def test_empty_state(self):
        assert applied_filters_count(FilterState()) == 0

    def test_query_is_not_counted(self):
        assert applied_filters_count(FilterState().with_query("icu")) == 0

    def test_every_facet_counts_once(self):
        state = (
            FilterState()
            .with_category("Doctor")
            .with_subcategory("Specialist")
            .with_field("Pediatrician")
            .toggle_location("Pune")
            .toggle_location("Mumbai")
            .toggle_job_type("Full-time")
            .toggle_specialization("Pediatrics")
            .with_min_experience(2)
            .with_min_salary(10)
        )
        assert applied_filters_count(state) == 8
