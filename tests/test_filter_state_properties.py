"""
Property-based tests for filter state transitions.

Whatever sequence of selections a jobseeker makes, a lower taxonomy rank is
never set without its parent, and changing a rank clears the ranks below it.
"""

import pytest
from hypothesis import given, settings, strategies as st
from hypothesis.stateful import RuleBasedStateMachine, initialize, invariant, rule

from careermade_jobs.listing.filters import CascadeInvariantError, FilterState
from careermade_jobs.taxonomy.registry import JOB_TYPES, LOCATIONS, SPECIALIZATIONS, default_registry

category_strategy = st.one_of(st.none(), st.sampled_from(default_registry.categories()))
location_strategy = st.sampled_from(LOCATIONS)
job_type_strategy = st.sampled_from(JOB_TYPES)
specialization_strategy = st.sampled_from(SPECIALIZATIONS)


@st.composite
def filter_states(draw):
    """Generate cascade-respecting filter states with random facet selections."""
    state = FilterState().with_category(draw(category_strategy))
    if state.category is not None and draw(st.booleans()):
        state = state.with_subcategory(
            draw(st.sampled_from(default_registry.subcategories_of(state.category)))
        )
        if draw(st.booleans()):
            state = state.with_field(
                draw(st.sampled_from(default_registry.fields_of(state.category, state.subcategory)))
            )
    for location in draw(st.lists(location_strategy, max_size=3)):
        state = state.toggle_location(location)
    for job_type in draw(st.lists(job_type_strategy, max_size=3)):
        state = state.toggle_job_type(job_type)
    state = state.with_min_experience(draw(st.integers(min_value=0, max_value=15)))
    state = state.with_min_salary(draw(st.integers(min_value=0, max_value=50)))
    return state.with_query(draw(st.text(max_size=10)))


class FilterStateMachine(RuleBasedStateMachine):
    """Drive a filter state through arbitrary sidebar interactions."""

    @initialize()
    def start(self):
        self.state = FilterState()

    @rule(category=category_strategy)
    def select_category(self, category):
        previous = self.state
        self.state = self.state.with_category(category)

        assert self.state.category == category
        assert self.state.subcategory is None
        assert self.state.field is None
        assert self.state.locations == previous.locations

    @rule(data=st.data())
    def select_subcategory(self, data):
        if self.state.category is None:
            with pytest.raises(CascadeInvariantError):
                self.state.with_subcategory("Specialist")
            return
        options = default_registry.subcategories_of(self.state.category)
        subcategory = data.draw(st.sampled_from(options))
        self.state = self.state.with_subcategory(subcategory)

        assert self.state.subcategory == subcategory
        assert self.state.field is None

    @rule(data=st.data())
    def select_field(self, data):
        if self.state.subcategory is None:
            with pytest.raises(CascadeInvariantError):
                self.state.with_field("Cardiologist")
            return
        options = default_registry.fields_of(self.state.category, self.state.subcategory)
        field = data.draw(st.sampled_from(options))
        self.state = self.state.with_field(field)

        assert self.state.field == field

    @rule()
    def clear_subcategory(self):
        self.state = self.state.with_subcategory(None)
        assert self.state.field is None

    @rule(location=location_strategy)
    def toggle_location(self, location):
        was_selected = location in self.state.locations
        self.state = self.state.toggle_location(location)
        assert (location in self.state.locations) != was_selected

    @rule(job_type=job_type_strategy)
    def toggle_job_type(self, job_type):
        self.state = self.state.toggle_job_type(job_type)

    @rule(specialization=specialization_strategy)
    def toggle_specialization(self, specialization):
        self.state = self.state.toggle_specialization(specialization)

    @rule(years=st.integers(min_value=-5, max_value=20))
    def set_experience(self, years):
        self.state = self.state.with_min_experience(years)
        assert self.state.min_experience_years == max(0, years)

    @rule(lpa=st.floats(min_value=-10, max_value=100, allow_nan=False))
    def set_salary(self, lpa):
        self.state = self.state.with_min_salary(lpa)

    @rule(keep_query=st.booleans())
    def clear_all(self, keep_query):
        query = self.state.query
        self.state = self.state.cleared(keep_query=keep_query)
        assert self.state.query == (query if keep_query else "")
        assert self.state.category is None
        assert not self.state.locations

    @invariant()
    def cascade_holds(self):
        assert self.state.respects_cascade()

    @invariant()
    def thresholds_non_negative(self):
        assert self.state.min_experience_years >= 0
        assert self.state.min_salary_lpa >= 0


TestFilterStateMachine = FilterStateMachine.TestCase
TestFilterStateMachine.settings = settings(max_examples=50, stateful_step_count=20)


class TestFilterStateProperties:
    """Properties of individual transitions."""

    @given(state=filter_states(), category=category_strategy)
    @settings(max_examples=100)
    def test_category_change_clears_lower_ranks(self, state, category):
        updated = state.with_category(category)

        assert updated.subcategory is None
        assert updated.field is None
        assert updated.locations == state.locations
        assert updated.query == state.query

    @given(state=filter_states())
    @settings(max_examples=100)
    def test_transitions_do_not_mutate(self, state):
        snapshot = state.model_dump()
        state.with_category("Nurse")
        state.toggle_location("Mumbai")
        state.cleared()
        assert state.model_dump() == snapshot

    @given(state=filter_states(), location=location_strategy)
    @settings(max_examples=100)
    def test_toggle_twice_restores_state(self, state, location):
        assert state.toggle_location(location).toggle_location(location) == state

    @given(state=filter_states())
    @settings(max_examples=50)
    def test_cleared_is_empty_without_query(self, state):
        assert state.cleared().is_empty
        assert state.cleared(keep_query=True).query == state.query


class TestFilterStateTransitions:
    """Concrete transition examples."""

    def test_subcategory_requires_category(self):
        with pytest.raises(CascadeInvariantError):
            FilterState().with_subcategory("RMO")

    def test_field_requires_subcategory(self):
        with pytest.raises(CascadeInvariantError):
            FilterState().with_category("Doctor").with_field("Cardiologist")

    def test_clearing_with_none_is_allowed(self):
        state = FilterState().with_subcategory(None).with_field(None)
        assert state.is_empty

    def test_reselecting_category_clears_children(self):
        state = (
            FilterState()
            .with_category("Doctor")
            .with_subcategory("Super specialist")
            .with_field("Cardiologist")
        )
        updated = state.with_category("Doctor")

        assert updated.category == "Doctor"
        assert updated.subcategory is None
        assert updated.field is None

    def test_empty_string_clears_category(self):
        assert FilterState().with_category("Nurse").with_category("").category is None

    def test_direct_construction_can_break_cascade(self):
        assert not FilterState(field="Cardiologist").respects_cascade()
        assert not FilterState(category="Doctor", field="Cardiologist").respects_cascade()
