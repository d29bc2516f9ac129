"""Facet selection state and the filter engine for job listings."""

from typing import FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from careermade_jobs.config import settings
from careermade_jobs.core.models import ClassificationResult, ListingScope, Posting
from careermade_jobs.taxonomy.classifier import classify
from careermade_jobs.taxonomy.registry import TaxonomyRegistry, default_registry
from careermade_jobs.utils.logging import get_logger, log_filter_state

logger = get_logger(__name__)


class CascadeInvariantError(ValueError):
    """A lower taxonomy rank was selected without its parent rank."""


def _toggled(values: FrozenSet[str], value: str) -> FrozenSet[str]:
    return values - {value} if value in values else values | {value}


class FilterState(BaseModel):
    """
    A jobseeker's current facet selection.

    Instances are immutable; every ``with_*``/``toggle_*`` method returns a
    new state. Taxonomy mutations keep the cascade invariant: clearing or
    changing a rank clears every rank below it.
    """

    model_config = ConfigDict(frozen=True)

    category: Optional[str] = Field(None, description="Selected category")
    subcategory: Optional[str] = Field(None, description="Selected subcategory")
    field: Optional[str] = Field(None, description="Selected field")
    locations: FrozenSet[str] = Field(default_factory=frozenset, description="Selected locations (any may match)")
    job_types: FrozenSet[str] = Field(default_factory=frozenset, description="Selected job types (any may match)")
    specializations: FrozenSet[str] = Field(
        default_factory=frozenset, description="Selected specializations (any may match)"
    )
    min_experience_years: int = Field(0, ge=0, description="Minimum years the posting must ask for")
    min_salary_lpa: float = Field(0, ge=0, description="Minimum maximum-salary in LPA")
    query: str = Field("", description="Free-text search")

    @property
    def is_empty(self) -> bool:
        return self == FilterState()

    def respects_cascade(self) -> bool:
        if self.subcategory is not None and self.category is None:
            return False
        if self.field is not None and self.subcategory is None:
            return False
        return True

    def with_category(self, category: Optional[str]) -> "FilterState":
        """Select (or clear, with ``None``) the category; always clears subcategory and field."""
        return self.model_copy(update={"category": category or None, "subcategory": None, "field": None})

    def with_subcategory(self, subcategory: Optional[str]) -> "FilterState":
        """Select (or clear) the subcategory; always clears field."""
        if subcategory and self.category is None:
            raise CascadeInvariantError("Cannot select a subcategory before a category")
        return self.model_copy(update={"subcategory": subcategory or None, "field": None})

    def with_field(self, field: Optional[str]) -> "FilterState":
        """Select (or clear) the field."""
        if field and self.subcategory is None:
            raise CascadeInvariantError("Cannot select a field before a subcategory")
        return self.model_copy(update={"field": field or None})

    def toggle_location(self, location: str) -> "FilterState":
        return self.model_copy(update={"locations": _toggled(self.locations, location)})

    def toggle_job_type(self, job_type: str) -> "FilterState":
        return self.model_copy(update={"job_types": _toggled(self.job_types, job_type)})

    def toggle_specialization(self, specialization: str) -> "FilterState":
        return self.model_copy(update={"specializations": _toggled(self.specializations, specialization)})

    def with_specializations(self, specializations: Iterable[str]) -> "FilterState":
        return self.model_copy(update={"specializations": frozenset(specializations)})

    def with_min_experience(self, years: int) -> "FilterState":
        return self.model_copy(update={"min_experience_years": max(0, int(years))})

    def with_min_salary(self, lpa: float) -> "FilterState":
        return self.model_copy(update={"min_salary_lpa": max(0.0, float(lpa))})

    def with_query(self, query: str) -> "FilterState":
        return self.model_copy(update={"query": query or ""})

    def cleared(self, keep_query: bool = False) -> "FilterState":
        """Drop every facet selection, optionally keeping the search text."""
        return FilterState(query=self.query if keep_query else "")


def _contains(value: Optional[str], needle: str) -> bool:
    return needle in (value or "").lower()


def matches_query(posting: Posting, query: str, scope: ListingScope = ListingScope.PUBLIC) -> bool:
    """Case-insensitive substring search over the posting's searchable text fields."""
    q = query.lower()
    if not q:
        return True
    if (
        _contains(posting.title, q)
        or _contains(posting.specialization_text, q)
        or _contains(posting.location.city, q)
        or _contains(posting.location.state, q)
    ):
        return True
    return scope is ListingScope.EMPLOYER and _contains(posting.organization_name, q)


def matches_location(posting: Posting, location: str) -> bool:
    """True when the posting's city or state contains ``location``."""
    needle = location.lower()
    return _contains(posting.location.city, needle) or _contains(posting.location.state, needle)


def matches_job_type(posting: Posting, job_type: str) -> bool:
    return posting.job_type is not None and posting.job_type.value.lower() == job_type.lower()


def matches_specialization(posting: Posting, specialization: str) -> bool:
    return bool(posting.specialization_text) and posting.specialization_text.lower() == specialization.lower()


def salary_in_lpa(amount: Optional[float], salary_unit: Optional[int] = None) -> float:
    """Convert an annual amount to the LPA scale; missing amounts count as 0."""
    unit = salary_unit or settings.salary_unit
    return (amount or 0) / unit


def _matches_taxonomy(classification: ClassificationResult, state: FilterState) -> bool:
    if state.category is not None and classification.category != state.category:
        return False
    if state.subcategory is not None and classification.subcategory != state.subcategory:
        return False
    if state.field is not None and classification.field != state.field:
        return False
    return True


def apply_filters(
    postings: Iterable[Posting],
    state: FilterState,
    scope: ListingScope = ListingScope.PUBLIC,
    registry: TaxonomyRegistry = default_registry,
    salary_unit: Optional[int] = None,
) -> List[Posting]:
    """
    Return the postings that satisfy every active facet, in input order.

    Dimensions combine with AND; values selected within one multi-select
    dimension (locations, job types, specializations) combine with OR.
    Unset dimensions place no constraint.

    Raises:
        CascadeInvariantError: if ``state`` selects a rank without its parent.
    """
    if not state.respects_cascade():
        raise CascadeInvariantError(
            f"Filter state breaks the taxonomy cascade: category={state.category!r}, "
            f"subcategory={state.subcategory!r}, field={state.field!r}"
        )

    items = list(postings)

    result: List[Posting] = []
    for posting in items:
        if state.query and not matches_query(posting, state.query, scope):
            continue
        # Classified at most once per posting, and only when a rank is selected.
        if state.category is not None and not _matches_taxonomy(classify(posting, registry), state):
            continue
        if state.locations and not any(matches_location(posting, loc) for loc in state.locations):
            continue
        if state.job_types and not any(matches_job_type(posting, jt) for jt in state.job_types):
            continue
        if state.specializations and not any(
            matches_specialization(posting, s) for s in state.specializations
        ):
            continue
        if state.min_experience_years > 0:
            if (posting.experience_required.min_years or 0) < state.min_experience_years:
                continue
        if state.min_salary_lpa > 0:
            if salary_in_lpa(posting.salary.max, salary_unit) < state.min_salary_lpa:
                continue
        result.append(posting)

    logger.debug(
        "Applied listing filters",
        scope=scope.value,
        total=len(items),
        matched=len(result),
        **log_filter_state(state),
    )
    return result
