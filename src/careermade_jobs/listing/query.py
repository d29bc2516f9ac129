"""Seed a filter state from URL query parameters and the seeker's profile."""

from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import unquote

from careermade_jobs.listing.filters import FilterState
from careermade_jobs.taxonomy.registry import TaxonomyRegistry, default_registry

# Landing page category cards mapped to the specializations they preselect.
LANDING_CATEGORY_SPECIALTIES: Dict[str, Tuple[str, ...]] = {
    "Doctors & Physicians": ("General Medicine", "Surgery", "Pediatrics", "Internal Medicine"),
    "Nursing Staff": ("Nursing",),
    "Technicians": ("Medical Technology", "Radiology", "Pathology"),
    "Admin & Support": ("Other",),
    "Diagnostics": ("Pathology", "Radiology"),
    "Therapists": ("Physical Therapy", "Occupational Therapy", "Speech Therapy"),
    "Dental & Optometry": ("Ophthalmology", "Other"),
    "Research & Development": ("Pathology", "Other"),
}


def _param(params: Mapping[str, Optional[str]], name: str) -> str:
    return (params.get(name) or "").strip()


def split_specialties(raw: str) -> List[str]:
    """Split a comma-separated ``specialties`` parameter, dropping blanks and repeats."""
    seen: List[str] = []
    for item in raw.split(","):
        value = unquote(item).strip()
        if value and value not in seen:
            seen.append(value)
    return seen


def filter_state_from_query(
    params: Mapping[str, Optional[str]],
    profile_category: Optional[str] = None,
    registry: TaxonomyRegistry = default_registry,
) -> FilterState:
    """
    Build the initial filter state for a listing page.

    Args:
        params: URL query parameters (``title``, ``specialty``, ``q``,
            ``specialties``, ``category``)
        profile_category: Category stored on the seeker's professional profile
        registry: Taxonomy used to validate category names

    Returns:
        FilterState honouring the cascade invariant
    """
    state = FilterState()

    title = _param(params, "title")
    if title and registry.is_category(title):
        state = state.with_category(title)
    elif not title and profile_category and registry.is_category(profile_category):
        state = state.with_category(profile_category)

    query = _param(params, "q") or _param(params, "specialty")
    if query:
        state = state.with_query(query)

    specialties = _param(params, "specialties")
    landing_category = _param(params, "category")
    if specialties:
        state = state.with_specializations(split_specialties(specialties))
    elif landing_category in LANDING_CATEGORY_SPECIALTIES:
        state = state.with_specializations(LANDING_CATEGORY_SPECIALTIES[landing_category])

    return state
