"""Display helpers for listing cards and the filter sidebar."""

from datetime import datetime, timezone
from typing import Optional

from careermade_jobs.config import settings
from careermade_jobs.listing.filters import FilterState

EMPTY_SALARY = "—"


def format_salary_lpa(amount: Optional[float], salary_unit: Optional[int] = None) -> str:
    """Render an annual amount as e.g. ``₹25.0 LPA``; missing or zero amounts render as a dash."""
    if not amount:
        return EMPTY_SALARY
    unit = salary_unit or settings.salary_unit
    return f"{settings.currency_symbol}{amount / unit:.1f} LPA"


def time_ago(created_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Human-readable age of a posting, in whole days, weeks or months."""
    if created_at is None:
        return ""
    if now is None:
        now = datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_days = (now - created_at).days
    if diff_days <= 0:
        return "Today"
    if diff_days == 1:
        return "1 day ago"
    if diff_days < 7:
        return f"{diff_days} days ago"
    if diff_days < 30:
        return f"{diff_days // 7} weeks ago"
    return f"{diff_days // 30} months ago"


def applied_filters_count(state: FilterState) -> int:
    """Number of active facets shown on the "Applied" badge. Search text is not a facet."""
    count = 0
    if state.category:
        count += 1
    if state.subcategory:
        count += 1
    if state.field:
        count += 1
    if state.locations:
        count += 1
    if state.job_types:
        count += 1
    if state.specializations:
        count += 1
    if state.min_experience_years > 0:
        count += 1
    if state.min_salary_lpa > 0:
        count += 1
    return count
