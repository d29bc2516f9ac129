"""Shared fixtures for listing and classification tests."""

from typing import Any, Dict, List

import pytest

from careermade_jobs.core.models import Posting


def make_posting(**overrides: Any) -> Posting:
    """Build a posting from payload-style keyword arguments."""
    data: Dict[str, Any] = {"title": "", "specialization": ""}
    data.update(overrides)
    return Posting.model_validate(data)


@pytest.fixture
def cardiologist() -> Posting:
    return make_posting(
        _id="job-1",
        title="Senior Cardiologist",
        specialization="Cardiology",
        experienceRequired={"minYears": 5},
        salary={"max": 2500000},
        jobType="Full-time",
        location={"city": "Mumbai"},
    )


@pytest.fixture
def staff_nurse() -> Posting:
    return make_posting(
        _id="job-2",
        title="Staff Nurse",
        specialization="Nursing",
        experienceRequired={"minYears": 1},
        salary={"max": 600000},
        jobType="Part-time",
        location={"city": "Pune"},
    )


@pytest.fixture
def scenario_postings(cardiologist: Posting, staff_nurse: Posting) -> List[Posting]:
    return [cardiologist, staff_nurse]


@pytest.fixture
def mixed_postings() -> List[Posting]:
    """A small public listing spanning several categories and cities."""
    return [
        make_posting(
            _id="a",
            title="Consultant Neurologist",
            specialization="Neurology",
            organizationName="Lilavati Hospital",
            location={"city": "Mumbai", "state": "Maharashtra"},
            jobType="Full-time",
            experienceRequired={"minYears": 8},
            salary={"max": 3600000},
        ),
        make_posting(
            _id="b",
            title="ICU Nurse",
            specialization="GNM",
            organizationName="Apollo Hospitals",
            location={"city": "Chennai", "state": "Tamil Nadu"},
            jobType="Full-time",
            experienceRequired={"minYears": 2},
            salary={"max": 480000},
        ),
        make_posting(
            _id="c",
            title="Dialysis Technician",
            specialization="Medical Technology",
            organizationName="Fortis",
            location={"city": "Pune", "state": "Maharashtra"},
            jobType="Contract",
            experienceRequired={"minYears": 1},
            salary={"max": 360000},
        ),
        make_posting(
            _id="d",
            title="Casualty Medical Officer",
            specialization="Emergency Medicine",
            organizationName="Ruby Hall Clinic",
            location={"city": "Pune", "state": "Maharashtra"},
            jobType="Part-time",
            experienceRequired={"minYears": 1},
            salary={"max": 1200000},
        ),
        make_posting(
            _id="e",
            title="Medical Sales Representative",
            specialization="Other",
            organizationName="Sun Pharma",
            location={"city": "Bangalore", "state": "Karnataka"},
            jobType="Full-time",
            salary={"max": 700000},
        ),
    ]
