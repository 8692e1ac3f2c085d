#!/usr/bin/env python3
"""
Test suite utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""

from typing import Iterable, Optional

from job_matcher.models import JobPosting, Profile


def make_profile(
    skills: Iterable[str] = (),
    raw_text: str = "",
    years: Optional[int] = None
) -> Profile:
    """Build a Profile the way the resume extractor would hand it over."""
    return Profile(skills=tuple(skills), raw_text=raw_text, years_of_experience=years)


def make_job(
    job_id: str = "job-test",
    title: str = "Test Job",
    skills: Iterable[str] = (),
    min_experience: Optional[int] = None,
    industry: str = "Internet",
    description: str = ""
) -> JobPosting:
    """Build a JobPosting with sensible defaults."""
    return JobPosting(
        id=job_id,
        title=title,
        industry=industry,
        required_skills=tuple(skills),
        min_experience=min_experience,
        description=description
    )
