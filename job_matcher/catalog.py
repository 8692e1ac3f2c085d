#!/usr/bin/env python3
"""
Job Catalog - Read-only in-memory job postings.

Production deployments source postings from a job-listing store; the engine
only needs a fixed sequence, which StaticJobCatalog provides.
"""

from collections.abc import Sequence
from typing import Iterable, Tuple
import logging

import yaml

from job_matcher.exceptions import ConfigurationException, InvalidRequestException
from job_matcher.models import JobPosting

logger = logging.getLogger(__name__)


class StaticJobCatalog(Sequence):
    """Immutable sequence of job postings."""

    def __init__(self, jobs: Iterable[JobPosting]):
        self._jobs: Tuple[JobPosting, ...] = tuple(jobs)

    def jobs(self) -> Tuple[JobPosting, ...]:
        return self._jobs

    def __getitem__(self, index):
        return self._jobs[index]

    def __len__(self) -> int:
        return len(self._jobs)

    @classmethod
    def from_yaml(cls, path: str) -> "StaticJobCatalog":
        """
        Load postings from a YAML file.

        Expected shape:
            jobs:
              - id: job-001
                title: Java Developer
                industry: Internet
                required_skills: [Java, Spring]
                min_experience: 2
        """
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationException(f"Could not parse job catalog {path}: {e}") from e

        entries = data.get("jobs", []) if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise ConfigurationException(f"Job catalog {path} must contain a list of jobs")

        try:
            jobs = [JobPosting.from_dict(entry) for entry in entries]
        except InvalidRequestException as e:
            raise ConfigurationException(f"Invalid job in catalog {path}: {e}") from e

        logger.info(f"Loaded {len(jobs)} jobs from {path}")
        return cls(jobs)


def _sample_job(job_id: str, title: str, skills: Tuple[str, ...], min_exp: int, salary: float) -> JobPosting:
    return JobPosting(
        id=job_id,
        title=title,
        company="Example Tech Co.",
        industry="Internet",
        required_skills=skills,
        min_experience=min_exp,
        base_salary=salary,
        description=(
            f"Hiring a {title}. Must know {', '.join(skills)} "
            f"and have {min_exp}+ years of relevant experience"
        )
    )


SAMPLE_JOBS: Tuple[JobPosting, ...] = (
    _sample_job("job-001", "Java Developer", ("Java", "Spring", "MySQL", "Redis"), 2, 15000.0),
    _sample_job("job-002", "Senior Java Developer", ("Java", "Spring Boot", "MySQL", "Redis", "Docker"), 3, 20000.0),
    _sample_job("job-003", "Frontend Developer", ("JavaScript", "Vue", "React", "HTML"), 1, 12000.0),
    _sample_job("job-004", "Full Stack Developer", ("Java", "Spring", "Vue", "MySQL"), 2, 18000.0),
    _sample_job("job-005", "Backend Developer", ("Java", "Spring Boot", "MySQL", "Redis"), 2, 16000.0),
)


def sample_catalog() -> StaticJobCatalog:
    """Reference catalog of five internet-industry postings."""
    return StaticJobCatalog(SAMPLE_JOBS)
