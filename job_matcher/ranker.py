#!/usr/bin/env python3
"""
Ranker - Filter, score and order a job catalog for one profile.

Scoring one job is independent of every other job, so the per-job step can
run on a thread pool. Results are collected in catalog order and sorted
once, after every job has been scored.
"""

from collections.abc import Sequence as SequenceABC
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple
import logging

from job_matcher.config_loader import MatchingConfig
from job_matcher.exceptions import InvalidRequestException
from job_matcher.models import JobMatch, JobPosting, Profile
from job_matcher.report import explain
from job_matcher.scorer.experience import experience_fit
from job_matcher.scorer.integrator import (
    ScoringPolicy, integrate_advanced, integrate_basic, skill_coverage
)
from job_matcher.scorer.overlap import weighted_overlap
from job_matcher.scorer.similarity import text_similarity
from job_matcher.scorer.taxonomy_score import taxonomy_similarity
from job_matcher.scorer.vectorizer import TextVectorizer
from job_matcher.taxonomy import SkillTaxonomy, normalize_skill, unique_skills

logger = logging.getLogger(__name__)


def partition_skills(
    profile_skills: Sequence[str],
    required_skills: Sequence[str]
) -> Tuple[List[str], List[str]]:
    """
    Split the job's required skills into (matched, missing).

    Both lists keep the job's spelling and order, drop case-insensitive
    duplicates and together cover every required skill exactly once.
    """
    profile_keys = {normalize_skill(s) for s in profile_skills}
    matched, missing = [], []
    for skill in unique_skills(required_skills):
        if normalize_skill(skill) in profile_keys:
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing


def filter_by_industry(jobs: Sequence[JobPosting], industry: Optional[str]) -> List[JobPosting]:
    """Keep jobs whose industry equals the filter case-insensitively; None keeps all."""
    if industry is None:
        return list(jobs)
    wanted = industry.lower()
    return [job for job in jobs if (job.industry or "").lower() == wanted]


class Ranker:
    """
    Score every job in a catalog under one ScoringPolicy and sort by score.

    Holds only read-only collaborators (taxonomy, config, vectorizer), so a
    single instance can serve concurrent requests.
    """

    def __init__(self, taxonomy: SkillTaxonomy, config: MatchingConfig = None):
        self.config = config or MatchingConfig()
        self.taxonomy = taxonomy
        self.vectorizer = TextVectorizer(self.config.vectorizer)

    def score_job(self, profile: Profile, job: JobPosting, policy: ScoringPolicy) -> JobMatch:
        """Build the JobMatch for one (profile, job) pair."""
        cfg = self.config
        matched, missing = partition_skills(profile.skills, job.required_skills)

        if policy is ScoringPolicy.ADVANCED:
            scores = integrate_advanced(
                text_similarity=text_similarity(profile, job, self.vectorizer),
                weighted_overlap=weighted_overlap(profile.skills, job.required_skills, self.taxonomy),
                taxonomy_similarity=taxonomy_similarity(
                    profile, job, self.taxonomy, cfg.taxonomy_score, cfg.experience
                ),
                weights=cfg.advanced
            )
            score = scores.ensemble_score
        else:
            scores = None
            score = integrate_basic(
                coverage=skill_coverage(profile.skills, job.required_skills),
                experience=experience_fit(profile.years_of_experience, job.min_experience, cfg.experience),
                weights=cfg.basic
            )

        logger.debug(f"Job {job.id} ({job.title}): policy={policy.value}, score={score:.3f}")

        return JobMatch(
            job=job,
            score=score,
            matched_skills=matched,
            missing_skills=missing,
            reason=explain(score, len(matched), cfg.explanation),
            algorithm_scores=scores
        )

    def rank(
        self,
        profile: Profile,
        jobs: Sequence[JobPosting],
        industry: Optional[str] = None,
        policy: ScoringPolicy = ScoringPolicy.ADVANCED
    ) -> List[JobMatch]:
        """
        Rank jobs for a profile.

        Args:
            profile: Candidate profile
            jobs: Job catalog (never mutated)
            industry: Optional case-insensitive industry filter
            policy: Scoring policy (name or ScoringPolicy)

        Returns:
            JobMatch list sorted by score descending; ties keep catalog order.
            No job is dropped after scoring.
        """
        policy = ScoringPolicy.parse(policy)
        if not isinstance(profile, Profile):
            raise InvalidRequestException(f"profile must be a Profile, got {type(profile).__name__}")
        if not isinstance(jobs, SequenceABC) or isinstance(jobs, (str, bytes)):
            raise InvalidRequestException(f"jobs must be a sequence of JobPosting, got {type(jobs).__name__}")
        for job in jobs:
            if not isinstance(job, JobPosting):
                raise InvalidRequestException(f"jobs must contain JobPosting items, got {type(job).__name__}")
        if industry is not None and not isinstance(industry, str):
            raise InvalidRequestException(f"industry must be a string or None, got {type(industry).__name__}")

        relevant = filter_by_industry(jobs, industry)
        workers = self.config.ranker.max_workers

        if workers > 1 and len(relevant) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                matches = list(executor.map(lambda job: self.score_job(profile, job, policy), relevant))
        else:
            matches = [self.score_job(profile, job, policy) for job in relevant]

        # Stable: equal scores keep catalog order
        matches.sort(key=lambda m: m.score, reverse=True)

        logger.debug(f"Ranked {len(matches)} of {len(jobs)} jobs (industry={industry!r}, workers={workers})")
        return matches
