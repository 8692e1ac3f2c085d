#!/usr/bin/env python3
"""
Taxonomy Similarity - Category overlap blended with experience fit.
"""

from typing import Iterable
import logging

from job_matcher.config_loader import ExperienceFitConfig, TaxonomyScoreWeights
from job_matcher.models import JobPosting, Profile
from job_matcher.scorer.experience import experience_fit
from job_matcher.taxonomy import SkillTaxonomy

logger = logging.getLogger(__name__)


def category_overlap(
    profile_skills: Iterable[str],
    required_skills: Iterable[str],
    taxonomy: SkillTaxonomy
) -> float:
    """
    Fraction of the job's skill categories also covered by the profile.

    Skills that belong to no category are ignored.

    Returns:
        |profile categories & job categories| / |job categories|, or 0.0 when
        no job skill resolves to a category
    """
    job_categories = taxonomy.categories_for(required_skills)
    if not job_categories:
        return 0.0

    profile_categories = taxonomy.categories_for(profile_skills)
    return len(profile_categories & job_categories) / len(job_categories)


def taxonomy_similarity(
    profile: Profile,
    job: JobPosting,
    taxonomy: SkillTaxonomy,
    weights: TaxonomyScoreWeights = None,
    experience_config: ExperienceFitConfig = None
) -> float:
    """Formula: category_overlap * 0.7 + experience_fit * 0.3, clamped to [0, 1]"""
    w = weights or TaxonomyScoreWeights()

    overlap = category_overlap(profile.skills, job.required_skills, taxonomy)
    fit = experience_fit(profile.years_of_experience, job.min_experience, experience_config)

    return max(0.0, min(1.0, w.category_overlap * overlap + w.experience_fit * fit))
