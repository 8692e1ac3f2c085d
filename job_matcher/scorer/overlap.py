#!/usr/bin/env python3
"""
Weighted Overlap - Weighted Jaccard over skill sets.
"""

from typing import Iterable
import logging

from job_matcher.taxonomy import SkillTaxonomy, normalize_skill, unique_skills

logger = logging.getLogger(__name__)


def weighted_overlap(
    profile_skills: Iterable[str],
    required_skills: Iterable[str],
    taxonomy: SkillTaxonomy
) -> float:
    """
    Weighted Jaccard similarity between profile skills and job skills.

    Formula:
        sum(weight(s) for s in P & J) / sum(weight(s) for s in P | J)

    Membership is case-insensitive. Skills missing from the weight table use
    the taxonomy's default weight.

    Returns:
        Score in [0.0, 1.0]; 0.0 when the job lists no skills or the union
        carries no weight
    """
    job_skills = unique_skills(required_skills)
    if not job_skills:
        return 0.0

    profile_list = unique_skills(profile_skills)
    job_keys = {normalize_skill(s) for s in job_skills}
    profile_keys = {normalize_skill(s) for s in profile_list}

    intersection = [s for s in job_skills if normalize_skill(s) in profile_keys]
    union = job_skills + [s for s in profile_list if normalize_skill(s) not in job_keys]

    weighted_intersection = sum(taxonomy.weight_of(s) for s in intersection)
    weighted_union = sum(taxonomy.weight_of(s) for s in union)

    if weighted_union <= 0:
        return 0.0
    return min(1.0, weighted_intersection / weighted_union)
