#!/usr/bin/env python3
"""
Score Integrator - Basic and advanced ensemble formulas.

Both policies are pure functions of their inputs:

- basic:    skill_coverage * 0.6 + experience_fit * 0.4, capped at 1.0
- advanced: text_similarity * 0.4 + weighted_overlap * 0.35
            + taxonomy_similarity * 0.25
"""

from enum import Enum
from typing import Iterable, Union
import logging

from job_matcher.config_loader import AdvancedWeights, BasicWeights
from job_matcher.exceptions import InvalidPolicyException
from job_matcher.models import AlgorithmScores
from job_matcher.taxonomy import normalize_skill, unique_skills

logger = logging.getLogger(__name__)


class ScoringPolicy(str, Enum):
    """Selects which signals are combined into the ensemble score."""
    BASIC = "basic"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: Union[str, "ScoringPolicy"]) -> "ScoringPolicy":
        """Resolve a policy name, failing fast on anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(p.value for p in cls)
        raise InvalidPolicyException(f"Unknown scoring policy {value!r}; expected one of: {valid}")


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def skill_coverage(profile_skills: Iterable[str], required_skills: Iterable[str]) -> float:
    """
    Share of the job's required skills that the profile has.

    Returns:
        distinct profile skills present in the job / number of required skills,
        or 0.0 when either side is empty
    """
    required = list(required_skills)
    profile = unique_skills(profile_skills)
    if not required or not profile:
        return 0.0

    required_keys = {normalize_skill(s) for s in required}
    matched = sum(1 for s in profile if normalize_skill(s) in required_keys)
    return matched / len(required)


def integrate_basic(
    coverage: float,
    experience: float,
    weights: BasicWeights = None
) -> float:
    """Basic policy ensemble, never above 1.0."""
    w = weights or BasicWeights()
    score = w.skill_coverage * coverage + w.experience_fit * experience
    return _clamp01(score)


def integrate_advanced(
    text_similarity: float,
    weighted_overlap: float,
    taxonomy_similarity: float,
    weights: AdvancedWeights = None
) -> AlgorithmScores:
    """Advanced policy ensemble with the per-signal breakdown attached."""
    w = weights or AdvancedWeights()
    ensemble = (
        w.text_similarity * text_similarity +
        w.weighted_overlap * weighted_overlap +
        w.taxonomy_similarity * taxonomy_similarity
    )
    return AlgorithmScores(
        text_similarity=text_similarity,
        weighted_overlap=weighted_overlap,
        taxonomy_similarity=taxonomy_similarity,
        ensemble_score=_clamp01(ensemble)
    )
