#!/usr/bin/env python3
"""
Experience Fit - Candidate years vs job minimum.
"""

from typing import Optional

from job_matcher.config_loader import ExperienceFitConfig


def experience_fit(
    years_of_experience: Optional[int],
    min_experience: Optional[int],
    config: ExperienceFitConfig = None
) -> float:
    """
    Score how well the candidate's experience meets the job minimum.

    - no recorded experience: unknown_experience_fit (0.3)
    - job has no minimum: no_minimum_fit (0.5)
    - minimum of zero or less, or years >= minimum: 1.0
    - otherwise: years / minimum (linear partial credit)
    """
    cfg = config or ExperienceFitConfig()

    if years_of_experience is None:
        return cfg.unknown_experience_fit
    if min_experience is None:
        return cfg.no_minimum_fit
    if min_experience <= 0 or years_of_experience >= min_experience:
        return 1.0
    return max(0.0, min(1.0, years_of_experience / min_experience))
