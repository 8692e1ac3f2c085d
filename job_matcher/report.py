#!/usr/bin/env python3
"""
Match Report - Per-job explanation text and the result summary.
"""

from typing import List
import logging

from job_matcher.config_loader import ExplanationBands
from job_matcher.models import JobMatch, MatchResult, Profile
from job_matcher.scorer.integrator import ScoringPolicy

logger = logging.getLogger(__name__)

NO_MATCH_SUMMARY = "Summary: no matching jobs found"

ALGORITHM_LABELS = {
    ScoringPolicy.BASIC: "basic skill matching",
    ScoringPolicy.ADVANCED: "multi-algorithm ensemble (TF-IDF + weighted Jaccard + taxonomy)",
}


def explain(score: float, matched_count: int, bands: ExplanationBands = None) -> str:
    """
    Threshold-banded explanation of a match score.

    Bands (default thresholds): >= 0.8 highly matched, >= 0.6 well matched,
    >= 0.4 moderately matched, below that low match.
    """
    b = bands or ExplanationBands()
    percent = score * 100

    if score >= b.high:
        return f"highly matched ({percent:.1f}%), {matched_count} core skills in place"
    if score >= b.good:
        return f"well matched ({percent:.1f}%), {matched_count} main skills in place"
    if score >= b.moderate:
        return f"moderately matched ({percent:.1f}%), {matched_count} related skills in place"
    return f"low match, skill gap noted ({percent:.1f}%), {matched_count} skills matched"


class MatchReportBuilder:
    """Assemble a MatchResult from an already ranked list of job matches."""

    def __init__(self, policy: ScoringPolicy):
        self.policy = ScoringPolicy.parse(policy)

    @property
    def algorithm_label(self) -> str:
        return ALGORITHM_LABELS[self.policy]

    def summarize(self, matches: List[JobMatch]) -> str:
        """One-line summary built from the top-ranked match only."""
        if not matches:
            return NO_MATCH_SUMMARY

        best = matches[0]
        if self.policy is ScoringPolicy.BASIC or best.algorithm_scores is None:
            return f"Best match: {best.job.title}, basic match score: {best.score * 100:.1f}%"

        scores = best.algorithm_scores
        return (
            f"Recommended job: {best.job.title}, overall match: {best.score * 100:.1f}%, "
            f"breakdown: TF-IDF({scores.text_similarity * 100:.1f}%) "
            f"Jaccard({scores.weighted_overlap * 100:.1f}%) "
            f"Taxonomy({scores.taxonomy_similarity * 100:.1f}%)"
        )

    def build(self, profile: Profile, matches: List[JobMatch], processing_time_ms: float) -> MatchResult:
        return MatchResult(
            profile=profile,
            job_matches=list(matches),
            algorithm_label=self.algorithm_label,
            processing_time_ms=processing_time_ms,
            summary=self.summarize(matches)
        )
