#!/usr/bin/env python3
"""
Matching Service - Entry points for ranking a profile against the job catalog.

- basic_match: skill coverage + experience fit
- advanced_match: text similarity + weighted overlap + taxonomy similarity
- compare_match: the profile with both policies side by side

The service owns no per-request state; the taxonomy and configuration are
built once and shared read-only by every call.
"""

from typing import Any, Dict, Optional, Union
import logging
import time

from job_matcher.catalog import StaticJobCatalog, sample_catalog
from job_matcher.config_loader import MatchingConfig
from job_matcher.models import MatchResult, Profile
from job_matcher.ranker import Ranker
from job_matcher.report import ALGORITHM_LABELS, MatchReportBuilder
from job_matcher.scorer.integrator import ScoringPolicy
from job_matcher.taxonomy import SkillTaxonomy

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Rank a candidate profile against a fixed job catalog.

    Usage:
        service = MatchingService(load_config(), sample_catalog())
        result = service.advanced_match(profile, industry="Internet")
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        catalog: Optional[StaticJobCatalog] = None
    ):
        self.config = config or MatchingConfig()
        self.catalog = catalog if catalog is not None else sample_catalog()
        self.taxonomy = SkillTaxonomy.from_config(self.config.taxonomy)
        self.ranker = Ranker(self.taxonomy, self.config)

    def match(
        self,
        profile: Profile,
        industry: Optional[str] = None,
        policy: Union[str, ScoringPolicy] = ScoringPolicy.ADVANCED
    ) -> MatchResult:
        """
        Rank the catalog for a profile under the named policy.

        Raises:
            InvalidPolicyException: policy is not "basic" or "advanced"
            InvalidRequestException: profile or industry has the wrong shape
        """
        policy = ScoringPolicy.parse(policy)
        start = time.perf_counter()

        try:
            matches = self.ranker.rank(profile, self.catalog.jobs(), industry, policy)
        except Exception:
            logger.error(f"{policy.value} match failed (industry={industry!r})", exc_info=True)
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        result = MatchReportBuilder(policy).build(profile, matches, elapsed_ms)

        logger.info(
            f"{policy.value.capitalize()} match complete in {elapsed_ms:.1f}ms, "
            f"{len(matches)} jobs ranked (industry={industry!r})"
        )
        return result

    def basic_match(self, profile: Profile, industry: Optional[str] = None) -> MatchResult:
        return self.match(profile, industry, ScoringPolicy.BASIC)

    def advanced_match(self, profile: Profile, industry: Optional[str] = None) -> MatchResult:
        return self.match(profile, industry, ScoringPolicy.ADVANCED)

    def compare_match(
        self,
        profile: Profile,
        industry: Optional[str] = None
    ) -> Dict[str, Union[Profile, MatchResult]]:
        """Run both policies for the same profile and filter; the profile is echoed back."""
        return {
            "profile": profile,
            "basic": self.basic_match(profile, industry),
            "advanced": self.advanced_match(profile, industry),
        }

    def describe_algorithms(self) -> Dict[str, Dict[str, Any]]:
        """Describe each policy with its signals and configured weights."""
        cfg = self.config
        return {
            ScoringPolicy.BASIC.value: {
                "name": ALGORITHM_LABELS[ScoringPolicy.BASIC],
                "description": "Skill coverage and experience fit",
                "features": ["skill coverage", "experience fit"],
                "weights": cfg.basic.model_dump(),
            },
            ScoringPolicy.ADVANCED.value: {
                "name": ALGORITHM_LABELS[ScoringPolicy.ADVANCED],
                "description": (
                    "Cosine text similarity, weighted Jaccard skill overlap and "
                    "taxonomy category overlap with experience fit"
                ),
                "features": [
                    "TF-IDF text similarity",
                    "weighted Jaccard skill overlap",
                    "taxonomy category matching",
                ],
                "weights": cfg.advanced.model_dump(),
                "taxonomy_weights": cfg.taxonomy_score.model_dump(),
            },
        }
