"""Resume-to-job matching engine: multi-signal scoring and ranking."""
from job_matcher.config_loader import MatchingConfig, load_config
from job_matcher.models import (
    Profile, JobPosting, AlgorithmScores, JobMatch, MatchResult
)
from job_matcher.taxonomy import SkillTaxonomy, normalize_skill
from job_matcher.catalog import StaticJobCatalog, sample_catalog
from job_matcher.scorer.integrator import ScoringPolicy
from job_matcher.ranker import Ranker
from job_matcher.report import MatchReportBuilder
from job_matcher.service import MatchingService
from job_matcher.exceptions import (
    MatchingException, InvalidPolicyException, InvalidRequestException,
    ConfigurationException
)

__all__ = [
    'MatchingConfig', 'load_config',
    'Profile', 'JobPosting', 'AlgorithmScores', 'JobMatch', 'MatchResult',
    'SkillTaxonomy', 'normalize_skill', 'StaticJobCatalog', 'sample_catalog',
    'ScoringPolicy', 'Ranker', 'MatchReportBuilder', 'MatchingService',
    'MatchingException', 'InvalidPolicyException', 'InvalidRequestException',
    'ConfigurationException'
]
