import logging
import os
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from job_matcher.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


DEFAULT_SKILL_WEIGHTS: Dict[str, float] = {
    "Java": 1.0,
    "Spring": 0.9,
    "Spring Boot": 0.9,
    "MySQL": 0.8,
    "Redis": 0.7,
    "Python": 0.8,
    "JavaScript": 0.8,
    "Vue": 0.7,
    "React": 0.7,
    "Docker": 0.6,
    "Kubernetes": 0.6,
    "Linux": 0.5,
}

DEFAULT_SKILL_CATEGORIES: Dict[str, List[str]] = {
    "backend": ["Java", "Spring", "MySQL", "Redis", "Python"],
    "frontend": ["JavaScript", "Vue", "React", "HTML", "CSS"],
    "operations": ["Docker", "Kubernetes", "Linux", "AWS"],
}


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TaxonomyConfig(_FrozenModel):
    """Skill weight table and skill category tree."""
    skill_weights: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_SKILL_WEIGHTS))
    default_skill_weight: float = 0.5  # Weight for skills absent from the table
    categories: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_SKILL_CATEGORIES.items()}
    )


class VectorizerConfig(_FrozenModel):
    min_token_length: int = 3  # Tokens of length <= 2 are discarded


class ExperienceFitConfig(_FrozenModel):
    """Fallback fit values when experience data is missing."""
    unknown_experience_fit: float = 0.3  # Profile has no recorded years
    no_minimum_fit: float = 0.5  # Job specifies no minimum


class TaxonomyScoreWeights(_FrozenModel):
    category_overlap: float = Field(default=0.7, ge=0.0, le=1.0)
    experience_fit: float = Field(default=0.3, ge=0.0, le=1.0)


class AdvancedWeights(_FrozenModel):
    """
    Ensemble weights for the advanced policy.

    These are fixed values; nothing in the engine adjusts them at runtime.
    """
    text_similarity: float = Field(default=0.4, ge=0.0, le=1.0)
    weighted_overlap: float = Field(default=0.35, ge=0.0, le=1.0)
    taxonomy_similarity: float = Field(default=0.25, ge=0.0, le=1.0)


class BasicWeights(_FrozenModel):
    skill_coverage: float = Field(default=0.6, ge=0.0, le=1.0)
    experience_fit: float = Field(default=0.4, ge=0.0, le=1.0)


class ExplanationBands(_FrozenModel):
    """Lower bounds of the explanation bands, highest first."""
    high: float = 0.8
    good: float = 0.6
    moderate: float = 0.4


class RankerConfig(_FrozenModel):
    max_workers: int = Field(default=1, ge=1)  # > 1 scores jobs on a thread pool


class MatchingConfig(_FrozenModel):
    """
    Top-level matching engine configuration.

    Built once at process start and passed by reference to every scoring
    component.
    """
    taxonomy: TaxonomyConfig = Field(default_factory=TaxonomyConfig)
    vectorizer: VectorizerConfig = Field(default_factory=VectorizerConfig)
    experience: ExperienceFitConfig = Field(default_factory=ExperienceFitConfig)
    taxonomy_score: TaxonomyScoreWeights = Field(default_factory=TaxonomyScoreWeights)
    advanced: AdvancedWeights = Field(default_factory=AdvancedWeights)
    basic: BasicWeights = Field(default_factory=BasicWeights)
    explanation: ExplanationBands = Field(default_factory=ExplanationBands)
    ranker: RankerConfig = Field(default_factory=RankerConfig)


def _default_config_path() -> str:
    base_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_dir, "..", "config.yaml")


def load_config(config_path: Optional[str] = "config.yaml") -> MatchingConfig:
    """
    Load the matching configuration from YAML.

    Falls back to the repository-level config.yaml when the given path does
    not exist, and to built-in defaults when neither exists.

    Environment overrides:
        JOB_MATCHER_MAX_WORKERS: ranker.max_workers
    """
    if not config_path or not os.path.exists(config_path):
        config_path = _default_config_path()

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationException(f"Could not parse {config_path}: {e}") from e
    else:
        logger.warning("No config file found, using built-in matching defaults")

    if not isinstance(data, dict):
        raise ConfigurationException(f"Config root must be a mapping, got {type(data).__name__}")

    # Allow env var override for worker count
    env_workers = os.environ.get("JOB_MATCHER_MAX_WORKERS")
    if env_workers:
        if not data.get("ranker"):
            data["ranker"] = {}
        data["ranker"]["max_workers"] = env_workers

    try:
        return MatchingConfig(**data)
    except ValidationError as e:
        raise ConfigurationException(f"Invalid matching configuration: {e}") from e
