#!/usr/bin/env python3
"""
Skill Taxonomy - Read-only skill weights and skill categories.

All skill identity comparisons in the engine go through normalize_skill(),
so the weight table, the category tree and the skill matching logic agree
on what "the same skill" means.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set
import logging

from job_matcher.config_loader import TaxonomyConfig

logger = logging.getLogger(__name__)


def normalize_skill(skill: str) -> str:
    """Canonical identity of a skill name (case-insensitive)."""
    return skill.lower()


def unique_skills(skills: Iterable[str]) -> List[str]:
    """Drop case-insensitive duplicates, keeping the first spelling and order."""
    seen: Set[str] = set()
    result = []
    for skill in skills:
        key = normalize_skill(skill)
        if key not in seen:
            seen.add(key)
            result.append(skill)
    return result


class SkillTaxonomy:
    """
    Immutable lookup tables built from TaxonomyConfig.

    - weight_of(skill): importance weight, default_weight for unknown skills
    - categories_of(skill): categories a skill belongs to (possibly none)
    """

    def __init__(
        self,
        skill_weights: Mapping[str, float],
        categories: Mapping[str, Iterable[str]],
        default_weight: float = 0.5
    ):
        self._weights: Mapping[str, float] = MappingProxyType(
            {normalize_skill(k): float(v) for k, v in skill_weights.items()}
        )

        skill_to_categories: Dict[str, Set[str]] = {}
        for category, members in categories.items():
            for skill in members:
                skill_to_categories.setdefault(normalize_skill(skill), set()).add(category)
        self._categories: Mapping[str, FrozenSet[str]] = MappingProxyType(
            {k: frozenset(v) for k, v in skill_to_categories.items()}
        )
        self._category_names = tuple(categories.keys())
        self._default_weight = float(default_weight)

        logger.debug(
            f"Skill taxonomy loaded: {len(self._weights)} weighted skills, "
            f"{len(self._category_names)} categories"
        )

    @classmethod
    def from_config(cls, config: TaxonomyConfig) -> "SkillTaxonomy":
        return cls(
            skill_weights=config.skill_weights,
            categories=config.categories,
            default_weight=config.default_skill_weight
        )

    @property
    def default_weight(self) -> float:
        return self._default_weight

    @property
    def category_names(self) -> tuple:
        return self._category_names

    def weight_of(self, skill: str) -> float:
        return self._weights.get(normalize_skill(skill), self._default_weight)

    def categories_of(self, skill: str) -> FrozenSet[str]:
        return self._categories.get(normalize_skill(skill), frozenset())

    def categories_for(self, skills: Iterable[str]) -> Set[str]:
        """Union of the categories of all given skills."""
        result: Set[str] = set()
        for skill in skills:
            result |= self.categories_of(skill)
        return result
