#!/usr/bin/env python3
"""
Matching Models - Data structures for profiles, postings and match results.

Profiles and postings are produced by upstream collaborators (resume
extraction, job catalog) and treated as immutable. Match results are built
fresh for every request.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from job_matcher.exceptions import InvalidRequestException


def _as_skill_tuple(skills: Optional[Iterable[str]], field_name: str) -> Tuple[str, ...]:
    if skills is None:
        return ()
    if isinstance(skills, str):
        raise InvalidRequestException(f"{field_name} must be a sequence of strings, not a string")
    return tuple(str(s) for s in skills)


def _first(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class Profile:
    """Candidate profile as delivered by the resume extractor."""
    skills: Tuple[str, ...] = ()
    raw_text: str = ""
    years_of_experience: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "skills", _as_skill_tuple(self.skills, "skills"))
        object.__setattr__(self, "raw_text", self.raw_text or "")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """Build a profile from the extractor payload (camelCase or snake_case keys)."""
        if not isinstance(data, dict):
            raise InvalidRequestException(f"Profile payload must be a mapping, got {type(data).__name__}")
        return cls(
            skills=_first(data, "skills", default=()),
            raw_text=_first(data, "rawText", "raw_text", default=""),
            years_of_experience=_first(data, "yearsOfExperience", "years_of_experience"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skills": list(self.skills),
            "raw_text": self.raw_text,
            "years_of_experience": self.years_of_experience,
        }


@dataclass(frozen=True)
class JobPosting:
    """A catalog job posting."""
    id: str
    title: str
    industry: str
    required_skills: Tuple[str, ...] = ()
    min_experience: Optional[int] = None
    description: str = ""
    base_salary: Optional[float] = None
    company: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "required_skills", _as_skill_tuple(self.required_skills, "required_skills")
        )
        object.__setattr__(self, "description", self.description or "")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobPosting":
        if not isinstance(data, dict):
            raise InvalidRequestException(f"Job payload must be a mapping, got {type(data).__name__}")
        try:
            return cls(
                id=str(data["id"]),
                title=data["title"],
                industry=data.get("industry") or "",
                required_skills=_first(data, "requiredSkills", "required_skills", default=()),
                min_experience=_first(data, "minExperience", "min_experience"),
                description=data.get("description") or "",
                base_salary=_first(data, "baseSalary", "base_salary"),
                company=data.get("company"),
            )
        except KeyError as e:
            raise InvalidRequestException(f"Job payload missing field {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["required_skills"] = list(self.required_skills)
        return data


@dataclass(frozen=True)
class AlgorithmScores:
    """Per-signal breakdown of an advanced-mode match, all in [0, 1]."""
    text_similarity: float
    weighted_overlap: float
    taxonomy_similarity: float
    ensemble_score: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class JobMatch:
    """Scored match of one profile against one job posting."""
    job: JobPosting
    score: float
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    reason: str = ""
    algorithm_scores: Optional[AlgorithmScores] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job": self.job.to_dict(),
            "score": self.score,
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "reason": self.reason,
            "algorithm_scores": self.algorithm_scores.to_dict() if self.algorithm_scores else None,
        }


@dataclass(frozen=True)
class MatchResult:
    """Ranked job matches for one profile, with a one-line summary."""
    profile: Profile
    job_matches: List[JobMatch]
    algorithm_label: str
    processing_time_ms: float
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "job_matches": [m.to_dict() for m in self.job_matches],
            "algorithm_label": self.algorithm_label,
            "processing_time_ms": self.processing_time_ms,
            "summary": self.summary,
        }
