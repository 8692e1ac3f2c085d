#!/usr/bin/env python3
"""
Text Similarity - Cosine similarity over sparse term vectors.

The profile side is the raw resume text; the job side is the description
followed by the space-joined required skills.
"""

from typing import Dict
import logging

import numpy as np

from job_matcher.models import JobPosting, Profile
from job_matcher.scorer.vectorizer import TextVectorizer

logger = logging.getLogger(__name__)


def cosine_similarity(vec_a: Dict[str, float], vec_b: Dict[str, float]) -> float:
    """
    Cosine similarity of two sparse vectors.

    The dot product runs over the shared tokens; the norms are taken over the
    full vectors.

    Returns:
        Similarity in [0.0, 1.0], or 0.0 if either vector is empty or zero
    """
    if not vec_a or not vec_b:
        return 0.0

    norm_a = float(np.linalg.norm(np.fromiter(vec_a.values(), dtype=np.float64)))
    norm_b = float(np.linalg.norm(np.fromiter(vec_b.values(), dtype=np.float64)))
    if norm_a == 0 or norm_b == 0:
        return 0.0

    shared = sorted(vec_a.keys() & vec_b.keys())
    if not shared:
        return 0.0

    a = np.array([vec_a[t] for t in shared], dtype=np.float64)
    b = np.array([vec_b[t] for t in shared], dtype=np.float64)
    similarity = float(np.dot(a, b)) / (norm_a * norm_b)

    return max(0.0, min(1.0, similarity))


def job_text(job: JobPosting) -> str:
    return f"{job.description} {' '.join(job.required_skills)}"


def text_similarity(profile: Profile, job: JobPosting, vectorizer: TextVectorizer) -> float:
    """Cosine similarity between the resume text and the job text."""
    profile_vector = vectorizer.vectorize(profile.raw_text)
    job_vector = vectorizer.vectorize(job_text(job))
    return cosine_similarity(profile_vector, job_vector)
