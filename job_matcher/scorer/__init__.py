#!/usr/bin/env python3
"""
Scoring Module - Individual similarity signals and their integration.

- vectorizer.py: TextVectorizer (sparse L2-normalized term frequencies)
- similarity.py: cosine similarity and the resume-vs-job text signal
- overlap.py: weighted Jaccard over skill sets
- experience.py: experience fit
- taxonomy_score.py: category overlap blended with experience fit
- integrator.py: ScoringPolicy and the basic/advanced ensemble formulas
"""

from job_matcher.scorer.vectorizer import TextVectorizer
from job_matcher.scorer.similarity import cosine_similarity, text_similarity
from job_matcher.scorer.overlap import weighted_overlap
from job_matcher.scorer.experience import experience_fit
from job_matcher.scorer.taxonomy_score import category_overlap, taxonomy_similarity
from job_matcher.scorer.integrator import (
    ScoringPolicy, skill_coverage, integrate_basic, integrate_advanced
)

__all__ = [
    'TextVectorizer', 'cosine_similarity', 'text_similarity',
    'weighted_overlap', 'experience_fit',
    'category_overlap', 'taxonomy_similarity',
    'ScoringPolicy', 'skill_coverage', 'integrate_basic', 'integrate_advanced'
]
