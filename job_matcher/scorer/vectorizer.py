#!/usr/bin/env python3
"""
Text Vectorizer - Sparse L2-normalized term-frequency vectors.
"""

from typing import Dict
import math

from job_matcher.config_loader import VectorizerConfig


class TextVectorizer:
    """Turn free text into a sparse term-frequency vector with unit length."""

    def __init__(self, config: VectorizerConfig = None):
        self.min_token_length = (config or VectorizerConfig()).min_token_length

    def vectorize(self, text: str) -> Dict[str, float]:
        """
        Vectorize text.

        Lower-cases the text, splits on whitespace, drops tokens shorter than
        min_token_length and divides raw counts by the Euclidean norm of the
        count vector.

        Returns:
            token -> weight mapping; empty when no token survives filtering
        """
        counts: Dict[str, float] = {}
        for token in (text or "").lower().split():
            if len(token) >= self.min_token_length:
                counts[token] = counts.get(token, 0.0) + 1.0

        norm = math.sqrt(sum(c * c for c in counts.values()))
        if norm == 0:
            return {}

        return {token: count / norm for token, count in counts.items()}
