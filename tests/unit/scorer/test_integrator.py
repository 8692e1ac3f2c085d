#!/usr/bin/env python3
"""
Test suite for scoring policies and ensemble integration.
"""

import unittest

from job_matcher.config_loader import AdvancedWeights, BasicWeights
from job_matcher.exceptions import InvalidPolicyException
from job_matcher.scorer.integrator import (
    ScoringPolicy, integrate_advanced, integrate_basic, skill_coverage
)


class TestScoringPolicy(unittest.TestCase):
    """Test policy resolution."""

    def test_parse_names(self):
        self.assertIs(ScoringPolicy.parse("basic"), ScoringPolicy.BASIC)
        self.assertIs(ScoringPolicy.parse("ADVANCED"), ScoringPolicy.ADVANCED)
        self.assertIs(ScoringPolicy.parse(" advanced "), ScoringPolicy.ADVANCED)
        self.assertIs(ScoringPolicy.parse(ScoringPolicy.BASIC), ScoringPolicy.BASIC)

    def test_unknown_policy_fails_fast(self):
        with self.assertRaises(InvalidPolicyException) as ctx:
            ScoringPolicy.parse("semantic")
        self.assertIn("semantic", str(ctx.exception))

    def test_non_string_policy(self):
        with self.assertRaises(InvalidPolicyException):
            ScoringPolicy.parse(None)
        with self.assertRaises(InvalidPolicyException):
            ScoringPolicy.parse(2)


class TestSkillCoverage(unittest.TestCase):
    """Test basic-policy skill coverage."""

    def test_half_covered(self):
        self.assertEqual(skill_coverage(["Java", "Spring"], ["Java", "Spring", "MySQL", "Redis"]), 0.5)

    def test_case_insensitive(self):
        self.assertEqual(skill_coverage(["JAVA"], ["java"]), 1.0)

    def test_duplicate_profile_skills_counted_once(self):
        self.assertEqual(skill_coverage(["java", "Java"], ["Java"]), 1.0)

    def test_empty_sides(self):
        self.assertEqual(skill_coverage([], ["Java"]), 0.0)
        self.assertEqual(skill_coverage(["Java"], []), 0.0)


class TestIntegration(unittest.TestCase):
    """Test ensemble formulas."""

    def test_basic_formula(self):
        # 0.6 * 0.5 + 0.4 * 0.3
        self.assertAlmostEqual(integrate_basic(0.5, 0.3), 0.42)

    def test_basic_perfect(self):
        self.assertEqual(integrate_basic(1.0, 1.0), 1.0)

    def test_basic_is_capped(self):
        weights = BasicWeights(skill_coverage=0.9, experience_fit=0.9)
        self.assertEqual(integrate_basic(1.0, 1.0, weights), 1.0)

    def test_advanced_formula(self):
        scores = integrate_advanced(0.5, 0.2, 0.4)

        # 0.4 * 0.5 + 0.35 * 0.2 + 0.25 * 0.4
        self.assertAlmostEqual(scores.ensemble_score, 0.37)
        self.assertEqual(scores.text_similarity, 0.5)
        self.assertEqual(scores.weighted_overlap, 0.2)
        self.assertEqual(scores.taxonomy_similarity, 0.4)

    def test_advanced_bounds(self):
        self.assertAlmostEqual(integrate_advanced(1.0, 1.0, 1.0).ensemble_score, 1.0)
        self.assertEqual(integrate_advanced(0.0, 0.0, 0.0).ensemble_score, 0.0)

    def test_advanced_custom_weights(self):
        weights = AdvancedWeights(text_similarity=0.0, weighted_overlap=1.0, taxonomy_similarity=0.0)
        self.assertEqual(integrate_advanced(0.9, 0.25, 0.7, weights).ensemble_score, 0.25)


if __name__ == '__main__':
    unittest.main()
