#!/usr/bin/env python3
"""
Test suite for the skill taxonomy.
"""

import unittest

from job_matcher.config_loader import TaxonomyConfig
from job_matcher.taxonomy import SkillTaxonomy, normalize_skill, unique_skills


class TestSkillNormalization(unittest.TestCase):

    def test_normalize_is_case_insensitive(self):
        self.assertEqual(normalize_skill("Spring Boot"), normalize_skill("SPRING boot"))

    def test_unique_skills_keeps_first_spelling(self):
        self.assertEqual(unique_skills(["Java", "java", "Vue", "JAVA", "vue"]), ["Java", "Vue"])


class TestSkillTaxonomy(unittest.TestCase):
    """Test weight and category lookups."""

    def setUp(self):
        self.taxonomy = SkillTaxonomy.from_config(TaxonomyConfig())

    def test_known_weights(self):
        self.assertEqual(self.taxonomy.weight_of("Java"), 1.0)
        self.assertEqual(self.taxonomy.weight_of("spring boot"), 0.9)
        self.assertEqual(self.taxonomy.weight_of("LINUX"), 0.5)

    def test_default_weight(self):
        self.assertEqual(self.taxonomy.weight_of("COBOL"), 0.5)
        self.assertEqual(self.taxonomy.default_weight, 0.5)

    def test_categories(self):
        self.assertEqual(self.taxonomy.categories_of("react"), frozenset({"frontend"}))
        self.assertEqual(self.taxonomy.categories_of("Spring Boot"), frozenset())
        self.assertEqual(
            self.taxonomy.categories_for(["Java", "AWS", "Unknown"]),
            {"backend", "operations"}
        )
        self.assertEqual(self.taxonomy.category_names, ("backend", "frontend", "operations"))

    def test_skill_in_several_categories(self):
        taxonomy = SkillTaxonomy(
            skill_weights={},
            categories={"backend": ["Python"], "data": ["python", "SQL"]}
        )
        self.assertEqual(taxonomy.categories_of("Python"), frozenset({"backend", "data"}))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            self.taxonomy._weights["java"] = 0.0
        with self.assertRaises(TypeError):
            self.taxonomy._categories["java"] = frozenset()

    def test_source_config_changes_do_not_leak(self):
        weights = {"Java": 1.0}
        taxonomy = SkillTaxonomy(skill_weights=weights, categories={})
        weights["Java"] = 0.1
        self.assertEqual(taxonomy.weight_of("Java"), 1.0)


if __name__ == '__main__':
    unittest.main()
