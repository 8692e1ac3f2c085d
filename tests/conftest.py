"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from job_matcher.catalog import sample_catalog
from job_matcher.config_loader import MatchingConfig
from job_matcher.service import MatchingService
from tests import make_profile


@pytest.fixture
def matching_config():
    """Default engine configuration."""
    return MatchingConfig()


@pytest.fixture
def service(matching_config):
    """MatchingService over the built-in sample catalog."""
    return MatchingService(matching_config, sample_catalog())


@pytest.fixture
def java_profile():
    """Backend candidate with two years of experience."""
    return make_profile(
        skills=["Java", "Spring", "MySQL", "Redis"],
        raw_text="Backend engineer with Java Spring MySQL Redis experience building services",
        years=2
    )


@pytest.fixture
def frontend_profile():
    """Frontend candidate without recorded experience."""
    return make_profile(
        skills=["javascript", "Vue", "CSS"],
        raw_text="Frontend developer working with JavaScript Vue and CSS",
        years=None
    )
