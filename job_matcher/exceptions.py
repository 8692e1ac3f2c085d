#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.

Degenerate domain data (empty skill lists, missing experience, zero-norm
text) never raises; it resolves to documented fallback scores. The
exceptions below signal caller misuse and are raised at the service
boundary.
"""


class MatchingException(Exception):
    """Base exception for matching engine errors."""
    pass


class InvalidPolicyException(MatchingException):
    """Raised when a scoring policy name is not recognised."""
    pass


class InvalidRequestException(MatchingException):
    """Raised when a match request has an unsupported shape."""
    pass


class ConfigurationException(MatchingException):
    """Raised when the engine configuration cannot be loaded."""
    pass
