"""
Test infrastructure.

This module provides:
- Test utilities and fixtures
- Common assertions on result envelopes
"""

from .fixtures import *
from .utils import *

__all__ = [
    "create_test_settings",
    "create_test_app",
    "create_programming_error",
    "EnvelopeAssertions"
]
