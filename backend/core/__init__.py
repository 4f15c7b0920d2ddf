"""
Core module containing the error boundary.

This module provides:
- Result code registry
- Failure taxonomy and translation
- Error classification and message extraction
- Exception handling middleware
"""
