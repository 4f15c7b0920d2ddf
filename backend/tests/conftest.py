"""
Pytest configuration: test environment variables are set before any app import.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
