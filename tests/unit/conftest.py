"""Unit test fixtures.

Configuration helpers live in tests/conftest.py.
"""

from tests.conftest import STAGING_BASE_URL, VALID_API_KEY, run_cmd

__all__ = ["STAGING_BASE_URL", "VALID_API_KEY", "run_cmd"]
