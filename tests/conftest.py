"""
Pytest configuration for fintrack tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SITE_URL", "http://localhost:5173")


class MockSupabaseResponse:
    """Mock Supabase API response object."""
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    mock_client = MagicMock()
    return mock_client


@pytest.fixture
def make_response():
    """Factory for fake query responses: make_response([...rows])."""
    return MockSupabaseResponse
