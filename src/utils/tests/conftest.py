"""
Shared setup for utils tests.
"""

# Set environment to test mode FIRST, before any imports
import os


def pytest_configure(config):
    """Pytest hook to configure test environment before any tests run."""
    os.environ["ENVIRONMENT"] = "test"
