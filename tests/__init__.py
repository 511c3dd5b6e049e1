#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no database
    python -m pytest tests/ -v -m "not db"

Database tests run against an in-memory SQLite database, so no external
service is needed. Set TEST_DATABASE_URL to run them against PostgreSQL.
"""

import os

TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")


def get_test_db_url() -> str:
    """Get the database URL for DB tests."""
    return TEST_DB_URL
