"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from database.database import create_db_engine, create_session_factory
from database.models import Base
from tests import get_test_db_url


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="function")
def db_engine():
    """Engine with freshly created tables, dropped after the test."""
    engine = create_db_engine(get_test_db_url())
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Create a fresh database session for each test."""
    session = session_factory()

    yield session

    session.rollback()
    session.close()
