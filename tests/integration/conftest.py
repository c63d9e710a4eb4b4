"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and services.
These fixtures build on the root conftest.py database fixtures.
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from webcalendar.backend.models import Note, User


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
async def user(db_session: AsyncSession) -> User:
    """Persist a single user and return it."""
    user = User(email="owner@example.com", password="secret")
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
async def user_with_notes(db_session: AsyncSession, user: User) -> User:
    """Persist two notes on different dates for the user fixture."""
    db_session.add_all([
        Note(user_id=user.id, date=date(2024, 3, 1), content="Dentist"),
        Note(user_id=user.id, date=date(2024, 3, 5), content="Pay rent"),
    ])
    await db_session.flush()
    return user
