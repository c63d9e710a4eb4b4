"""
Unit Tests for Pydantic Schemas.

Tests input validation for users and notes.
"""

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from webcalendar.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from webcalendar.backend.schemas.user import UserCreate, UserResponse


class TestUserCreate:
    """Tests for registration input."""

    def test_accepts_valid_input(self):
        data = UserCreate(email="a@x.com", password="p")
        assert data.email == "a@x.com"
        assert data.password == "p"

    def test_email_format_is_not_checked(self):
        data = UserCreate(email="alice", password="p")
        assert data.email == "alice"

    def test_accepts_empty_password(self):
        assert UserCreate(email="a@x.com", password="").password == ""

    def test_rejects_missing_password(self):
        with pytest.raises(ValidationError):
            UserCreate(email="a@x.com")

    def test_rejects_email_over_255_characters(self):
        with pytest.raises(ValidationError):
            UserCreate(email="a" * 250 + "@x.com", password="p")


class TestUserResponse:
    """Tests for user serialization."""

    def test_omits_password(self):
        user = SimpleNamespace(
            id=1, email="a@x.com", password="secret", created_at=datetime(2024, 1, 1)
        )

        dumped = UserResponse.model_validate(user).model_dump()

        assert "password" not in dumped
        assert dumped["email"] == "a@x.com"


class TestNoteCreate:
    """Tests for note creation input."""

    def test_parses_iso_date(self):
        data = NoteCreate(date="2024-01-01", content="hello")
        assert data.date == date(2024, 1, 1)

    def test_accepts_content_at_limit(self):
        data = NoteCreate(date=date(2024, 1, 1), content="x" * 2000)
        assert len(data.content) == 2000

    def test_rejects_content_over_limit(self):
        with pytest.raises(ValidationError):
            NoteCreate(date=date(2024, 1, 1), content="x" * 2001)

    def test_accepts_empty_content(self):
        assert NoteCreate(date=date(2024, 1, 1), content="").content == ""

    def test_rejects_missing_date(self):
        with pytest.raises(ValidationError):
            NoteCreate(content="hello")


class TestNoteUpdate:
    """Tests for partial note updates."""

    def test_dump_contains_only_set_fields(self):
        data = NoteUpdate(content="hello2")
        assert data.model_dump(exclude_unset=True) == {"content": "hello2"}


class TestNoteResponse:
    """Tests for note serialization."""

    def test_updated_at_may_be_none(self):
        note = SimpleNamespace(
            id=1,
            user_id=1,
            date=date(2024, 1, 1),
            content="hello",
            created_at=datetime(2024, 1, 1, 9, 0),
            updated_at=None,
        )

        response = NoteResponse.model_validate(note)

        assert response.updated_at is None
        assert response.date == date(2024, 1, 1)
