"""Shared fixtures for the journal server tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

import pytest

from journal_server.services.journals import JournalStore
from journal_server.services.summary import JournalEntry
from journal_server.services.users import UserService, UserStore

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_entry(
    mood: str = "happy",
    description: str = "A quiet day.",
    *,
    title: str = "Entry",
    day: int = 0,
) -> JournalEntry:
    return JournalEntry(
        title=title,
        mood=mood,
        description=description,
        created_at=BASE_TIME + timedelta(days=day),
    )


def garden_entries() -> List[JournalEntry]:
    """Three happy entries (mixed case) followed by one sad one, a day apart."""
    return [
        make_entry("Happy", "Morning walk in the garden, feeling grateful.", title="Walk", day=0),
        make_entry("happy", "Garden work again, planted tomatoes.", title="Planting", day=1),
        make_entry("HAPPY", "Friends visited the garden today.", title="Visitors", day=2),
        make_entry("sad", "Rainy evening, missed my friends.", title="Rain", day=3),
    ]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "journal.db"


@pytest.fixture
def journal_store(db_path: Path) -> JournalStore:
    return JournalStore(db_path)


@pytest.fixture
def user_store(db_path: Path) -> UserStore:
    return UserStore(db_path)


@pytest.fixture
def user_service(user_store: UserStore) -> UserService:
    return UserService(user_store)
