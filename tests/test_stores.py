"""Tests for the SQLite-backed journal and user stores."""

import sqlite3

import pytest

from journal_server.services import StoreError, ValidationError
from journal_server.services.journals import JournalStore
from journal_server.services.users import hash_password, verify_password


@pytest.fixture
def owner(user_service):
    return user_service.register("writer@example.com", "s3cret")


class TestJournalStore:
    def test_insert_and_list_in_creation_order(self, journal_store, owner):
        first = journal_store.insert(user_id=owner.id, title="One", mood="Calm", description="first")
        second = journal_store.insert(user_id=owner.id, title="Two", mood="sad", description="second")

        records = journal_store.list_for_user(owner.id)
        assert [r.id for r in records] == [first.id, second.id]
        assert records[0].created_at.tzinfo is not None

        entries = journal_store.fetch_entries(owner.id)
        assert [(e.title, e.mood, e.description) for e in entries] == [
            ("One", "Calm", "first"),
            ("Two", "sad", "second"),
        ]

    def test_entries_are_scoped_to_owner(self, journal_store, user_service, owner):
        other = user_service.register("other@example.com", "pw")
        journal_store.insert(user_id=owner.id, title="Mine", mood="ok", description="x")

        assert journal_store.fetch_entries(other.id) == []

    def test_unknown_user_rejected(self, journal_store):
        with pytest.raises(ValidationError):
            journal_store.insert(user_id=999, title="t", mood="m", description="d")

    def test_update_and_delete(self, journal_store, owner):
        record = journal_store.insert(user_id=owner.id, title="Old", mood="meh", description="d")

        updated = journal_store.update(record.id, {"title": "New", "mood": "good"})
        assert updated.title == "New"
        assert updated.mood == "good"
        assert updated.created_at == record.created_at

        assert journal_store.update(12345, {"title": "nope"}) is None
        assert journal_store.delete(record.id) is True
        assert journal_store.fetch_one(record.id) is None
        assert journal_store.delete(record.id) is False

    def test_schema_shared_across_store_instances(self, db_path, owner):
        reopened = JournalStore(db_path)
        reopened.insert(user_id=owner.id, title="t", mood="m", description="d")

        assert len(reopened.list_for_user(owner.id)) == 1

    def test_sqlite_failures_surface_as_store_error(self, journal_store, monkeypatch):
        def broken_connect():
            raise sqlite3.OperationalError("disk I/O error")

        monkeypatch.setattr(journal_store, "_connect", broken_connect)

        with pytest.raises(StoreError):
            journal_store.fetch_entries(1)


class TestUsers:
    def test_register_then_login(self, user_service):
        created = user_service.register("Someone@Example.com ", "pw123")
        logged_in = user_service.login("someone@example.com", "pw123")

        assert created.id == logged_in.id
        assert created.email == "someone@example.com"

    def test_duplicate_registration_rejected(self, user_service):
        user_service.register("a@example.com", "pw")

        with pytest.raises(ValidationError, match="User already exists"):
            user_service.register("a@example.com", "other")

    def test_login_errors(self, user_service):
        user_service.register("b@example.com", "right")

        with pytest.raises(ValidationError, match="User not found"):
            user_service.login("nobody@example.com", "right")
        with pytest.raises(ValidationError, match="Invalid password"):
            user_service.login("b@example.com", "wrong")

    def test_passwords_are_not_stored_in_plaintext(self, user_service, db_path):
        user_service.register("c@example.com", "plain-text-secret")

        with sqlite3.connect(db_path) as conn:
            stored = conn.execute("SELECT password_hash FROM user").fetchone()[0]
        assert "plain-text-secret" not in stored
        assert verify_password("plain-text-secret", stored)

    def test_hash_is_salted(self):
        first = hash_password("same", iterations=1000)
        second = hash_password("same", iterations=1000)

        assert first != second
        assert verify_password("same", first)
        assert not verify_password("different", first)
        assert not verify_password("same", "garbage")
