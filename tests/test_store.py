"""
Tests for the in-memory credential store.
"""

import pytest

from core.state import CredentialStore
from models.user import UserRecord


def _record(username: str, password_hash: str = "hash") -> UserRecord:
    return UserRecord(username=username, password_hash=password_hash)


class TestCredentialStore:
    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self):
        store = CredentialStore()
        assert await store.find("nobody") is None

    @pytest.mark.asyncio
    async def test_add_then_find(self):
        store = CredentialStore()
        await store.add(_record("alice"))
        found = await store.find("alice")
        assert found is not None
        assert found.username == "alice"
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_lookup_is_exact_match(self):
        store = CredentialStore()
        await store.add(_record("Alice"))
        assert await store.find("alice") is None
        assert await store.find("Alice ") is None

    @pytest.mark.asyncio
    async def test_duplicates_coexist_first_wins(self):
        store = CredentialStore()
        await store.add(_record("bob", "first"))
        await store.add(_record("bob", "second"))
        assert len(store) == 2
        found = await store.find("bob")
        assert found.password_hash == "first"

    @pytest.mark.asyncio
    async def test_records_is_a_snapshot(self):
        store = CredentialStore()
        await store.add(_record("carol"))
        snapshot = store.records()
        snapshot.clear()
        assert len(store) == 1
