"""
Tests for registration and login in the credential service.
"""

import pytest

from utils.errors import InvalidCredentialsError, InvalidPasswordError, UserNotFoundError


class TestRegister:
    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, service, store):
        record = await service.register("alice", "hunter2")
        assert record.username == "alice"
        assert record.password_hash != "hunter2"
        assert store.records() == [record]

    @pytest.mark.asyncio
    async def test_accepts_empty_username(self, service, store):
        await service.register("", "pw")
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_nul_byte_password_rejected_without_storing(self, service, store):
        with pytest.raises(InvalidPasswordError):
            await service.register("x", "a\x00b")
        assert len(store) == 0


class TestLogin:
    @pytest.mark.asyncio
    async def test_register_then_login(self, service, token_gate):
        await service.register("alice", "hunter2")
        token = await service.login("alice", "hunter2")
        assert token_gate.validate(token) == "alice"

    @pytest.mark.asyncio
    async def test_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            await service.login("ghost", "whatever")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service):
        await service.register("alice", "hunter2")
        with pytest.raises(InvalidCredentialsError):
            await service.login("alice", "wrong")

    @pytest.mark.asyncio
    async def test_duplicate_username_first_record_wins(self, service, store):
        await service.register("bob", "first")
        await service.register("bob", "second")
        assert len(store) == 2

        assert await service.login("bob", "first")
        with pytest.raises(InvalidCredentialsError):
            await service.login("bob", "second")

    @pytest.mark.asyncio
    async def test_token_not_logged(self, service, caplog):
        await service.register("alice", "hunter2")
        with caplog.at_level("DEBUG"):
            token = await service.login("alice", "hunter2")
        assert token not in caplog.text
        assert "alice" in caplog.text


class TestBootstrap:
    @pytest.mark.asyncio
    async def test_preloads_demo_account(self, service, store):
        await service.bootstrap()
        assert [r.username for r in store.records()] == ["nasyira"]
        assert await service.login("nasyira", "12345678")

    @pytest.mark.asyncio
    async def test_skipped_without_username(self, store, token_gate, settings):
        from services.auth_service import CredentialService

        settings = settings.model_copy(update={"DEMO_USERNAME": ""})
        await CredentialService(store, token_gate, settings).bootstrap()
        assert len(store) == 0
