"""Unit tests for UserApplication."""

import asyncio
import logging
from unittest.mock import AsyncMock, Mock

import pytest

from pos.application.dtos import ImageUpload, TokenRequest, UserRequest
from pos.application.ports import UnitOfWork
from pos.application.responses import BaseResponse, ReplyMessage
from pos.application.services import SYSTEM_USER_ID, UserApplication
from pos.domain.shared.value_objects import EntityState
from pos.domain.storage import BlobStorage, StorageContainer, StorageError
from pos.domain.user import User, UsernameAlreadyExistsError, UserRepository
from pos_auth import JWTConfig, JWTService, PasswordHashingService
from tests.shared.fixtures.factories import TestUserFactory

SECRET = "unit-test-secret-key-at-least-32-bytes"
PASSWORD = "correct-horse-battery"
IMAGE_REF = "users/0123456789abcdef.png"


def _unit_of_work() -> Mock:
    uow = Mock(spec=UnitOfWork)
    uow.user = AsyncMock(spec=UserRepository)
    uow.storage = AsyncMock(spec=BlobStorage)
    uow.save_changes = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


class TestGenerateToken:
    """Tests for generate_token."""

    def setup_method(self):
        self.uow = _unit_of_work()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(JWTConfig(secret_key=SECRET, issuer="pos-test"))
        self.app = UserApplication(
            unit_of_work=self.uow,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )
        self.alice = TestUserFactory.alice(
            password_hash=self.password_service.hash(PASSWORD),
        )

    @pytest.mark.asyncio
    async def test_valid_credentials_issue_token(self):
        self.uow.user.find_by_username.return_value = self.alice

        response = await self.app.generate_token(TokenRequest("alice", PASSWORD))

        assert response.is_success
        assert response.message == ReplyMessage.MESSAGE_TOKEN
        payload = self.jwt_service.verify_token(response.data)
        assert payload.user_id == TestUserFactory.ALICE_ID
        assert payload.username == "alice"
        assert payload.email == "alice@example.com"
        self.uow.user.find_by_username.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_username_is_trimmed_like_registration(self):
        self.uow.user.find_by_username.return_value = self.alice

        response = await self.app.generate_token(TokenRequest(" alice \t", PASSWORD))

        assert response.is_success
        self.uow.user.find_by_username.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.uow.user.find_by_username.return_value = None

        response = await self.app.generate_token(TokenRequest("ghost", PASSWORD))

        assert response == BaseResponse.failure(ReplyMessage.MESSAGE_TOKEN_ERROR)

    @pytest.mark.asyncio
    async def test_wrong_password(self):
        self.uow.user.find_by_username.return_value = self.alice

        response = await self.app.generate_token(TokenRequest("alice", "nope"))

        assert not response.is_success
        assert response.data is None
        assert response.message == ReplyMessage.MESSAGE_TOKEN_ERROR

    @pytest.mark.asyncio
    async def test_unknown_user_and_wrong_password_are_indistinguishable(self):
        """No username enumeration through the response."""
        self.uow.user.find_by_username.return_value = None
        unknown = await self.app.generate_token(TokenRequest("ghost", PASSWORD))

        self.uow.user.find_by_username.return_value = self.alice
        wrong = await self.app.generate_token(TokenRequest("alice", "nope"))

        assert unknown == wrong

    @pytest.mark.asyncio
    async def test_inactive_user_is_rejected(self):
        inactive = TestUserFactory.alice(
            password_hash=self.password_service.hash(PASSWORD),
            state=EntityState.INACTIVE,
        )
        self.uow.user.find_by_username.return_value = inactive

        response = await self.app.generate_token(TokenRequest("alice", PASSWORD))

        assert response.message == ReplyMessage.MESSAGE_TOKEN_ERROR

    @pytest.mark.asyncio
    async def test_repository_failure_returns_exception_envelope(self, caplog):
        self.uow.user.find_by_username.side_effect = RuntimeError("db down")

        with caplog.at_level(logging.ERROR):
            response = await self.app.generate_token(TokenRequest("alice", PASSWORD))

        assert response == BaseResponse.failure(ReplyMessage.MESSAGE_EXCEPTION)
        assert "Token generation failed" in caplog.text
        assert "db down" in caplog.text

    @pytest.mark.asyncio
    async def test_signing_failure_returns_exception_envelope(self):
        self.uow.user.find_by_username.return_value = self.alice
        jwt_service = Mock(spec=JWTService)
        jwt_service.issue.side_effect = RuntimeError("boom")
        app = UserApplication(self.uow, self.password_service, jwt_service)

        response = await app.generate_token(TokenRequest("alice", PASSWORD))

        assert response.message == ReplyMessage.MESSAGE_EXCEPTION
        assert response.data is None

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        self.uow.user.find_by_username.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await self.app.generate_token(TokenRequest("alice", PASSWORD))


class TestRegisterUser:
    """Tests for register_user."""

    def setup_method(self):
        self.uow = _unit_of_work()
        self.uow.user.register.return_value = True
        self.uow.storage.save.return_value = IMAGE_REF
        self.password_service = PasswordHashingService(rounds=4)
        self.app = UserApplication(
            unit_of_work=self.uow,
            password_service=self.password_service,
            jwt_service=JWTService(JWTConfig(secret_key=SECRET, issuer="pos-test")),
        )

    def _request(self, **overrides) -> UserRequest:
        values = {
            "username": "bob",
            "email": "bob@example.com",
            "password": PASSWORD,
        }
        values.update(overrides)
        return UserRequest(**values)

    def _registered_user(self) -> User:
        return self.uow.user.register.await_args.args[0]

    @pytest.mark.asyncio
    async def test_register_without_image(self):
        response = await self.app.register_user(self._request())

        assert response == BaseResponse.success(True, ReplyMessage.MESSAGE_SAVE)
        user = self._registered_user()
        assert user.username == "bob"
        assert user.email == "bob@example.com"
        assert user.image is None
        assert user.audit.created_by == SYSTEM_USER_ID
        self.uow.storage.save.assert_not_awaited()
        self.uow.save_changes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self):
        await self.app.register_user(self._request())

        user = self._registered_user()
        assert user.password_hash != PASSWORD
        assert self.password_service.verify(PASSWORD, user.password_hash)

    @pytest.mark.asyncio
    async def test_surrounding_whitespace_is_trimmed(self):
        await self.app.register_user(
            self._request(username="  bob ", email=" bob@example.com "),
        )

        user = self._registered_user()
        assert user.username == "bob"
        assert user.email == "bob@example.com"

    @pytest.mark.asyncio
    async def test_explicit_audit_actor(self):
        await self.app.register_user(self._request(), created_by=7)

        assert self._registered_user().audit.created_by == 7

    @pytest.mark.asyncio
    async def test_register_with_image_uploads_before_insert(self):
        async def register(user: User) -> bool:
            # Reference must already be attached when the row is inserted
            self.uow.storage.save.assert_awaited_once()
            assert user.image == IMAGE_REF
            return True

        self.uow.user.register.side_effect = register
        image = ImageUpload(b"\x89PNG...", filename="Avatar.PNG", content_type="image/png")

        response = await self.app.register_user(self._request(image=image))

        assert response.is_success
        self.uow.storage.save.assert_awaited_once_with(
            StorageContainer.USERS,
            b"\x89PNG...",
            filename="Avatar.PNG",
            content_type="image/png",
        )
        self.uow.storage.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_validation_failure_has_no_side_effects(self):
        response = await self.app.register_user(
            UserRequest(username="", email="bob@example.com", password=PASSWORD),
        )

        assert not response.is_success
        assert response.data is False
        assert response.message == ReplyMessage.MESSAGE_VALIDATE
        assert [(e.field, e.message) for e in response.errors] == [
            ("username", "required"),
        ]
        self.uow.user.register.assert_not_awaited()
        self.uow.storage.save.assert_not_awaited()
        self.uow.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_insert_not_performed(self):
        self.uow.user.register.return_value = False

        response = await self.app.register_user(self._request())

        assert response == BaseResponse.failure(ReplyMessage.MESSAGE_FAILED, data=False)
        self.uow.save_changes.assert_not_awaited()
        self.uow.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_username(self):
        self.uow.user.register.side_effect = UsernameAlreadyExistsError("bob")

        response = await self.app.register_user(self._request())

        assert response.message == ReplyMessage.MESSAGE_FAILED
        assert response.data is False
        self.uow.save_changes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_username_discards_uploaded_image(self):
        self.uow.user.register.side_effect = UsernameAlreadyExistsError("bob")

        await self.app.register_user(self._request(image=ImageUpload(b"img")))

        self.uow.storage.delete.assert_awaited_once_with(IMAGE_REF)

    @pytest.mark.asyncio
    async def test_storage_failure_prevents_insert(self):
        self.uow.storage.save.side_effect = StorageError("bucket unavailable")

        response = await self.app.register_user(self._request(image=ImageUpload(b"img")))

        assert response.message == ReplyMessage.MESSAGE_EXCEPTION
        assert response.data is False
        self.uow.user.register.assert_not_awaited()
        self.uow.save_changes.assert_not_awaited()
        self.uow.storage.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_discards_uploaded_image(self, caplog):
        self.uow.save_changes.side_effect = RuntimeError("commit failed")

        with caplog.at_level(logging.ERROR):
            response = await self.app.register_user(
                self._request(image=ImageUpload(b"img", filename="a.jpg")),
            )

        assert response.message == ReplyMessage.MESSAGE_EXCEPTION
        assert "User registration failed" in caplog.text
        self.uow.storage.delete.assert_awaited_once_with(IMAGE_REF)

    @pytest.mark.asyncio
    async def test_failed_cleanup_does_not_change_response(self):
        self.uow.user.register.return_value = False
        self.uow.storage.delete.side_effect = StorageError("still down")

        response = await self.app.register_user(self._request(image=ImageUpload(b"img")))

        assert response.message == ReplyMessage.MESSAGE_FAILED

    @pytest.mark.asyncio
    async def test_cancellation_propagates_and_discards_image(self):
        self.uow.user.register.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await self.app.register_user(self._request(image=ImageUpload(b"img")))

        self.uow.save_changes.assert_not_awaited()
        self.uow.storage.delete.assert_awaited_once_with(IMAGE_REF)
