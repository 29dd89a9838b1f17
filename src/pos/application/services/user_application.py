"""Authentication use cases: login and self-registration."""

import logging
from typing import Optional

from pos.application.dtos import TokenRequest, UserRequest
from pos.application.ports import UnitOfWork
from pos.application.responses import BaseResponse, ReplyMessage
from pos.application.validators import UserValidator
from pos.domain.storage import StorageContainer
from pos.domain.user import User, UsernameAlreadyExistsError
from pos_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

# Audit actor recorded for self-registrations
SYSTEM_USER_ID = 0


class UserApplication:
    """Issues tokens for valid credentials and registers new users.

    Every outcome, including unexpected failures, is reported through a
    :class:`BaseResponse`; only task cancellation escapes.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        validator: Optional[UserValidator] = None,
    ):
        self._uow = unit_of_work
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._validator = validator or UserValidator()

    async def generate_token(self, request: TokenRequest) -> BaseResponse[str]:
        """Authenticate ``request`` and return a signed token.

        Unknown users, inactive users and wrong passwords produce the same
        response so that callers cannot discover which usernames exist.
        """
        try:
            # Registration stores the username trimmed
            username = request.username.strip()
            user = await self._uow.user.find_by_username(username)

            if (
                user is None
                or not user.is_active
                or not self._password_service.verify(
                    request.password,
                    user.password_hash,
                )
            ):
                logger.info("Rejected token request for username %r", username)
                return BaseResponse.failure(ReplyMessage.MESSAGE_TOKEN_ERROR)

            token = self._jwt_service.issue(user)
            logger.info("Issued token for user %s", user.id)
            return BaseResponse.success(token, ReplyMessage.MESSAGE_TOKEN)

        except Exception:
            logger.exception("Token generation failed")
            return BaseResponse.failure(ReplyMessage.MESSAGE_EXCEPTION)

    async def register_user(
        self,
        request: UserRequest,
        created_by: int = SYSTEM_USER_ID,
    ) -> BaseResponse[bool]:
        """Validate, hash, upload the optional image and persist a new user.

        Parameters
        ----------
        request
            The registration data
        created_by
            Audit actor for the new record

        Returns
        -------
        A response whose data is True iff the user was committed
        """
        verdict = self._validator.validate(request)
        if not verdict.is_valid:
            return BaseResponse.failure(
                ReplyMessage.MESSAGE_VALIDATE,
                errors=verdict.errors,
                data=False,
            )

        image_reference: Optional[str] = None
        committed = False
        try:
            user = User.register(
                username=request.username.strip(),
                email=request.email.strip(),
                password_hash=self._password_service.hash(request.password),
                created_by=created_by,
                auth_type=request.auth_type,
            )

            if request.image is not None:
                image_reference = await self._uow.storage.save(
                    StorageContainer.USERS,
                    request.image.content,
                    filename=request.image.filename,
                    content_type=request.image.content_type,
                )
                user.attach_image(image_reference)

            try:
                created = await self._uow.user.register(user)
            except UsernameAlreadyExistsError:
                logger.info("Username %r is already taken", user.username)
                created = False

            if not created:
                await self._uow.rollback()
                return BaseResponse.failure(ReplyMessage.MESSAGE_FAILED, data=False)

            await self._uow.save_changes()
            committed = True
            logger.info("Registered user %s (%s)", user.id, user.username)
            return BaseResponse.success(True, ReplyMessage.MESSAGE_SAVE)

        except Exception:
            logger.exception("User registration failed")
            return BaseResponse.failure(ReplyMessage.MESSAGE_EXCEPTION, data=False)

        finally:
            if image_reference is not None and not committed:
                await self._discard_image(image_reference)

    async def _discard_image(self, reference: str) -> None:
        # The user row was not committed, so nothing points at the blob
        try:
            await self._uow.storage.delete(reference)
            logger.info("Removed unreferenced image %s", reference)
        except Exception:
            logger.exception("Failed to remove unreferenced image %s", reference)
