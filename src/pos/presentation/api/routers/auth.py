"""Authentication router for token issuance and self-registration."""

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, File, Form, Response, UploadFile, status

from pos.application.dtos import ImageUpload, TokenRequest, UserRequest
from pos.application.responses import BaseResponse, ReplyMessage
from pos.presentation.api.dependencies import CurrentUser, UserApplicationDep
from pos.presentation.api.schemas import (
    EnvelopeResponse,
    TokenRequestSchema,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

FAILURE_STATUS: dict[str, int] = {
    ReplyMessage.MESSAGE_VALIDATE: status.HTTP_400_BAD_REQUEST,
    ReplyMessage.MESSAGE_TOKEN_ERROR: status.HTTP_401_UNAUTHORIZED,
    ReplyMessage.MESSAGE_FAILED: status.HTTP_409_CONFLICT,
    ReplyMessage.MESSAGE_EXCEPTION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _envelope(
    result: BaseResponse[Any],
    response: Response,
    success_status: int = status.HTTP_200_OK,
) -> EnvelopeResponse:
    if result.is_success:
        response.status_code = success_status
    else:
        response.status_code = FAILURE_STATUS.get(
            result.message,
            status.HTTP_400_BAD_REQUEST,
        )
    return EnvelopeResponse.from_result(result)


@router.post(
    "/token",
    summary="Generate an access token",
    responses={
        200: {"description": "Token generated"},
        401: {"description": "Invalid username or password"},
        500: {"description": "Unexpected failure"},
    },
)
async def generate_token(
    request: TokenRequestSchema,
    response: Response,
    user_application: UserApplicationDep,
) -> EnvelopeResponse:
    """Exchange a username and password for a signed JWT."""
    result = await user_application.generate_token(
        TokenRequest(username=request.username, password=request.password),
    )
    return _envelope(result, response)


@router.post(
    "/register",
    summary="Register a new user",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Validation failed"},
        409: {"description": "User could not be saved (e.g. username taken)"},
        500: {"description": "Unexpected failure"},
    },
)
async def register_user(  # noqa: PLR0913
    response: Response,
    user_application: UserApplicationDep,
    username: Annotated[Optional[str], Form()] = None,
    email: Annotated[Optional[str], Form()] = None,
    password: Annotated[Optional[str], Form()] = None,
    image: Annotated[Optional[UploadFile], File()] = None,
) -> EnvelopeResponse:
    """Register a user from a multipart form with an optional image."""
    upload = None
    if image is not None and image.filename:
        upload = ImageUpload(
            content=await image.read(),
            filename=image.filename,
            content_type=image.content_type,
        )

    result = await user_application.register_user(
        UserRequest(username=username, email=email, password=password, image=upload),
    )
    return _envelope(result, response, success_status=status.HTTP_201_CREATED)


@router.get(
    "/me",
    summary="Get the authenticated user",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def me(user: CurrentUser) -> UserResponse:
    return UserResponse.from_domain(user)
