"""FastAPI dependency injection for the POS API.

Provides dependencies for:
- The database engine and one unit of work per request
- The configured blob storage
- Authentication services and the current user from a JWT
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pos.application.ports import UnitOfWork
from pos.application.services import UserApplication
from pos.application.validators import UserValidator
from pos.domain.storage import BlobStorage
from pos.domain.user import User
from pos.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork
from pos.infrastructure.storage import create_blob_storage
from pos.presentation.api.config import get_api_settings
from pos_auth import InvalidTokenError, JWTConfig, JWTService, PasswordHashingService
from pos_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Storage (Singletons)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache(maxsize=1)
def get_blob_storage() -> BlobStorage:
    """Get the configured blob storage backend (singleton)."""
    return create_blob_storage(get_settings())


async def get_unit_of_work() -> AsyncGenerator[UnitOfWork, None]:
    """
    Unit of work dependency.

    Opens one unit of work per request; it rolls back if the request
    fails and its session is closed when the response is done.

    Yields
    ------
    SQLAlchemyUnitOfWork bound to the shared session maker
    """
    async with SQLAlchemyUnitOfWork(get_session_maker(), get_blob_storage) as uow:
        yield uow


UnitOfWorkDep = Annotated[UnitOfWork, Depends(get_unit_of_work)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_jwt_config() -> JWTConfig:
    """
    Get the token signing configuration (singleton).

    Built once by ``create_app`` so a bad key or expiry aborts startup.

    Raises
    ------
    TokenConfigurationError
        If the signing key, issuer or expiry is invalid
    """
    return JWTConfig.from_settings(get_api_settings())


def get_jwt_service() -> JWTService:
    return JWTService(get_jwt_config())


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_user_application(
    uow: UnitOfWorkDep,
    password_service: PasswordHashingService = Depends(get_password_service),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserApplication:
    return UserApplication(
        unit_of_work=uow,
        password_service=password_service,
        jwt_service=jwt_service,
        validator=UserValidator(),
    )


UserApplicationDep = Annotated[UserApplication, Depends(get_user_application)]


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


async def get_current_user(
    uow: UnitOfWorkDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or the user is gone or inactive
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await uow.user.find_by_id(payload.user_id)

    if user is None or not user.is_active:
        logger.warning("No active user for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
