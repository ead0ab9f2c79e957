from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from auth_service.adapter.services.notifier import LoggingNotifier, SmtpNotifier
from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.api.error import ClientError
from auth_service.app.services.notifier import INotifier
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.app.services.session_token import SessionTokenService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Missing or non-Bearer headers are turned into our own 401 below
security = HTTPBearer(auto_error=False)


def build_notifier(config) -> INotifier:
    if config.NOTIFIER_BACKEND == "smtp":
        return SmtpNotifier(config.SMTP_HOST, config.SMTP_PORT, config.MAIL_FROM)
    return LoggingNotifier()


# Process-wide, built once from configuration and never mutated
password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
session_tokens = SessionTokenService(
    ApplicationConfig.JWT_SECRET,
    expires_delta=timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES),
)
reset_tokens = ResetTokenCodec(
    ttl=timedelta(minutes=ApplicationConfig.RESET_TOKEN_EXPIRES_MINUTES)
)
notifier = build_notifier(ApplicationConfig)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_session_tokens() -> SessionTokenService:
    return session_tokens


def get_reset_tokens() -> ResetTokenCodec:
    return reset_tokens


def get_notifier() -> INotifier:
    return notifier


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: SessionTokenService = Depends(get_session_tokens),
) -> UUID:
    """
    Dependency to extract and verify the session token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        The authenticated user's id

    Raises:
        ClientError: 401 if the header is missing, or the token is invalid or expired
    """
    if credentials is None:
        raise ClientError.unauthorized("MISSING_TOKEN", "Authentication required")

    result = tokens.verify(credentials.credentials)
    if result.is_err():
        raise ClientError.unauthorized(result.error.code, result.error.message)

    return result.value
