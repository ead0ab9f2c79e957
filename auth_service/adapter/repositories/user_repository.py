from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.app.repositories.errors import (
    DuplicateEmailError,
    DuplicateUsernameError,
    RepositoryError,
)
from auth_service.app.repositories.user_repository import IUserRepository
from auth_service.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(
        self, username: str, exclude_user_id: Optional[UUID] = None
    ) -> Optional[User]:
        """Get user by username, optionally ignoring one user id"""
        stmt = select(User).where(User.username == username)
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[User]:
        """Get user holding this reset fingerprint with an unexpired token"""
        stmt = select(User).where(
            User.reset_token_hash == token_hash,
            User.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(user.email) from exc
        await self.session.refresh(user)
        return user

    async def update_password(self, user_id: UUID, password_hash: str) -> None:
        """Replace the stored password hash"""
        user = await self._require(user_id)
        user.password_hash = password_hash
        self.session.add(user)
        await self.session.flush()

    async def set_reset_token(
        self,
        user_id: UUID,
        token_hash: Optional[str],
        expires_at: Optional[datetime],
    ) -> None:
        """Store or clear the reset fingerprint and its expiry together"""
        if (token_hash is None) != (expires_at is None):
            raise ValueError("token_hash and expires_at must be set or cleared together")
        user = await self._require(user_id)
        user.reset_token_hash = token_hash
        user.reset_token_expires_at = expires_at
        self.session.add(user)
        await self.session.flush()

    async def complete_onboarding(
        self, user_id: UUID, name: str, username: str
    ) -> None:
        """Set profile fields and mark the user onboarded"""
        user = await self._require(user_id)
        user.name = name
        user.username = username
        user.onboarded = True
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateUsernameError(username) from exc

    async def _require(self, user_id: UUID) -> User:
        user = await self.get_by_id(user_id)
        if user is None:
            raise RepositoryError(f"User {user_id} not found")
        return user
