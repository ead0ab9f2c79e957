from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from auth_service.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_username(
        self, username: str, exclude_user_id: Optional[UUID] = None
    ) -> Optional[User]:
        """Get user by username, optionally ignoring one user id"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[User]:
        """Get user holding this reset fingerprint with an expiry later than now"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateEmailError on email collision."""
        pass

    @abstractmethod
    async def update_password(self, user_id: UUID, password_hash: str) -> None:
        """Replace the stored password hash"""
        pass

    @abstractmethod
    async def set_reset_token(
        self,
        user_id: UUID,
        token_hash: Optional[str],
        expires_at: Optional[datetime],
    ) -> None:
        """Store a reset fingerprint and expiry; passing None for both clears them"""
        pass

    @abstractmethod
    async def complete_onboarding(
        self, user_id: UUID, name: str, username: str
    ) -> None:
        """Set name and username and mark the user onboarded.

        Raises DuplicateUsernameError on username collision.
        """
        pass
