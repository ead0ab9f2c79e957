"""
User Entity

The durable identity record behind every credential workflow.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from auth_service.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - one row per account.

    Business Rules:
    - Email must be unique across all users and is never changed
    - Username is unique when set; set during onboarding
    - Password stored as bcrypt hash; absent only for OAuth-created users
    - onboarded flips from False to True exactly once
    - reset_token_hash and reset_token_expires_at are set and cleared together
    - reset_token_hash is the SHA-256 fingerprint, never the secret itself
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)  # Bcrypt output is 60 chars

    # Profile, completed during onboarding
    name: Optional[str] = Field(default=None, max_length=255)
    username: Optional[str] = Field(default=None, unique=True, index=True, max_length=50)
    onboarded: bool = Field(default=False)

    # Password reset
    reset_token_hash: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
