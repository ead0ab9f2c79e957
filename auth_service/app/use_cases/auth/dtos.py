"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the credential workflows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from auth_service.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str


class OAuthLinkCommand(BaseModel):
    """
    OAuth link command - identity asserted by a trusted provider callback

    The API layer has already proven the caller is the identity-provider
    bridge; the email and name are taken as given.
    """

    email: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    email: str
    name: Optional[str] = None
    username: Optional[str] = None
    onboarded: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            username=user.username,
            onboarded=user.onboarded,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user: UserInfo


class LoginResponse(BaseModel):
    """Response for login and OAuth link use cases"""

    user: UserInfo
    token: str
    token_type: str = "bearer"
    expires_in: int


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    message: str
