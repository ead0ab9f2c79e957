"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, OAuth linking, password reset
- users/: Operations on the authenticated user's own account
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    RegisterResponse,
    LoginUseCase,
    OAuthLinkUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .users import (
    ChangePasswordUseCase,
    OnboardUseCase,
    GetProfileUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResponse",
    "LoginUseCase",
    "OAuthLinkUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Users
    "ChangePasswordUseCase",
    "OnboardUseCase",
    "GetProfileUseCase",
]
