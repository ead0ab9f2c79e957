"""
Authentication Use Cases

Registration, login, OAuth linking and the password reset flow.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .oauth_link_use_case import OAuthLinkUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    RegisterCommand,
    OAuthLinkCommand,
    UserInfo,
    RegisterResponse,
    LoginResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "OAuthLinkUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "OAuthLinkCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
    # DTOs - Nested Models
    "UserInfo",
]
