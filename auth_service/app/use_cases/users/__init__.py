"""
User Use Cases

Operations on the authenticated user's own account.
"""

from .change_password_use_case import ChangePasswordUseCase
from .onboard_use_case import OnboardUseCase
from .get_profile_use_case import GetProfileUseCase
from .dtos import OnboardCommand, ChangePasswordResponse, OnboardResponse

__all__ = [
    "ChangePasswordUseCase",
    "OnboardUseCase",
    "GetProfileUseCase",
    "OnboardCommand",
    "ChangePasswordResponse",
    "OnboardResponse",
]
