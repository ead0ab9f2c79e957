"""
User Use Case DTOs
"""

from pydantic import BaseModel


class OnboardCommand(BaseModel):
    """Profile fields submitted on the one-time onboarding step"""

    name: str
    username: str


class ChangePasswordResponse(BaseModel):
    message: str


class OnboardResponse(BaseModel):
    message: str
