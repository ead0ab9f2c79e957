from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import Field

from auth_service.api.error import raise_for_error
from auth_service.api.utils.request_model import RequestModel
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.auth import UserInfo
from auth_service.app.use_cases.users import (
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetProfileUseCase,
    OnboardCommand,
    OnboardResponse,
    OnboardUseCase,
)
from auth_service.depends import (
    get_current_user_id,
    get_password_hasher,
    get_unit_of_work,
)

router = APIRouter(tags=["Profile"])


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_profile(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User Profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Token subject no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(RequestModel):
    """Change password HTTP request payload"""

    old_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=1, description="New password")


@router.put(
    "/profile/password",
    status_code=status.HTTP_200_OK,
    response_model=ChangePasswordResponse,
)
async def change_password(
    request: ChangePasswordRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change Password

    Raises:
        - 401 Unauthorized: Bad token or incorrect old password
        - 404 Not Found: Token subject no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = ChangePasswordUseCase(uow, hasher)
    result = await use_case.execute(user_id, request.old_password, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class OnboardRequest(RequestModel):
    """Onboarding HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    username: str = Field(..., min_length=1, max_length=50, description="Unique username")


@router.put("/onboarding", status_code=status.HTTP_200_OK, response_model=OnboardResponse)
async def onboard(
    request: OnboardRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Onboarding

    Sets name and username and marks the account onboarded.

    Raises:
        - 409 Conflict: Username taken by another user
        - 404 Not Found: Token subject no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = OnboardUseCase(uow)
    result = await use_case.execute(
        user_id, OnboardCommand(name=request.name, username=request.username)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
