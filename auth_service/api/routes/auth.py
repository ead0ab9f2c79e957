from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, Field

from auth_service.api.error import raise_for_error
from auth_service.api.utils.oauth_auth import verify_oauth_callback_secret
from auth_service.api.utils.request_model import Email, RequestModel
from auth_service.app.services.notifier import INotifier
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.app.services.session_token import SessionTokenService
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginUseCase,
    OAuthLinkCommand,
    OAuthLinkUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    RegisterResponse,
    LoginResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)
from auth_service.depends import (
    get_notifier,
    get_password_hasher,
    get_reset_tokens,
    get_session_tokens,
    get_unit_of_work,
)
from config import ApplicationConfig

router = APIRouter(tags=["Authentication"])


class RegisterRequest(RequestModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: Email = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Creates a new, not yet onboarded account. The response never includes
    the password hash.

    Raises:
        - 409 Conflict: Email already exists
        - 400 Bad Request: Missing or malformed fields
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password)

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(RequestModel):
    """
    Login HTTP request payload

    Email is not format-checked here so that a malformed address gets the
    same 401 as any other unknown account.
    """

    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_session_tokens),
):
    """
    User Login

    Authenticates user and returns a one-hour session token.

    Raises:
        - 401 Unauthorized: Invalid credentials (same response for unknown
          email and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, hasher, tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class OAuthLinkRequest(RequestModel):
    """
    OAuth account link payload, posted by the identity-provider callback
    """

    email: Email = Field(..., description="Email asserted by the provider")
    name: Optional[str] = Field(None, max_length=255, description="Display name")


@router.post(
    "/auth/oauth",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    dependencies=[Depends(verify_oauth_callback_secret)],
)
async def oauth_link(
    request: OAuthLinkRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: SessionTokenService = Depends(get_session_tokens),
):
    """
    OAuth Account Link

    Finds or creates the account for a provider-verified email and returns a
    session token for it.

    Raises:
        - 401 Unauthorized: Missing or wrong callback secret
        - 500 Internal Server Error: Server error
    """
    command = OAuthLinkCommand(email=request.email, name=request.name)

    use_case = OAuthLinkUseCase(uow, tokens)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(RequestModel):
    """
    Forgot password HTTP request payload

    Any non-empty string is accepted so that the response never depends on
    what was submitted.
    """

    email: str = Field(..., min_length=1, description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_tokens: ResetTokenCodec = Depends(get_reset_tokens),
    notifier: INotifier = Depends(get_notifier),
):
    """
    Forgot Password

    Generates a one-hour reset token and sends the reset link.

    Security:
        - No email enumeration (same response for known and unknown emails)
        - Only the SHA-256 fingerprint of the token is stored

    Returns:
        - 200 OK: Always returns success
        - 500 Internal Server Error: Server error
    """
    use_case = ForgotPasswordUseCase(
        uow, reset_tokens, notifier, reset_url_base=ApplicationConfig.FRONTEND_URL
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(RequestModel):
    """
    Reset password HTTP request payload
    """

    token: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("token", "resetSecret", "reset_secret"),
        description="Password reset token from the reset link",
    )
    new_password: str = Field(..., min_length=1, description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    reset_tokens: ResetTokenCodec = Depends(get_reset_tokens),
):
    """
    Reset Password

    Redeems a reset token for a new password. A token works once.

    Raises:
        - 400 Bad Request: Invalid, already used or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = ResetPasswordUseCase(uow, hasher, reset_tokens)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
