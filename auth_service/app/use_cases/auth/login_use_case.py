"""
Login Use Case

Authenticates a user by email and password and issues a session token.
"""

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.session_token import SessionTokenService
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password return the very same error
    - A bcrypt comparison is spent even when the email is unknown
    - Accounts without a local password (OAuth-created) cannot log in here
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        session_tokens: SessionTokenService,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_tokens = session_tokens

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                await self.hasher.dummy_verify(password)
                return Return.err(INVALID_CREDENTIALS)

            if not await self.hasher.verify(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            token = self.session_tokens.issue(user.id)

            return Return.ok(
                LoginResponse(
                    user=UserInfo.from_entity(user),
                    token=token,
                    expires_in=self.session_tokens.expires_in,
                )
            )
