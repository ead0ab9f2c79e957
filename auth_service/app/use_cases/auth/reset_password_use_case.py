"""
Reset Password Use Case

Redeems a password reset secret for a new password.
"""

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.base import utcnow
from auth_service.libs.result import Error, Result, Return
from .dtos import ResetPasswordResponse


class ResetPasswordUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - Submitted secret is fingerprinted and looked up among unexpired tokens
    - Unknown, already redeemed and expired tokens are the same error
    - Password update and token clearing are committed together, so a
      redeemed token can never be replayed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        reset_tokens: ResetTokenCodec,
    ):
        self.uow = uow
        self.hasher = hasher
        self.reset_tokens = reset_tokens

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Password reset secret (plain text from the reset link)
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error(INVALID_OR_EXPIRED_TOKEN)
        """
        async with self.uow:
            token_hash = self.reset_tokens.fingerprint(token)
            user = await self.uow.users.get_by_reset_token_hash(token_hash, utcnow())

            if user is None:
                return Return.err(
                    Error(
                        "INVALID_OR_EXPIRED_TOKEN",
                        "Invalid or expired password reset token.",
                    )
                )

            password_hash = await self.hasher.hash(new_password)

            await self.uow.users.update_password(user.id, password_hash)
            await self.uow.users.set_reset_token(user.id, None, None)
            await self.uow.commit()

            return Return.ok(
                ResetPasswordResponse(message="Password has been reset successfully.")
            )
