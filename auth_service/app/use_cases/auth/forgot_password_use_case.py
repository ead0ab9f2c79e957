"""
Forgot Password Use Case

Issues a password reset token and hands the reset link to the notifier.
"""

import asyncio
import logging
from typing import Set

from auth_service.app.services.notifier import INotifier
from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.libs.result import Result, Return
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

# Keeps fire-and-forget deliveries referenced until they finish
_background_tasks: Set[asyncio.Task] = set()

GENERIC_MESSAGE = "If a user with that email exists, a password reset link has been sent."


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: the response is identical whether or not the
      email belongs to an account
    - Only the SHA-256 fingerprint and expiry are stored on the user
    - The plain secret only leaves through the notifier, inside the reset link
    - A new request replaces any earlier outstanding token
    - Delivery is fire-and-forget: the response never waits for the notifier,
      and a notifier failure is only logged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        reset_tokens: ResetTokenCodec,
        notifier: INotifier,
        reset_url_base: str,
    ):
        self.uow = uow
        self.reset_tokens = reset_tokens
        self.notifier = notifier
        self.reset_url_base = reset_url_base.rstrip("/")

    def _reset_url(self, secret: str) -> str:
        return f"{self.reset_url_base}/reset-password?token={secret}"

    def _dispatch(self, user_id, email: str, reset_url: str) -> None:
        async def _deliver():
            try:
                await self.notifier.send_password_reset(email, reset_url)
            except Exception:
                logger.exception("Password reset notification failed for user %s", user_id)

        task = asyncio.create_task(_deliver())
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Email address the reset was requested for

        Returns:
            Result with the generic confirmation message
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is not None:
                issued = self.reset_tokens.issue()
                await self.uow.users.set_reset_token(
                    user.id, issued.fingerprint, issued.expires_at
                )
                await self.uow.commit()

                self._dispatch(user.id, user.email, self._reset_url(issued.secret))

        return Return.ok(ForgotPasswordResponse(message=GENERIC_MESSAGE))
