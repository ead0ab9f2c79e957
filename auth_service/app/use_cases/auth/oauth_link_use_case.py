"""
OAuth Link Use Case

Converges an identity asserted by an external provider onto the local
account with the same email.
"""

import logging

from auth_service.app.repositories.errors import DuplicateEmailError
from auth_service.app.services.session_token import SessionTokenService
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.entities import User
from auth_service.libs.result import Result, Return
from .dtos import LoginResponse, OAuthLinkCommand, UserInfo

logger = logging.getLogger(__name__)


class OAuthLinkUseCase:
    """
    Use case for linking a provider identity to a local account.

    Business Rules:
    - Caller is a trusted provider callback; the provider's signature has
      already been checked at the boundary and is not checked again here
    - Unknown email: create a user with no local password, onboarded=False
    - Known email: reuse the user as-is; password and onboarded are untouched
    - A session token is issued either way
    """

    def __init__(self, uow: UnitOfWork, session_tokens: SessionTokenService):
        self.uow = uow
        self.session_tokens = session_tokens

    async def execute(self, command: OAuthLinkCommand) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                try:
                    user = await self.uow.users.create(
                        User(email=command.email, name=command.name, onboarded=False)
                    )
                    await self.uow.commit()
                    logger.info("User created from OAuth callback: %s", user.id)
                except DuplicateEmailError:
                    # Lost a race with a concurrent registration, reuse the winner
                    await self.uow.rollback()
                    user = await self.uow.users.get_by_email(command.email)
                    if user is None:
                        raise

            token = self.session_tokens.issue(user.id)

            return Return.ok(
                LoginResponse(
                    user=UserInfo.from_entity(user),
                    token=token,
                    expires_in=self.session_tokens.expires_in,
                )
            )
