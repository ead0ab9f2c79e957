"""
Onboard Use Case

One-time completion of the profile fields of a new account.
"""

from uuid import UUID

from auth_service.app.repositories.errors import DuplicateUsernameError
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.libs.result import Error, Result, Return
from .dtos import OnboardCommand, OnboardResponse

USERNAME_TAKEN = Error(
    "USERNAME_TAKEN", "Username is already taken. Please choose another."
)


class OnboardUseCase:
    """
    Use case for completing onboarding.

    Business Rules:
    - Username must not belong to another user; the user's own current
      username does not count as a collision
    - The unique constraint hit on write is the authoritative check: two
      concurrent requests for the same username can both pass the pre-check
    - onboarded is set to True and never back to False
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: OnboardCommand
    ) -> Result[OnboardResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            taken = await self.uow.users.get_by_username(
                command.username, exclude_user_id=user_id
            )
            if taken is not None:
                return Return.err(USERNAME_TAKEN)

            try:
                await self.uow.users.complete_onboarding(
                    user_id, command.name, command.username
                )
            except DuplicateUsernameError:
                return Return.err(USERNAME_TAKEN)

            await self.uow.commit()

            return Return.ok(
                OnboardResponse(message="Onboarding completed successfully!")
            )
