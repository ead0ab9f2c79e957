"""
Change Password Use Case

Replaces the password of an authenticated user after re-checking the old one.
"""

from uuid import UUID

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.libs.result import Error, Result, Return
from .dtos import ChangePasswordResponse


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - Caller is already authenticated; user_id comes from the session token
    - Old password must verify against the stored hash
    - New password is hashed with a fresh salt
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, user_id: UUID, old_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not await self.hasher.verify(old_password, user.password_hash):
                return Return.err(
                    Error("INCORRECT_OLD_PASSWORD", "Incorrect old password")
                )

            password_hash = await self.hasher.hash(new_password)
            await self.uow.users.update_password(user.id, password_hash)
            await self.uow.commit()

            return Return.ok(
                ChangePasswordResponse(message="Password updated successfully")
            )
