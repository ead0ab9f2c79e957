import logging

from auth_service.app.repositories.errors import DuplicateEmailError
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.unit_of_work import UnitOfWork
from auth_service.domain.entities import User
from auth_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserInfo

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "User with this email already exists")


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt
    3. Create User with onboarded=False
    4. Commit; a unique constraint violation on insert is reported the same
       way as the pre-check hit
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email and password

        Returns:
            Result[RegisterResponse] with the created user (no hash)
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(EMAIL_ALREADY_EXISTS)

            password_hash = await self.hasher.hash(command.password)

            user = User(email=command.email, password_hash=password_hash, onboarded=False)
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                return Return.err(EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            logger.info("User registered: %s", user.id)
            return Return.ok(
                RegisterResponse(
                    message="User registered successfully",
                    user=UserInfo.from_entity(user),
                )
            )
