import logging

import bcrypt
from libs.result import Error, Result, Return

from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_session import UserSession
from src.domain.entities import User
from .dtos import RegisterCommand
from .validate_register import validate_register

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate input (first failing rule wins, returned as field error)
    2. Hash password with bcrypt cost factor 12
    3. Insert User; a unique violation means the username/email is taken
    4. Log the new user in on the current session
    """

    def __init__(self, uow: UnitOfWork, session: UserSession):
        self.uow = uow
        self.session = session

    async def execute(self, command: RegisterCommand) -> Result[User]:
        validation_error = validate_register(command)
        if validation_error is not None:
            return Return.err(validation_error)

        password_hash = bcrypt.hashpw(
            command.password.encode("utf-8"), bcrypt.gensalt(12)
        )

        async with self.uow:
            user = User(
                username=command.username,
                email=command.email,
                password=password_hash.decode("utf-8"),
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEntryError:
                logger.info(f"Registration rejected, duplicate user: {command.username}")
                return Return.err(
                    Error("USERNAME_TAKEN", "username already taken", field="username")
                )

            await self.uow.commit()

        await self.session.bind_user(user.id)

        return Return.ok(user)
