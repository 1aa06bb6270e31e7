"""
Login Use Case

Authenticates a username or email plus password and logs the user in
on the caller's session.
"""

import bcrypt
from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_session import UserSession
from src.domain.entities import User


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - An identifier containing '@' is an email, anything else a username
    - Unknown identifier and wrong password are distinct field errors
    - On success the session is bound to the user; no token is returned
    """

    def __init__(self, uow: UnitOfWork, session: UserSession):
        self.uow = uow
        self.session = session

    async def execute(self, username_or_email: str, password: str) -> Result[User]:
        """
        Execute login use case.

        Args:
            username_or_email: Username, or email if it contains '@'
            password: Plain text password

        Returns:
            Result with the logged in User, or a field Error
        """
        async with self.uow:
            if "@" in username_or_email:
                user = await self.uow.users.get_by_email(username_or_email)
            else:
                user = await self.uow.users.get_by_username(username_or_email)

            if user is None:
                return Return.err(
                    Error(
                        "USER_NOT_FOUND",
                        "username/email doesn't exist",
                        field="usernameOrEmail",
                    )
                )

            password_valid = bcrypt.checkpw(password.encode(), user.password.encode())
            if not password_valid:
                return Return.err(
                    Error("INCORRECT_PASSWORD", "incorrect password", field="password")
                )

        await self.session.bind_user(user.id)

        return Return.ok(user)
