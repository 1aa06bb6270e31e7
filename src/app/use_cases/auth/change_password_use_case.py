"""
Change Password Use Case

Redeems a password reset token and logs the user in.
"""

from datetime import datetime

import bcrypt
from libs.result import Error, Result, Return

from src.app.services.key_value_store import IKeyValueStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_session import UserSession
from src.domain.constants import FORGET_PASSWORD_PREFIX
from src.domain.entities import User


class ChangePasswordUseCase:
    """
    Use case for changing a password with a reset token.

    Business Rules:
    - New password must be longer than 3 characters (checked before the
      token is touched, so a rejected password does not burn the token)
    - Token is taken with an atomic get-and-delete: single-use even
      under concurrent redemption
    - Missing or expired token and deleted user are field errors on "token"
    - On success the session is bound to the user
    """

    def __init__(self, uow: UnitOfWork, store: IKeyValueStore, session: UserSession):
        self.uow = uow
        self.store = store
        self.session = session

    async def execute(self, token: str, new_password: str) -> Result[User]:
        """
        Execute change password use case.

        Args:
            token: Reset token from the emailed link
            new_password: New password to set

        Returns:
            Result with the updated User, or a field Error
        """
        if len(new_password) <= 3:
            return Return.err(
                Error(
                    "PASSWORD_TOO_SHORT",
                    "length must be greater than 3",
                    field="newPassword",
                )
            )

        stored_user_id = await self.store.take(FORGET_PASSWORD_PREFIX + token)
        if stored_user_id is None:
            return Return.err(Error("TOKEN_EXPIRED", "token expired", field="token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(int(stored_user_id))
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", "user no longer exists", field="token")
                )

            password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(12))
            user.password = password_hash.decode()
            user.updated_at = datetime.utcnow()
            user = await self.uow.users.update(user)

            await self.uow.commit()

        await self.session.bind_user(user.id)

        return Return.ok(user)
