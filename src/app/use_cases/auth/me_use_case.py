from typing import Optional

from libs.result import Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User


class MeUseCase:
    """Resolves the session's user id to a User, or None"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: Optional[int]) -> Result[Optional[User]]:
        if user_id is None:
            return Return.ok(None)

        async with self.uow:
            # A stale session pointing at a deleted user is just "not logged in"
            user = await self.uow.users.get_by_id(user_id)

        return Return.ok(user)
