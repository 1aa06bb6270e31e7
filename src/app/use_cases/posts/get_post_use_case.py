from typing import Optional

from libs.result import Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post


class GetPostUseCase:
    """Fetch one post; a missing id is a None value, not an error"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: int) -> Result[Optional[Post]]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)

        return Return.ok(post)
