from datetime import datetime
from typing import Optional

from libs.result import Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post


class UpdatePostUseCase:
    """
    Use case for editing a post title.

    Business Rules:
    - Missing post gives a None value
    - title=None means "not supplied": the stored title is left alone.
      Any string, including "", replaces it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: int, title: Optional[str] = None) -> Result[Optional[Post]]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.ok(None)

            if title is not None:
                post.title = title
                post.updated_at = datetime.utcnow()
                post = await self.uow.posts.update(post)

                await self.uow.commit()

        return Return.ok(post)
