import logging

from libs.result import Result, Return

from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Delete a post. Missing posts and store failures both yield False."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: int) -> Result[bool]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.ok(False)

            try:
                await self.uow.posts.delete(post)
                await self.uow.commit()
            except StoreError:
                logger.exception(f"Failed to delete post {post_id}")
                return Return.ok(False)

        return Return.ok(True)
