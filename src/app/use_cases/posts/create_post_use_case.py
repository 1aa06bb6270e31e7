from typing import Optional

from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post
from .dtos import CreatePostCommand


class CreatePostUseCase:
    """
    Use case for creating a post.

    Business Rules:
    - Requires an authenticated user; checked before any storage access
    - creator_id comes from the session, never from client input
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreatePostCommand, creator_id: Optional[int]
    ) -> Result[Post]:
        if creator_id is None:
            return Return.err(Error("NOT_AUTHENTICATED", "not authenticated"))

        async with self.uow:
            post = Post(title=command.title, text=command.text, creator_id=creator_id)
            post = await self.uow.posts.create(post)

            await self.uow.commit()

        return Return.ok(post)
