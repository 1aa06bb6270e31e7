from typing import List, Optional

from libs.result import Error, Result, Return

from src.app.services.unit_of_work import UnitOfWork
from src.domain.constants import MAX_POSTS_PAGE_SIZE
from src.domain.entities import Post
from .cursor import InvalidCursorError, decode_cursor


class ListPostsUseCase:
    """
    Use case for the paginated post feed.

    Business Rules:
    - Newest first
    - Page size is min(limit, 50); a non-positive limit gives an empty page
    - With a cursor, only posts created strictly before it are returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int, cursor: Optional[str] = None) -> Result[List[Post]]:
        real_limit = max(0, min(MAX_POSTS_PAGE_SIZE, limit))

        before = None
        if cursor:
            try:
                before = decode_cursor(cursor)
            except InvalidCursorError as e:
                return Return.err(Error("INVALID_CURSOR", str(e), field="cursor"))

        if real_limit == 0:
            return Return.ok([])

        async with self.uow:
            posts = await self.uow.posts.list_recent(real_limit, before)

        return Return.ok(posts)
