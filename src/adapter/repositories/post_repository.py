from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import StoreError
from src.app.repositories.post_repository import IPostRepository
from src.domain.entities import Post


class PostRepository(IPostRepository):
    """Post repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID"""
        stmt = select(Post).where(Post.id == post_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_recent(
        self, limit: int, before: Optional[datetime] = None
    ) -> List[Post]:
        """Newest posts first, strictly older than `before` when given"""
        stmt = select(Post)
        if before is not None:
            stmt = stmt.where(col(Post.created_at) < before)
        stmt = stmt.order_by(col(Post.created_at).desc(), col(Post.id).desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, post: Post) -> Post:
        """Create a new post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        """Update existing post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        """Delete a post"""
        try:
            await self.session.delete(post)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete post {post.id}") from e
