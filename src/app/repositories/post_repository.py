from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities import Post


class IPostRepository(ABC):
    """Post repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID"""
        pass

    @abstractmethod
    async def list_recent(
        self, limit: int, before: Optional[datetime] = None
    ) -> List[Post]:
        """Get up to `limit` posts newest first, only those created strictly before `before`"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Create a new post"""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Update existing post"""
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        """
        Delete a post.

        Raises:
            StoreError: the store rejected the delete
        """
        pass
