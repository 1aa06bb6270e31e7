from abc import ABC, abstractmethod

from src.app.repositories.post_repository import IPostRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary around the user and post repositories.

    Usage:
        async with uow:
            post = await uow.posts.get_by_id(1)
            ...
            await uow.commit()

    Leaving the block without commit() discards pending writes. Entities
    returned inside the block stay readable after it closes.
    """

    users: IUserRepository
    posts: IPostRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, *args) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
