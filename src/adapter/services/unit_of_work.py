from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.post_repository import PostRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.posts = PostRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Detach loaded entities first so the rollback does not expire them;
        # resolvers read their attributes after the unit of work has closed
        self.session.expunge_all()
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
