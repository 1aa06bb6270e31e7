import pytest
from unittest.mock import AsyncMock, MagicMock, PropertyMock

from src.app.services.user_session import UserSession


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with user and post repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_username = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.posts = MagicMock()
    uow.posts.get_by_id = AsyncMock()
    uow.posts.list_recent = AsyncMock(return_value=[])
    uow.posts.create = AsyncMock(side_effect=lambda post: post)
    uow.posts.update = AsyncMock(side_effect=lambda post: post)
    uow.posts.delete = AsyncMock()
    return uow


@pytest.fixture
def mock_session():
    """Mock UserSession that starts logged out"""
    session = MagicMock(spec=UserSession)
    type(session).user_id = PropertyMock(return_value=None)
    session.bind_user = AsyncMock()
    session.destroy = AsyncMock()
    return session


@pytest.fixture
def mock_store():
    """Mock key-value store"""
    store = MagicMock()
    store.set = AsyncMock()
    store.get = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=True)
    store.take = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_mailer():
    mailer = MagicMock()
    mailer.send_email = AsyncMock()
    return mailer
