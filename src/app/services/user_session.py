from abc import ABC, abstractmethod
from typing import Optional


class UserSession(ABC):
    """
    The caller's server-side session - application layer.

    A session holds at most one authenticated user id. It is only
    persisted once something is written to it.
    """

    @property
    @abstractmethod
    def user_id(self) -> Optional[int]:
        """Authenticated user id, or None when not logged in"""
        pass

    @abstractmethod
    async def bind_user(self, user_id: int) -> None:
        """Log user_id in on this session, creating the session if needed"""
        pass

    @abstractmethod
    async def destroy(self) -> None:
        """
        Remove the session from the store and clear the client cookie.

        Raises:
            KeyValueStoreError: the store could not delete the session
        """
        pass
