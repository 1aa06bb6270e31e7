import logging

from libs.result import Result, Return

from src.app.services.key_value_store import KeyValueStoreError
from src.app.services.user_session import UserSession

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """Destroys the caller's session. A store failure yields False."""

    def __init__(self, session: UserSession):
        self.session = session

    async def execute(self) -> Result[bool]:
        try:
            await self.session.destroy()
        except KeyValueStoreError:
            logger.exception("Failed to destroy session")
            return Return.ok(False)

        return Return.ok(True)
