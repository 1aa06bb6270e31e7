import json
import logging
import secrets
from typing import Optional

from fastapi import Request, Response

from src.app.services.key_value_store import IKeyValueStore
from src.app.services.user_session import UserSession
from src.domain.constants import SESSION_PREFIX

logger = logging.getLogger(__name__)


class CookieSession(UserSession):
    """
    Server-side session referenced by an opaque id in a cookie.

    The store holds `sess:<id>` -> {"userId": <int>}. Nothing is written
    (and no cookie is sent) until a user is bound.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        response: Response,
        cookie_name: str,
        ttl_seconds: int,
        secure: bool,
        session_id: Optional[str] = None,
        user_id: Optional[int] = None,
    ):
        self.store = store
        self.response = response
        self.cookie_name = cookie_name
        self.ttl_seconds = ttl_seconds
        self.secure = secure
        self.session_id = session_id
        self._user_id = user_id

    @classmethod
    async def load(
        cls,
        store: IKeyValueStore,
        request: Request,
        response: Response,
        cookie_name: str,
        ttl_seconds: int,
        secure: bool,
    ) -> "CookieSession":
        """Resolve the request cookie to its stored session, if any"""
        session = cls(store, response, cookie_name, ttl_seconds, secure)

        session_id = request.cookies.get(cookie_name)
        if not session_id:
            return session

        raw = await store.get(SESSION_PREFIX + session_id)
        if raw is None:
            # Unknown or expired id: a fresh one is issued on the next bind
            return session

        try:
            user_id = json.loads(raw).get("userId")
        except (ValueError, AttributeError):
            logger.warning("Discarding malformed session payload")
            return session

        session.session_id = session_id
        session._user_id = user_id
        return session

    @property
    def user_id(self) -> Optional[int]:
        return self._user_id

    async def bind_user(self, user_id: int) -> None:
        if self.session_id is None:
            self.session_id = secrets.token_urlsafe(32)

        await self.store.set(
            SESSION_PREFIX + self.session_id,
            json.dumps({"userId": user_id}),
            self.ttl_seconds,
        )
        self._user_id = user_id

        self.response.set_cookie(
            key=self.cookie_name,
            value=self.session_id,
            max_age=self.ttl_seconds,
            httponly=True,
            samesite="lax",
            secure=self.secure,
        )

    async def destroy(self) -> None:
        session_id = self.session_id
        self.session_id = None
        self._user_id = None

        self.response.delete_cookie(
            key=self.cookie_name,
            httponly=True,
            samesite="lax",
            secure=self.secure,
        )

        if session_id is not None:
            await self.store.delete(SESSION_PREFIX + session_id)
