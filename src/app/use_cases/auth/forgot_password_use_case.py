"""
Forgot Password Use Case

Issues a single-use password reset token and queues the reset link mail.
"""

import logging
import secrets
from typing import Any, Callable

from libs.result import Result, Return

from src.app.services.key_value_store import IKeyValueStore
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.constants import FORGET_PASSWORD_PREFIX

logger = logging.getLogger(__name__)

# Runs a coroutine function after the response, e.g. BackgroundTasks.add_task
ScheduleTask = Callable[..., Any]


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: unknown emails get the same True response,
      but no token is stored and no mail is sent
    - Token is 32 bytes from the OS CSPRNG, stored as
      forget-password:<token> -> user id, expiring after token_ttl_seconds
    - The mail is handed to `schedule` and never awaited here, so the
      response time does not depend on delivery
    - Mail delivery failures are logged, never surfaced
    """

    def __init__(
        self,
        uow: UnitOfWork,
        store: IKeyValueStore,
        mailer: IMailer,
        frontend_url: str,
        token_ttl_seconds: int,
        schedule: ScheduleTask,
    ):
        self.uow = uow
        self.store = store
        self.mailer = mailer
        self.frontend_url = frontend_url.rstrip("/")
        self.token_ttl_seconds = token_ttl_seconds
        self.schedule = schedule

    async def execute(self, email: str) -> Result[bool]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(True)

            user_id = user.id

        token = secrets.token_urlsafe(32)
        await self.store.set(
            FORGET_PASSWORD_PREFIX + token, str(user_id), self.token_ttl_seconds
        )

        reset_link = f"{self.frontend_url}/change-password/{token}"
        self.schedule(self.send_reset_email, email, reset_link, user_id)

        return Return.ok(True)

    async def send_reset_email(self, email: str, reset_link: str, user_id: int) -> None:
        try:
            await self.mailer.send_email(
                email,
                "Reset your password",
                f'<a href="{reset_link}">reset password</a>',
            )
        except Exception:
            logger.exception(f"Failed to send password reset email for user {user_id}")
