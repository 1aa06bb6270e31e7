import asyncio
import re
from unittest.mock import MagicMock

import pytest
from fastapi import BackgroundTasks

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.schema.context import GraphQLContext
from src.api.schema.schema import schema
from src.app.services.mailer import IMailer

REGISTER = """
mutation Register($options: UsernamePasswordInput!) {
  register(options: $options) { user { id } }
}
"""

FORGOT_PASSWORD = """
mutation Forgot($email: String!) {
  forgotPassword(email: $email)
}
"""

CHANGE_PASSWORD = """
mutation Change($token: String!, $newPassword: String!) {
  changePassword(token: $token, newPassword: $newPassword) {
    errors { field message }
    user { id username }
  }
}
"""

LOGIN = """
mutation Login($usernameOrEmail: String!, $password: String!) {
  login(usernameOrEmail: $usernameOrEmail, password: $password) {
    errors { field message }
    user { id }
  }
}
"""

ME = "{ me { id } }"


async def register_alice(client, graphql) -> int:
    body = await graphql(
        REGISTER,
        {"options": {"username": "alice", "email": "alice@example.com", "password": "hunter22"}},
    )
    client.cookies.clear()
    return body["data"]["register"]["user"]["id"]


def token_from_mail(message: dict) -> str:
    match = re.search(r"/change-password/([^\"]+)\"", message["html"])
    assert match is not None
    return match.group(1)


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(client, graphql, kv_store, mailer):
    """Unknown addresses get the same answer but nothing is issued"""
    await register_alice(client, graphql)

    body = await graphql(FORGOT_PASSWORD, {"email": "nobody@example.com"})

    assert body["data"]["forgotPassword"] is True
    assert mailer.sent == []
    assert not any(key.startswith("forget-password:") for key in kv_store._data)


@pytest.mark.asyncio
async def test_forgot_password_mails_reset_link(client, graphql, kv_store, mailer):
    user_id = await register_alice(client, graphql)

    body = await graphql(FORGOT_PASSWORD, {"email": "alice@example.com"})

    assert body["data"]["forgotPassword"] is True
    assert len(mailer.sent) == 1
    message = mailer.sent[0]
    assert message["to"] == "alice@example.com"
    assert "http://localhost:3000/change-password/" in message["html"]

    token = token_from_mail(message)
    assert await kv_store.get(f"forget-password:{token}") == str(user_id)


@pytest.mark.asyncio
async def test_change_password_redeems_token_once(client, graphql, mailer):
    user_id = await register_alice(client, graphql)
    await graphql(FORGOT_PASSWORD, {"email": "alice@example.com"})
    token = token_from_mail(mailer.sent[0])

    body = await graphql(CHANGE_PASSWORD, {"token": token, "newPassword": "new-secret"})

    payload = body["data"]["changePassword"]
    assert payload["errors"] is None
    assert payload["user"] == {"id": user_id, "username": "alice"}

    # Changing the password also logs the user in
    me = await graphql(ME)
    assert me["data"]["me"] == {"id": user_id}

    client.cookies.clear()
    old = await graphql(LOGIN, {"usernameOrEmail": "alice", "password": "hunter22"})
    assert old["data"]["login"]["errors"] == [
        {"field": "password", "message": "incorrect password"}
    ]
    new = await graphql(LOGIN, {"usernameOrEmail": "alice", "password": "new-secret"})
    assert new["data"]["login"]["user"] == {"id": user_id}

    again = await graphql(CHANGE_PASSWORD, {"token": token, "newPassword": "another-one"})
    assert again["data"]["changePassword"] == {
        "errors": [{"field": "token", "message": "token expired"}],
        "user": None,
    }


@pytest.mark.asyncio
async def test_change_password_unknown_token(graphql):
    body = await graphql(CHANGE_PASSWORD, {"token": "not-a-token", "newPassword": "new-secret"})

    assert body["data"]["changePassword"]["errors"] == [
        {"field": "token", "message": "token expired"}
    ]


@pytest.mark.asyncio
async def test_change_password_too_short_keeps_token(client, graphql, kv_store, mailer):
    await register_alice(client, graphql)
    await graphql(FORGOT_PASSWORD, {"email": "alice@example.com"})
    token = token_from_mail(mailer.sent[0])

    body = await graphql(CHANGE_PASSWORD, {"token": token, "newPassword": "abc"})

    assert body["data"]["changePassword"]["errors"] == [
        {"field": "newPassword", "message": "length must be greater than 3"}
    ]
    assert await kv_store.get(f"forget-password:{token}") is not None


class BlockingMailer(IMailer):
    """Delivery hangs until released"""

    def __init__(self):
        self.release = asyncio.Event()
        self.sent = []

    async def send_email(self, to: str, subject: str, html: str) -> None:
        await self.release.wait()
        self.sent.append(to)


@pytest.mark.asyncio
async def test_forgot_password_responds_before_mail_delivery(
    client, graphql, db_session, kv_store
):
    """A known email answers as fast as an unknown one; the mail goes out afterwards"""
    await register_alice(client, graphql)

    mailer = BlockingMailer()
    context = GraphQLContext(
        uow=SqlAlchemyUnitOfWork(db_session),
        store=kv_store,
        mailer=mailer,
        session=MagicMock(),
    )
    context.background_tasks = BackgroundTasks()

    result = await asyncio.wait_for(
        schema.execute(
            FORGOT_PASSWORD,
            variable_values={"email": "alice@example.com"},
            context_value=context,
        ),
        timeout=2,
    )

    assert result.errors is None
    assert result.data == {"forgotPassword": True}
    assert mailer.sent == []
    assert len(context.background_tasks.tasks) == 1

    mailer.release.set()
    await context.background_tasks()

    assert mailer.sent == ["alice@example.com"]
