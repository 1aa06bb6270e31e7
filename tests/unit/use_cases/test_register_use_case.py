from unittest.mock import AsyncMock

import bcrypt
import pytest

from src.app.repositories.errors import DuplicateEntryError
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase, validate_register
from src.domain.entities import User


def make_command(**overrides):
    fields = {"username": "alice", "email": "alice@example.com", "password": "hunter2"}
    fields.update(overrides)
    return RegisterCommand(**fields)


@pytest.mark.parametrize(
    "overrides, field, message",
    [
        ({"username": "al"}, "username", "length must be greater than 2"),
        ({"username": "al@ce"}, "username", "username cannot include '@'"),
        ({"email": "alice.example.com"}, "email", "invalid email"),
        ({"password": "abc"}, "password", "length must be greater than 3"),
    ],
)
def test_validate_register_rejects(overrides, field, message):
    error = validate_register(make_command(**overrides))

    assert error is not None
    assert error.field == field
    assert error.message == message


def test_validate_register_first_failure_wins():
    """Short username reported even when every other field is bad too"""
    error = validate_register(
        make_command(username="a", email="nope", password="x")
    )

    assert error.field == "username"
    assert error.message == "length must be greater than 2"


def test_validate_register_accepts_valid_input():
    assert validate_register(make_command()) is None


@pytest.mark.asyncio
async def test_successful_register(mock_uow, mock_session):
    """Password is stored hashed and the new user is logged in"""
    created = {}

    async def capture_create(user):
        user.id = 7
        created["user"] = user
        return user

    mock_uow.users.create = AsyncMock(side_effect=capture_create)

    use_case = RegisterUseCase(mock_uow, mock_session)
    result = await use_case.execute(make_command())

    assert result.is_ok()
    user = result.value
    assert user.id == 7
    assert user.username == "alice"
    assert user.email == "alice@example.com"

    # Stored hash verifies against the plain password, and is not it
    assert user.password != "hunter2"
    assert bcrypt.checkpw(b"hunter2", user.password.encode())

    mock_uow.commit.assert_called_once()
    mock_session.bind_user.assert_called_once_with(7)


@pytest.mark.asyncio
async def test_register_duplicate_username(mock_uow, mock_session):
    mock_uow.users.create.side_effect = DuplicateEntryError("users.username")

    use_case = RegisterUseCase(mock_uow, mock_session)
    result = await use_case.execute(make_command())

    assert result.is_err()
    assert result.error.field == "username"
    assert result.error.message == "username already taken"

    mock_uow.commit.assert_not_called()
    mock_session.bind_user.assert_not_called()


@pytest.mark.asyncio
async def test_register_invalid_input_never_touches_store(mock_uow, mock_session):
    use_case = RegisterUseCase(mock_uow, mock_session)
    result = await use_case.execute(make_command(email="invalid"))

    assert result.is_err()
    assert result.error.field == "email"
    mock_uow.users.create.assert_not_called()
    mock_session.bind_user.assert_not_called()


def test_user_entity_defaults():
    user = User(username="bob", email="bob@example.com", password="x")

    assert user.id is None
    assert user.created_at is not None
    assert user.updated_at is not None
