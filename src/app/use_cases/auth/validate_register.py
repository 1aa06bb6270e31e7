from typing import Optional

from libs.result import Error
from .dtos import RegisterCommand


def validate_register(command: RegisterCommand) -> Optional[Error]:
    """
    Check registration input. The first failing rule wins.

    Returns:
        Error tied to the offending field, or None if the input is valid
    """
    if len(command.username) <= 2:
        return Error("USERNAME_TOO_SHORT", "length must be greater than 2", field="username")

    # '@' is how login tells an email from a username
    if "@" in command.username:
        return Error("USERNAME_HAS_AT", "username cannot include '@'", field="username")

    if "@" not in command.email:
        return Error("INVALID_EMAIL", "invalid email", field="email")

    if len(command.password) <= 3:
        return Error("PASSWORD_TOO_SHORT", "length must be greater than 3", field="password")

    return None
