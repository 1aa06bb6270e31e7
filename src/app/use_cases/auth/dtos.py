"""
Authentication Use Case DTOs (Data Transfer Objects)

Commands accepted by the auth use cases.
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """
    Register command - represents a registration attempt

    Created by the API layer from the `register(options)` mutation.
    Field values are checked by validate_register, not by pydantic, so
    that failures come back as field errors.
    """

    username: str
    email: str
    password: str
