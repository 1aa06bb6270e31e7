"""
Authentication Use Cases

Registration, login/logout, session introspection and password reset.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .me_use_case import MeUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .change_password_use_case import ChangePasswordUseCase
from .validate_register import validate_register
from .dtos import RegisterCommand

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "MeUseCase",
    "ForgotPasswordUseCase",
    "ChangePasswordUseCase",
    # Validation
    "validate_register",
    # DTOs - Commands
    "RegisterCommand",
]
