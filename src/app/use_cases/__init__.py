"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, sessions, password reset
- posts/: Post CRUD and pagination
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    LogoutUseCase,
    MeUseCase,
    ForgotPasswordUseCase,
    ChangePasswordUseCase,
)
from .posts import (
    ListPostsUseCase,
    GetPostUseCase,
    CreatePostUseCase,
    CreatePostCommand,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LogoutUseCase",
    "MeUseCase",
    "ForgotPasswordUseCase",
    "ChangePasswordUseCase",
    # Posts
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "CreatePostCommand",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
