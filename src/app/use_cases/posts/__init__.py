"""
Post Use Cases

CRUD and cursor pagination over posts.
"""

from .list_posts_use_case import ListPostsUseCase
from .get_post_use_case import GetPostUseCase
from .create_post_use_case import CreatePostUseCase
from .update_post_use_case import UpdatePostUseCase
from .delete_post_use_case import DeletePostUseCase
from .cursor import InvalidCursorError, decode_cursor, encode_cursor
from .dtos import CreatePostCommand

__all__ = [
    # Use Cases
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    # Cursors
    "InvalidCursorError",
    "decode_cursor",
    "encode_cursor",
    # DTOs - Commands
    "CreatePostCommand",
]
