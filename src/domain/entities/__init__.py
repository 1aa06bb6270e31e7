"""
Link Board Domain Entities

Each entity in its own file.
"""

from .user import User
from .post import Post

__all__ = [
    "User",
    "Post",
]
