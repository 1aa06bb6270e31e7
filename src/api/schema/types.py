"""
GraphQL object and input types.

Entities are never exposed directly. Each output type has a from_entity
mapping that decides which columns reach the API and under which name
(strawberry camel-cases the Python names):

    users.id          -> User.id
    users.username    -> User.username
    users.email       -> User.email
    users.password    -> (never exposed)
    users.created_at  -> User.createdAt  (epoch ms string)
    users.updated_at  -> User.updatedAt  (epoch ms string)

    posts.id          -> Post.id
    posts.title       -> Post.title
    posts.text        -> Post.text, Post.textSnippet
    posts.points      -> Post.points
    posts.creator_id  -> Post.creatorId
    posts.created_at  -> Post.createdAt  (epoch ms string, usable as a cursor)
    posts.updated_at  -> Post.updatedAt  (epoch ms string)
"""

from typing import List, Optional

import strawberry

from libs.result import Result
from src.app.use_cases.posts.cursor import encode_cursor
from src.domain.constants import TEXT_SNIPPET_LENGTH
from src.domain.entities import Post, User


@strawberry.type
class FieldError:
    field: str
    message: str


@strawberry.type(name="User")
class UserType:
    id: int
    username: str
    email: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserType":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=encode_cursor(user.created_at),
            updated_at=encode_cursor(user.updated_at),
        )


@strawberry.type(name="Post")
class PostType:
    id: int
    title: str
    text: str
    points: int
    creator_id: int
    created_at: str
    updated_at: str

    @strawberry.field
    def text_snippet(self) -> str:
        """First characters of the body, for feed listings"""
        return self.text[:TEXT_SNIPPET_LENGTH]

    @classmethod
    def from_entity(cls, post: Post) -> "PostType":
        return cls(
            id=post.id,
            title=post.title,
            text=post.text,
            points=post.points,
            creator_id=post.creator_id,
            created_at=encode_cursor(post.created_at),
            updated_at=encode_cursor(post.updated_at),
        )


@strawberry.type
class UserResponse:
    """Either field errors or the user, never both"""

    errors: Optional[List[FieldError]] = None
    user: Optional[UserType] = None

    @classmethod
    def from_result(cls, result: Result[User]) -> "UserResponse":
        if result.is_err():
            error = result.error
            return cls(errors=[FieldError(field=error.field, message=error.message)])
        return cls(user=UserType.from_entity(result.value))


@strawberry.input
class UsernamePasswordInput:
    username: str
    email: str
    password: str


@strawberry.input
class PostInput:
    title: str
    text: str
