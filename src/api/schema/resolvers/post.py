from typing import List, Optional

import strawberry
from strawberry.types import Info

from libs.result import Error
from src.api.error import ClientError, NotAuthenticatedError, ServerError
from src.api.schema.permissions import IsAuthenticated
from src.api.schema.types import PostInput, PostType
from src.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)


@strawberry.type
class PostQuery:
    @strawberry.field
    async def posts(
        self, limit: int, info: Info, cursor: Optional[str] = None
    ) -> List[PostType]:
        """Newest posts first, at most 50, older than `cursor` when given"""
        use_case = ListPostsUseCase(info.context.uow)
        result = await use_case.execute(limit, cursor)

        if result.is_err():
            error = result.error
            if error.code == "INVALID_CURSOR":
                raise ClientError(Error(error.code, "invalid cursor", field="cursor"))
            raise ServerError(error)

        return [PostType.from_entity(post) for post in result.value]

    @strawberry.field
    async def post(self, id: int, info: Info) -> Optional[PostType]:
        use_case = GetPostUseCase(info.context.uow)
        result = await use_case.execute(id)

        if result.is_err():
            raise ServerError(result.error)

        if result.value is None:
            return None
        return PostType.from_entity(result.value)


@strawberry.type
class PostMutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_post(self, input: PostInput, info: Info) -> PostType:
        command = CreatePostCommand(title=input.title, text=input.text)
        use_case = CreatePostUseCase(info.context.uow)
        result = await use_case.execute(command, info.context.session.user_id)

        if result.is_err():
            error = result.error
            if error.code == "NOT_AUTHENTICATED":
                raise NotAuthenticatedError(error.message)
            raise ServerError(error)

        return PostType.from_entity(result.value)

    @strawberry.mutation
    async def update_post(
        self,
        id: int,
        info: Info,
        title: Optional[str] = strawberry.UNSET,
    ) -> Optional[PostType]:
        # Omitted and null both mean "leave the title alone"; "" is a real value
        new_title = None if title is strawberry.UNSET else title

        use_case = UpdatePostUseCase(info.context.uow)
        result = await use_case.execute(id, new_title)

        if result.is_err():
            raise ServerError(result.error)

        if result.value is None:
            return None
        return PostType.from_entity(result.value)

    @strawberry.mutation
    async def delete_post(self, id: int, info: Info) -> bool:
        use_case = DeletePostUseCase(info.context.uow)
        result = await use_case.execute(id)

        if result.is_err():
            raise ServerError(result.error)

        return result.value
