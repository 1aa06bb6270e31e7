"""
User resolvers

Thin adapters from GraphQL arguments to the auth use cases. Field errors
come back as UserResponse.errors data; anything unexpected is raised.
"""

from typing import Optional

import strawberry
from strawberry.types import Info

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.schema.types import UserResponse, UsernamePasswordInput, UserType
from src.app.use_cases.auth import (
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    LoginUseCase,
    LogoutUseCase,
    MeUseCase,
    RegisterCommand,
    RegisterUseCase,
)


@strawberry.type
class UserQuery:
    @strawberry.field
    def hello(self) -> str:
        return "Successful response"

    @strawberry.field
    async def me(self, info: Info) -> Optional[UserType]:
        """Current user, or null when there is no session"""
        use_case = MeUseCase(info.context.uow)
        result = await use_case.execute(info.context.session.user_id)

        if result.is_err():
            raise ServerError(result.error)

        if result.value is None:
            return None
        return UserType.from_entity(result.value)


@strawberry.type
class UserMutation:
    @strawberry.mutation
    async def register(self, options: UsernamePasswordInput, info: Info) -> UserResponse:
        command = RegisterCommand(
            username=options.username, email=options.email, password=options.password
        )
        use_case = RegisterUseCase(info.context.uow, info.context.session)
        result = await use_case.execute(command)
        return UserResponse.from_result(result)

    @strawberry.mutation
    async def login(self, username_or_email: str, password: str, info: Info) -> UserResponse:
        use_case = LoginUseCase(info.context.uow, info.context.session)
        result = await use_case.execute(username_or_email, password)
        return UserResponse.from_result(result)

    @strawberry.mutation
    async def logout(self, info: Info) -> bool:
        use_case = LogoutUseCase(info.context.session)
        result = await use_case.execute()
        return result.value

    @strawberry.mutation
    async def forgot_password(self, email: str, info: Info) -> bool:
        use_case = ForgotPasswordUseCase(
            info.context.uow,
            info.context.store,
            info.context.mailer,
            frontend_url=ApplicationConfig.FRONTEND_URL,
            token_ttl_seconds=ApplicationConfig.RESET_TOKEN_TTL_SECONDS,
            schedule=info.context.background_tasks.add_task,
        )
        result = await use_case.execute(email)

        if result.is_err():
            raise ServerError(result.error)

        return result.value

    @strawberry.mutation
    async def change_password(self, token: str, new_password: str, info: Info) -> UserResponse:
        use_case = ChangePasswordUseCase(
            info.context.uow, info.context.store, info.context.session
        )
        result = await use_case.execute(token, new_password)
        return UserResponse.from_result(result)
