from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from src.api.error import NotAuthenticatedError


class IsAuthenticated(BasePermission):
    """Allows the field only when the session holds a user id"""

    message = "not authenticated"
    error_class = NotAuthenticatedError

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.session.user_id is not None
