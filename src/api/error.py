from typing import Any, Dict, Optional

from graphql import GraphQLError

from libs.result import Error


class ClientError(Exception):
    """Caller mistake; its message is shown to the client"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; logged, and masked before reaching the client"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


class NotAuthenticatedError(GraphQLError):
    """Protected operation called without a logged in session"""

    def __init__(
        self,
        message: str = "not authenticated",
        extensions: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, extensions=extensions or {"code": "NOT_AUTHENTICATED"})
