import logging

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.tools import merge_types

from src.api.error import ClientError
from src.api.schema.resolvers.post import PostMutation, PostQuery
from src.api.schema.resolvers.user import UserMutation, UserQuery

logger = logging.getLogger(__name__)

Query = merge_types("Query", (UserQuery, PostQuery))
Mutation = merge_types("Mutation", (UserMutation, PostMutation))


def should_mask_error(error: GraphQLError) -> bool:
    """Hide everything except client errors and GraphQL-level errors"""
    original = error.original_error
    if original is None:
        # Parse/validation errors carry no original exception
        return False
    if isinstance(original, ClientError):
        logger.warning(f"Client error: {original.base_error.code}")
        return False
    if isinstance(original, GraphQLError):
        return False
    return True


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[lambda: MaskErrors(should_mask_error=should_mask_error)],
)
