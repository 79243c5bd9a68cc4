"""Post use cases."""

from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .query_posts import QueryPostsRequest, QueryPostsResponse, QueryPostsUseCase

__all__ = [
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "QueryPostsRequest",
    "QueryPostsResponse",
    "QueryPostsUseCase",
]
