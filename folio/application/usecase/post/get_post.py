"""Get post use case."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.model import PostDetail
from folio.domain.service import PostService


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str = Field(min_length=1)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostDetail


class GetPostUseCase:
    """Use case for retrieving a post and its content by slug."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If no published post has the slug
        """
        with logfire.span("get_post.execute", slug=request.slug):
            post = await self.post_service.get_post(request.slug)
            return GetPostResponse(post=post)
