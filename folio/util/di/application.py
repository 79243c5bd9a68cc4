"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.portfolio import (
    GetPortfolioMetadataUseCase,
    GetPortfolioUseCase,
    ListPortfoliosUseCase,
)
from folio.application.usecase.post import (
    GetPostUseCase,
    ListPostsUseCase,
    QueryPostsUseCase,
)
from folio.application.usecase.tag import ListTagsUseCase
from folio.domain.service import PortfolioService, PostService
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_query_posts_use_case(self, post_service: PostService) -> QueryPostsUseCase:
        """Provide query posts use case."""
        return QueryPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, post_service: PostService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(post_service=post_service)

    # Portfolio use cases
    @provide(scope=Scope.REQUEST)
    def get_list_portfolios_use_case(
        self, portfolio_service: PortfolioService
    ) -> ListPortfoliosUseCase:
        """Provide list portfolios use case."""
        return ListPortfoliosUseCase(portfolio_service=portfolio_service)

    @provide(scope=Scope.REQUEST)
    def get_get_portfolio_use_case(
        self, portfolio_service: PortfolioService
    ) -> GetPortfolioUseCase:
        """Provide get portfolio use case."""
        return GetPortfolioUseCase(portfolio_service=portfolio_service)

    @provide(scope=Scope.REQUEST)
    def get_get_portfolio_metadata_use_case(
        self, portfolio_service: PortfolioService
    ) -> GetPortfolioMetadataUseCase:
        """Provide get portfolio metadata use case."""
        return GetPortfolioMetadataUseCase(portfolio_service=portfolio_service)
