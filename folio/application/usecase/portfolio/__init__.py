"""Portfolio use cases."""

from .get_portfolio import (
    GetPortfolioRequest,
    GetPortfolioResponse,
    GetPortfolioUseCase,
)
from .get_portfolio_metadata import (
    GetPortfolioMetadataRequest,
    GetPortfolioMetadataResponse,
    GetPortfolioMetadataUseCase,
)
from .list_portfolios import (
    ListPortfoliosRequest,
    ListPortfoliosResponse,
    ListPortfoliosUseCase,
)

__all__ = [
    "GetPortfolioRequest",
    "GetPortfolioResponse",
    "GetPortfolioUseCase",
    "GetPortfolioMetadataRequest",
    "GetPortfolioMetadataResponse",
    "GetPortfolioMetadataUseCase",
    "ListPortfoliosRequest",
    "ListPortfoliosResponse",
    "ListPortfoliosUseCase",
]
