"""Portfolio entry projection."""

from pydantic import Field

from folio.domain.model.block import Block
from folio.domain.model.common import DomainModel
from folio.domain.value import PageId


class Portfolio(DomainModel):
    """Portfolio project shown on the portfolio page."""

    id: PageId
    title: str
    cover_image: str | None = None
    categories: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    demo_url: str = ""
    github_url: str = ""


class PortfolioDetail(Portfolio):
    """Portfolio entry with its normalized content tree attached."""

    content: list[Block] = Field(default_factory=list)
