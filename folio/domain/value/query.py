"""Query value objects: filters, sorts, criteria and result pages.

Filters and sorts mirror the store's query language one-to-one so they can be
serialised with ``to_payload()`` and evaluated by the in-memory store.
"""

from enum import Enum
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import Field, model_validator

from folio.domain.value.common import ValueObject
from folio.domain.value.types import SortDirection, SortOrder


class FilterKind(str, Enum):
    """Property type a filter clause applies to."""

    CHECKBOX = "checkbox"
    MULTI_SELECT = "multi_select"
    TITLE = "title"
    RICH_TEXT = "rich_text"
    URL = "url"


class FilterCondition(str, Enum):
    """Matcher applied to the property value."""

    EQUALS = "equals"
    CONTAINS = "contains"


class PropertyFilter(ValueObject):
    """A single ``{property, kind, matcher}`` clause."""

    property: str
    kind: FilterKind
    condition: FilterCondition
    value: str | bool

    def to_payload(self) -> dict[str, Any]:
        return {
            "property": self.property,
            self.kind.value: {self.condition.value: self.value},
        }


class CompoundFilter(ValueObject):
    """Clauses combined with ``and`` / ``or``."""

    operator: Literal["and", "or"]
    filters: list[Union[PropertyFilter, "CompoundFilter"]] = Field(min_length=1)

    def to_payload(self) -> dict[str, Any]:
        return {self.operator: [f.to_payload() for f in self.filters]}


CompoundFilter.model_rebuild()

Filter = Union[PropertyFilter, CompoundFilter]


def all_of(*filters: Filter) -> CompoundFilter:
    """Combine clauses so that every one must match."""
    return CompoundFilter(operator="and", filters=list(filters))


def any_of(*filters: Filter) -> CompoundFilter:
    """Combine clauses so that at least one must match."""
    return CompoundFilter(operator="or", filters=list(filters))


class Sort(ValueObject):
    """Sort on either a named property or a built-in record timestamp."""

    property: str | None = None
    timestamp: Literal["created_time", "last_edited_time"] | None = None
    direction: SortDirection = SortDirection.DESCENDING

    @model_validator(mode="after")
    def validate_target(self) -> "Sort":
        """Exactly one of property/timestamp must be set."""
        if (self.property is None) == (self.timestamp is None):
            raise ValueError("Sort needs exactly one of property or timestamp")
        return self

    def to_payload(self) -> dict[str, Any]:
        if self.property is not None:
            return {"property": self.property, "direction": self.direction.value}
        return {"timestamp": self.timestamp, "direction": self.direction.value}


T = TypeVar("T")


class Page(ValueObject, Generic[T]):
    """One page of results plus the cursor to resume after it."""

    items: list[T]
    next_cursor: str | None = None


class PostCriteria(ValueObject):
    """Caller-supplied criteria for post listings.

    ``tags`` wins over ``search`` when both are given. ``page`` (offset
    pagination) and ``cursor`` (cursor pagination) are alternative traversal
    strategies and cannot be combined.
    """

    sort_order: SortOrder = SortOrder.DESC
    limit: int | None = Field(default=None, ge=1, le=100)
    tags: list[str] = []
    search: str | None = None
    cursor: str | None = None
    page: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def validate_pagination(self) -> "PostCriteria":
        """Reject page + cursor combinations."""
        if self.page is not None and self.cursor is not None:
            raise ValueError("Provide either page or cursor, not both")
        return self


class PortfolioCriteria(ValueObject):
    """Caller-supplied criteria for portfolio listings."""

    categories: list[str] = []
    technologies: list[str] = []
    limit: int | None = Field(default=None, ge=1, le=100)
