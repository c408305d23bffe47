# homegate/domain/paginated.py
from __future__ import annotations

import logging
from typing import Generic, TypeVar

from pydantic import Field, ValidationError, model_validator

from ..exceptions import DecodeError
from .base import HomegateModel
from .listing import RealEstate

log = logging.getLogger(__name__)

T = TypeVar("T")


class Paginated(HomegateModel, Generic[T]):
    """One page of results. Fetching further pages is the caller's job."""

    from_: int = Field(alias="from", ge=0)
    max_from: int = Field(ge=0)
    results: list[T]
    size: int = Field(ge=0)
    total: int = Field(ge=0)

    # from + len(results) <= max_from is left to callers.
    @model_validator(mode="after")
    def _check_page_bounds(self) -> "Paginated[T]":
        n = len(self.results)
        if n > self.size:
            raise ValueError(f"page holds {n} results but size is {self.size}")
        if self.total < n:
            raise ValueError(f"total {self.total} is smaller than page length {n}")
        return self

    @property
    def next_from(self) -> int | None:
        """Offset of the following page, or None when this page is the last."""
        nxt = self.from_ + len(self.results)
        if not self.results or nxt >= self.total or nxt > self.max_from:
            return None
        return nxt

    @property
    def has_more(self) -> bool:
        return self.next_from is not None


def parse_paginated(text: str | bytes, item_type: type[T]) -> Paginated[T]:
    try:
        page = Paginated[item_type].model_validate_json(text)  # type: ignore[valid-type]
    except ValidationError as e:
        raise DecodeError(f"invalid page of {item_type.__name__}", detail=e.errors()) from e
    log.debug("decoded page from=%d size=%d results=%d total=%d", page.from_, page.size, len(page.results), page.total)
    return page


def parse_search_result(text: str | bytes) -> Paginated[RealEstate]:
    return parse_paginated(text, RealEstate)
