# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""One page of query results plus pagination metadata."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

from crudkit.data.queryable import AsyncQueryable
from crudkit.kernel.exceptions import InvalidPageRequestException

T = TypeVar("T")
U = TypeVar("U")

UNPAGED = 0
"""Page number meaning "no pagination, return every item"."""


def _check_page_request(current_page: int, page_size: int) -> None:
    if current_page < 0:
        raise InvalidPageRequestException(
            f"current_page must be >= 1 (or {UNPAGED} for all items), got {current_page}",
            current_page=current_page,
            page_size=page_size,
        )
    if current_page != UNPAGED and page_size < 1:
        raise InvalidPageRequestException(
            f"page_size must be >= 1, got {page_size}",
            current_page=current_page,
            page_size=page_size,
        )


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """A page of results from a filtered, ordered query.

    Attributes:
        items: The items on this page.
        total_count: Number of matching items across all pages.
        current_page: Current page number (1-based), or ``UNPAGED``.
        page_size: Maximum items per page.

    When ``current_page`` is ``UNPAGED`` the list holds every matching item;
    ``total_pages`` still reports how many pages of ``page_size`` they
    would fill, or one page when ``page_size`` is not positive, and
    ``has_next`` compares against that count like any other page.
    """

    items: list[T]
    total_count: int
    current_page: int
    page_size: int

    def __post_init__(self) -> None:
        _check_page_request(self.current_page, self.page_size)

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total_count == 0:
            return 0
        if self.page_size <= 0:
            return 1
        return math.ceil(self.total_count / self.page_size)

    @property
    def is_paged(self) -> bool:
        return self.current_page != UNPAGED

    @property
    def has_previous(self) -> bool:
        """Whether there is a previous page."""
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        """Whether there is a next page."""
        return self.current_page < self.total_pages

    def map(self, func: Callable[[T], U]) -> PagedList[U]:
        """Transform items using a mapping function, preserving pagination metadata."""
        return PagedList(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            current_page=self.current_page,
            page_size=self.page_size,
        )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self.items[index]

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, source: Iterable[T], current_page: int = UNPAGED, page_size: int = 0) -> PagedList[T]:
        """Page an in-memory sequence.

        Raises:
            InvalidPageRequestException: ``current_page`` is negative, or a
                real page is requested with ``page_size < 1``.
        """
        _check_page_request(current_page, page_size)
        items = list(source)
        if current_page == UNPAGED:
            page_items = items
        else:
            offset = (current_page - 1) * page_size
            page_items = items[offset : offset + page_size]
        return cls(items=page_items, total_count=len(items), current_page=current_page, page_size=page_size)

    @classmethod
    async def create_async(
        cls,
        source: AsyncQueryable[T],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[T]:
        """Page a deferred query.

        The total is counted on the unsliced query; only the requested page
        is fetched.  Data-source errors propagate unchanged.

        Raises:
            InvalidPageRequestException: same rules as :meth:`create`.
        """
        _check_page_request(current_page, page_size)
        total_count = await source.count()
        if current_page == UNPAGED:
            page_items = await source.to_list()
        else:
            offset = (current_page - 1) * page_size
            page_items = await source.skip(offset).take(page_size).to_list()  # type: ignore[attr-defined]
        return cls(items=page_items, total_count=total_count, current_page=current_page, page_size=page_size)
