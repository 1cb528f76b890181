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
"""Tests for PagedList."""

from __future__ import annotations

import pytest

from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.queryable import InMemoryQueryable
from crudkit.kernel.exceptions import InvalidPageRequestException, ValidationException

ITEMS = ["a", "b", "c", "d", "e"]


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    @pytest.mark.parametrize(
        ("page", "expected", "has_previous", "has_next"),
        [
            (1, ["a", "b"], False, True),
            (2, ["c", "d"], True, True),
            (3, ["e"], True, False),
        ],
    )
    def test_pages_of_two(self, page, expected, has_previous, has_next) -> None:
        paged = PagedList.create(ITEMS, page, 2)
        assert paged.items == expected
        assert paged.total_count == 5
        assert paged.total_pages == 3
        assert paged.current_page == page
        assert paged.page_size == 2
        assert paged.has_previous is has_previous
        assert paged.has_next is has_next

    def test_page_past_the_end_is_empty(self) -> None:
        paged = PagedList.create(ITEMS, 4, 2)
        assert paged.items == []
        assert paged.total_count == 5
        assert paged.has_next is False
        assert paged.has_previous is True

    def test_unpaged_returns_everything(self) -> None:
        paged = PagedList.create(ITEMS)
        assert paged.items == ITEMS
        assert paged.current_page == UNPAGED
        assert paged.total_pages == 1
        assert paged.is_paged is False
        assert paged.has_next is True
        assert paged.has_previous is False

    def test_unpaged_with_size_reports_page_count(self) -> None:
        paged = PagedList.create(ITEMS, UNPAGED, 2)
        assert paged.items == ITEMS
        assert paged.total_pages == 3
        assert paged.has_next == (paged.current_page < paged.total_pages)
        assert paged.has_next is True

    def test_empty_source(self) -> None:
        paged = PagedList.create([], 1, 10)
        assert paged.items == []
        assert paged.total_count == 0
        assert paged.total_pages == 0
        assert paged.has_next is False
        assert paged.has_previous is False

    def test_page_size_larger_than_total(self) -> None:
        paged = PagedList.create(ITEMS, 1, 50)
        assert paged.items == ITEMS
        assert paged.total_pages == 1

    def test_accepts_any_iterable(self) -> None:
        paged = PagedList.create(iter(ITEMS), 2, 3)
        assert paged.items == ["d", "e"]
        assert paged.total_count == 5


# ---------------------------------------------------------------------------
# Invalid requests
# ---------------------------------------------------------------------------


class TestInvalidRequests:
    def test_negative_page(self) -> None:
        with pytest.raises(InvalidPageRequestException) as exc_info:
            PagedList.create(ITEMS, -1, 2)
        assert exc_info.value.code == "PAGING_001"
        assert exc_info.value.context == {"current_page": -1, "page_size": 2}

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_non_positive_page_size_when_paged(self, page_size) -> None:
        with pytest.raises(InvalidPageRequestException):
            PagedList.create(ITEMS, 1, page_size)

    def test_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationException):
            PagedList.create(ITEMS, -2, 10)

    def test_direct_construction_is_validated(self) -> None:
        with pytest.raises(InvalidPageRequestException):
            PagedList(items=[], total_count=0, current_page=1, page_size=0)


# ---------------------------------------------------------------------------
# Sequence behaviour
# ---------------------------------------------------------------------------


class TestSequence:
    def test_len_iter_and_index(self) -> None:
        paged = PagedList.create(ITEMS, 1, 3)
        assert len(paged) == 3
        assert list(paged) == ["a", "b", "c"]
        assert paged[0] == "a"
        assert paged[1:] == ["b", "c"]

    def test_map_preserves_metadata(self) -> None:
        paged = PagedList.create(ITEMS, 2, 2).map(str.upper)
        assert paged.items == ["C", "D"]
        assert paged.total_count == 5
        assert paged.current_page == 2
        assert paged.page_size == 2

    def test_frozen(self) -> None:
        paged = PagedList.create(ITEMS)
        with pytest.raises(AttributeError):
            paged.total_count = 1  # type: ignore[misc]


# ---------------------------------------------------------------------------
# create_async
# ---------------------------------------------------------------------------


class CountingQueryable(InMemoryQueryable[str]):
    """Records how the source was materialized."""

    calls: list[str] = []

    async def count(self) -> int:
        CountingQueryable.calls.append("count")
        return await super().count()

    async def to_list(self) -> list[str]:
        CountingQueryable.calls.append("to_list")
        return await super().to_list()


class FailingQueryable(InMemoryQueryable[str]):
    async def count(self) -> int:
        raise ConnectionError("database unavailable")


class TestCreateAsync:
    async def test_pages_a_deferred_query(self) -> None:
        paged = await PagedList.create_async(InMemoryQueryable(ITEMS), 2, 2)
        assert paged.items == ["c", "d"]
        assert paged.total_count == 5
        assert paged.total_pages == 3

    async def test_unpaged(self) -> None:
        paged = await PagedList.create_async(InMemoryQueryable(ITEMS))
        assert paged.items == ITEMS
        assert paged.total_pages == 1

    async def test_counts_then_fetches_one_page(self) -> None:
        CountingQueryable.calls = []
        source = CountingQueryable(ITEMS)
        await PagedList.create_async(source, 1, 2)
        assert CountingQueryable.calls[0] == "count"
        assert CountingQueryable.calls.count("to_list") == 1

    async def test_validates_before_querying(self) -> None:
        with pytest.raises(InvalidPageRequestException):
            await PagedList.create_async(FailingQueryable(ITEMS), -1, 2)

    async def test_source_errors_propagate(self) -> None:
        with pytest.raises(ConnectionError, match="unavailable"):
            await PagedList.create_async(FailingQueryable(ITEMS), 1, 2)


# ---------------------------------------------------------------------------
# Navigation flags
# ---------------------------------------------------------------------------


class TestNavigationFlags:
    @pytest.mark.parametrize(
        ("page", "size", "total"),
        [(UNPAGED, 0, 5), (UNPAGED, 2, 5), (UNPAGED, 5, 5), (1, 2, 5), (3, 2, 5), (1, 10, 0), (UNPAGED, 2, 0)],
    )
    def test_has_next_compares_page_with_total_pages(self, page, size, total) -> None:
        paged = PagedList.create(range(total), page, size)
        assert paged.has_next == (paged.current_page < paged.total_pages)
        assert paged.has_previous == (paged.current_page > 1)

    def test_unpaged_single_page_has_next(self) -> None:
        # page 0 of 1 still reports the first page as ahead of it
        assert PagedList.create(ITEMS, UNPAGED, 5).has_next is True
