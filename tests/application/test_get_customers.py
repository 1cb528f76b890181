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
"""Tests for the GetCustomers service."""

from __future__ import annotations

import pytest

from crudkit.application.customers import (
    CustomerForListDto,
    CustomerResourceParameter,
    GetCustomers,
)
from crudkit.data.evaluator import SpecificationEvaluator
from crudkit.data.paged_list import PagedList
from crudkit.data.properties import PagingProperties
from crudkit.data.queryable import InMemoryQueryable
from crudkit.data.repositories import CustomerRepository
from crudkit.kernel.exceptions import InvalidPageRequestException


class InMemoryCustomers:
    """Customer paging source over a plain list."""

    def __init__(self, customers):
        self.customers = customers
        self.requests: list[tuple[int, int]] = []

    async def get_customers_with_pagination(self, specification, current_page=0, page_size=0):
        self.requests.append((current_page, page_size))
        query = SpecificationEvaluator.get_query(InMemoryQueryable(self.customers), specification)
        return await PagedList.create_async(query, current_page, page_size)


@pytest.fixture
def source(customers) -> InMemoryCustomers:
    for customer_id, customer in enumerate(customers, start=1):
        customer.customer_id = customer_id
    return InMemoryCustomers(customers)


# ---------------------------------------------------------------------------
# create_specification
# ---------------------------------------------------------------------------


class TestCreateSpecification:
    def test_name_descending(self):
        spec = GetCustomers.create_specification(CustomerResourceParameter(sort_by="name", is_ascending=False))
        assert [s.ascending for s in spec.sorts] == [False]

    def test_name_ascending(self):
        spec = GetCustomers.create_specification(CustomerResourceParameter(sort_by="Name"))
        assert [s.ascending for s in spec.sorts] == [True]

    def test_other_sort_key_is_always_ascending(self):
        spec = GetCustomers.create_specification(CustomerResourceParameter(sort_by="Email", is_ascending=False))
        assert [s.ascending for s in spec.sorts] == [True]

    def test_search_text_filters(self, customers):
        spec = GetCustomers.create_specification(CustomerResourceParameter(search_text="Will"))
        assert [c.last_name for c in customers if spec.is_satisfied_by(c)] == ["Showman"]


# ---------------------------------------------------------------------------
# execute (in memory)
# ---------------------------------------------------------------------------


class TestExecuteInMemory:
    async def test_first_page(self, source):
        result = await GetCustomers(source).execute(CustomerResourceParameter(current_page=1, page_size=2))
        assert result.success
        resource = result.value
        assert [c.last_name for c in resource.results] == ["Boyce", "Renze"]
        assert resource.pagination.total_count == 5
        assert resource.pagination.total_pages == 3
        assert resource.pagination.current_page == 1
        assert resource.pagination.page_size == 2

    async def test_descending_last_page(self, source):
        parameter = CustomerResourceParameter(current_page=3, page_size=2, is_ascending=False)
        result = await GetCustomers(source).execute(parameter)
        assert [c.last_name for c in result.value.results] == ["Boyce"]

    async def test_search(self, source):
        result = await GetCustomers(source).execute(CustomerResourceParameter(search_text="Jane"))
        assert result.value.pagination.total_count == 1
        (jane,) = result.value.results
        assert isinstance(jane, CustomerForListDto)
        assert jane.email == "jane.smith@example.com"
        assert [s.product_name for s in jane.sales] == ["Keyboard", "Monitor"]

    async def test_page_size_is_capped(self, source):
        paging = PagingProperties(default_page_size=3, max_page_size=4)
        await GetCustomers(source, paging=paging).execute(CustomerResourceParameter(current_page=1, page_size=50))
        await GetCustomers(source, paging=paging).execute(CustomerResourceParameter(current_page=1, page_size=0))
        assert source.requests == [(1, 4), (1, 3)]

    async def test_unpaged_request_passes_size_through(self, source):
        result = await GetCustomers(source).execute(CustomerResourceParameter(current_page=0, page_size=0))
        assert source.requests == [(0, 0)]
        assert len(result.value.results) == 5
        assert result.value.pagination.total_pages == 1

    async def test_invalid_page_is_a_failed_result(self, source):
        result = await GetCustomers(source).execute(CustomerResourceParameter(current_page=-1))
        assert result.is_failure
        assert result.code == "PAGING_001"
        assert result.value is None

    async def test_other_errors_propagate(self):
        class Broken:
            async def get_customers_with_pagination(self, specification, current_page=0, page_size=0):
                raise ConnectionError("down")

        with pytest.raises(ConnectionError):
            await GetCustomers(Broken()).execute(CustomerResourceParameter())


# ---------------------------------------------------------------------------
# execute (SQLite)
# ---------------------------------------------------------------------------


class TestExecuteWithRepository:
    async def test_search_jane(self, seeded_session):
        service = GetCustomers(CustomerRepository(seeded_session))
        result = await service.execute(CustomerResourceParameter(current_page=1, page_size=2, search_text="Jane"))
        assert result.value.pagination.total_count == 1
        assert result.value.results[0].last_name == "Smith"

    @pytest.mark.parametrize(
        ("page", "expected"),
        [(1, ["Smith", "Showman"]), (2, ["Richardson", "Renze"]), (3, ["Boyce"])],
    )
    async def test_descending_pages(self, seeded_session, page, expected):
        service = GetCustomers(CustomerRepository(seeded_session))
        parameter = CustomerResourceParameter(current_page=page, page_size=2, is_ascending=False)
        result = await service.execute(parameter)
        assert [c.last_name for c in result.value.results] == expected
        assert result.value.pagination.total_pages == 3

    async def test_sales_are_mapped(self, seeded_session):
        service = GetCustomers(CustomerRepository(seeded_session))
        result = await service.execute(CustomerResourceParameter(search_text="Showman"))
        (will,) = result.value.results
        assert sorted(s.product_name for s in will.sales) == ["Keyboard", "Monitor"]

    async def test_repository_rejects_bad_page(self, seeded_session):
        with pytest.raises(InvalidPageRequestException):
            await CustomerRepository(seeded_session).get_customers_with_pagination(
                GetCustomers.create_specification(CustomerResourceParameter()), -5, 10
            )
