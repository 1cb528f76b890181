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
"""Tests for SpecificationEvaluator against the in-memory queryable."""

from __future__ import annotations

import pytest

from crudkit.application.customers.specifications import (
    CustomerByNameSpecification,
    SortCustomerByNameSpecification,
)
from crudkit.data.evaluator import SpecificationEvaluator
from crudkit.data.queryable import InMemoryQueryable
from crudkit.data.specification import Specification
from crudkit.domain.entities import Customer


class SortByFirstName(Specification[Customer]):
    def to_object_expression(self):
        return lambda c: c.first_name


def _last_names(query) -> list[str]:
    return [c.last_name for c in query]


class TestGetQuery:
    def test_sorts_ascending_by_last_name(self, customers):
        spec = Specification.ALL.sort_ascending(SortCustomerByNameSpecification())
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), spec)
        assert _last_names(query) == ["Boyce", "Renze", "Richardson", "Showman", "Smith"]

    def test_sorts_descending_by_last_name(self, customers):
        spec = Specification.ALL.sort_descending(SortCustomerByNameSpecification())
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), spec)
        assert _last_names(query) == ["Smith", "Showman", "Richardson", "Renze", "Boyce"]

    def test_without_sorts_keeps_source_order(self, customers):
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), Specification.ALL)
        assert _last_names(query) == ["Smith", "Boyce", "Richardson", "Showman", "Renze"]

    def test_filters_before_sorting(self, customers):
        spec = CustomerByNameSpecification("S").sort_ascending(SortCustomerByNameSpecification())
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), spec)
        assert _last_names(query) == ["Showman", "Smith"]

    def test_later_directives_break_ties(self, customers):
        customers.append(Customer(first_name="Adam", last_name="Smith"))
        spec = (
            Specification.ALL.sort_descending(SortCustomerByNameSpecification())
            .sort_ascending(SortByFirstName())
        )
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), spec)
        assert [c.full_name for c in query][:2] == ["Adam Smith", "Jane Smith"]

    def test_result_is_still_deferred(self, customers):
        spec = Specification.ALL.sort_ascending(SortCustomerByNameSpecification())
        query = SpecificationEvaluator.get_query(InMemoryQueryable(customers), spec)
        assert _last_names(query.skip(1).take(2)) == ["Renze", "Richardson"]

    def test_rejects_none_query(self):
        with pytest.raises(TypeError):
            SpecificationEvaluator.get_query(None, Specification.ALL)  # type: ignore[type-var]

    def test_rejects_none_specification(self, customers):
        with pytest.raises(TypeError):
            SpecificationEvaluator.get_query(InMemoryQueryable(customers), None)  # type: ignore[arg-type]
