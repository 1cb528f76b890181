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
"""CrudKit data: specifications, deferred queries and pagination.

Build a :class:`Specification`, apply it to a :class:`Queryable` with the
:class:`SpecificationEvaluator`, then slice the result into a
:class:`PagedList`::

    spec = Specification.ALL.and_(CustomerByNameSpecification("Jane"))
    spec = spec.sort_ascending(SortCustomerByNameSpecification())

    query = SpecificationEvaluator.get_query(repository.query(), spec)
    page = await PagedList.create_async(query, current_page=1, page_size=10)

The in-memory target (:class:`InMemoryQueryable`) and the SQLAlchemy target
(``crudkit.data.relational.SqlAlchemyQueryable``) accept the same
specifications.
"""

from crudkit.data.evaluator import SpecificationEvaluator
from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.properties import DatabaseProperties, PagingProperties
from crudkit.data.queryable import AsyncQueryable, InMemoryQueryable, Queryable
from crudkit.data.specification import (
    AndSpecification,
    IdentitySpecification,
    NotSpecification,
    OrSpecification,
    Sort,
    SortSpecification,
    Specification,
)

__all__ = [
    "AndSpecification",
    "AsyncQueryable",
    "DatabaseProperties",
    "IdentitySpecification",
    "InMemoryQueryable",
    "NotSpecification",
    "OrSpecification",
    "PagedList",
    "PagingProperties",
    "Queryable",
    "Sort",
    "SortSpecification",
    "Specification",
    "SpecificationEvaluator",
    "UNPAGED",
]
