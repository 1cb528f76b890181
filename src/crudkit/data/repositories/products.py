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
"""Product data access."""

from __future__ import annotations

from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.relational.sqlalchemy.repository import Repository
from crudkit.data.specification import Specification
from crudkit.domain.entities import Product


class ProductRepository(Repository[Product, int]):

    async def get_products(self) -> list[Product]:
        """Every product, unordered."""
        return await self.find_all_by_spec(Specification.ALL)

    async def get_products_with_pagination(
        self,
        specification: Specification[Product],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[Product]:
        return await self.find_all_by_spec_paged(specification, current_page, page_size)
