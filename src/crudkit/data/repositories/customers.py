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
"""Customer data access."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.relational.sqlalchemy.repository import Repository
from crudkit.data.specification import Specification
from crudkit.domain.entities import Customer, Sale, null_customer

logger = logging.getLogger(__name__)


class CustomerRepository(Repository[Customer, int]):
    """Customers with their sales and each sale's product eagerly loaded."""

    def base_statement(self) -> Select[Any]:
        return select(Customer).options(selectinload(Customer.sales).selectinload(Sale.product))

    async def get_customers_with_pagination(
        self,
        specification: Specification[Customer],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[Customer]:
        """Customers matching *specification*, in its order, sliced to one page.

        With the defaults every matching customer is returned.
        """
        return await self.find_all_by_spec_paged(specification, current_page, page_size)

    async def get_customer(self, customer_id: int) -> Customer:
        """The customer with *customer_id*, or the null customer when absent."""
        customer = await self.find_by_id(customer_id)
        if customer is None:
            logger.debug("Customer %s not found", customer_id)
            return null_customer()
        return customer
