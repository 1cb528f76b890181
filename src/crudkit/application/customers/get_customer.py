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
"""Fetch one customer with their sales."""

from __future__ import annotations

from typing import Protocol

import structlog

from crudkit.application.customers.models import CustomerForDetailDto, SaleForDetailDto
from crudkit.application.mapper import Mapper
from crudkit.application.result import Result
from crudkit.domain.entities import Customer, Sale

logger = structlog.get_logger("crudkit.application.customers")

CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"


class CustomerSource(Protocol):
    async def get_customer(self, customer_id: int) -> Customer: ...


def customer_detail_mapper() -> Mapper:
    """Mapper configured for the customer detail DTOs."""
    mapper = Mapper()
    mapper.add_mapping(Sale, SaleForDetailDto, computed={"product_name": lambda sale: sale.product.name})
    mapper.add_mapping(
        Customer,
        CustomerForDetailDto,
        computed={"sales": lambda customer: mapper.map_list(customer.sales, SaleForDetailDto)},
    )
    return mapper


class GetCustomer:
    """Application service returning a single customer.

    The source answers a missing id with the null customer (see
    :func:`~crudkit.domain.entities.null_customer`); that becomes a failed
    result rather than an exception.
    """

    def __init__(self, customers: CustomerSource, mapper: Mapper | None = None) -> None:
        self._customers = customers
        self._mapper = mapper or customer_detail_mapper()

    async def execute(self, customer_id: int) -> Result[CustomerForDetailDto]:
        customer = await self._customers.get_customer(customer_id)
        if customer.is_empty():
            logger.info("customers.not_found", customer_id=customer_id)
            return Result.fail("Customer not found.", code=CUSTOMER_NOT_FOUND)

        logger.debug("customers.fetched", customer_id=customer_id, sales=len(customer.sales))
        return Result.ok(self._mapper.map(customer, CustomerForDetailDto))
