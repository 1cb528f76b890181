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
"""List customers with search, sorting and pagination."""

from __future__ import annotations

from typing import Protocol

import structlog

from crudkit.application.customers.models import CustomerForListDto, CustomerResourceParameter, SaleForListDto
from crudkit.application.customers.specifications import (
    CustomerByNameSpecification,
    SortCustomerByNameSpecification,
)
from crudkit.application.mapper import Mapper
from crudkit.application.resource_parameters import CollectionResource, PaginationMetadata
from crudkit.application.result import Result
from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.properties import PagingProperties
from crudkit.data.specification import Specification
from crudkit.domain.entities import Customer, Sale
from crudkit.kernel.exceptions import ValidationException

logger = structlog.get_logger("crudkit.application.customers")


class CustomerPagingSource(Protocol):
    async def get_customers_with_pagination(
        self,
        specification: Specification[Customer],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[Customer]: ...


def customer_mapper() -> Mapper:
    """Mapper configured for the customer list DTOs."""
    mapper = Mapper()
    mapper.add_mapping(Sale, SaleForListDto, computed={"product_name": lambda sale: sale.product.name})
    mapper.add_mapping(
        Customer,
        CustomerForListDto,
        computed={"sales": lambda customer: mapper.map_list(customer.sales, SaleForListDto)},
    )
    return mapper


class GetCustomers:
    """Application service returning one page of customers.

    Args:
        customers: Anything that pages customers by specification, normally
            a :class:`~crudkit.data.repositories.CustomerRepository`.
        mapper: Entity-to-DTO mapper; defaults to :func:`customer_mapper`.
        paging: Page size limits; requests above ``max_page_size`` are capped.
    """

    def __init__(
        self,
        customers: CustomerPagingSource,
        mapper: Mapper | None = None,
        paging: PagingProperties | None = None,
    ) -> None:
        self._customers = customers
        self._mapper = mapper or customer_mapper()
        self._paging = paging or PagingProperties()

    async def execute(self, parameter: CustomerResourceParameter) -> Result[CollectionResource[CustomerForListDto]]:
        specification = self.create_specification(parameter)
        page_size = parameter.page_size
        if parameter.current_page != UNPAGED:
            page_size = self._paging.clamp(parameter.page_size)

        try:
            customers = await self._customers.get_customers_with_pagination(
                specification, parameter.current_page, page_size
            )
        except ValidationException as exc:
            logger.warning("customers.invalid_request", error=str(exc), code=exc.code, **exc.context)
            return Result.fail(str(exc), code=exc.code)

        logger.info(
            "customers.listed",
            search_text=parameter.search_text,
            current_page=customers.current_page,
            page_size=customers.page_size,
            total_count=customers.total_count,
        )

        resource = CollectionResource[CustomerForListDto](
            pagination=PaginationMetadata.from_paged_list(customers),
            results=self._mapper.map_list(customers, CustomerForListDto),
        )
        return Result.ok(resource)

    @staticmethod
    def create_specification(parameter: CustomerResourceParameter) -> Specification[Customer]:
        """Search by full name, then sort by last name.

        Only ``sort_by="name"`` honours ``is_ascending``; any other value
        sorts ascending by last name.
        """
        specification = Specification.ALL.and_(CustomerByNameSpecification(parameter.search_text))

        if parameter.sort_by.lower() == "name" and not parameter.is_ascending:
            return specification.sort_descending(SortCustomerByNameSpecification())
        return specification.sort_ascending(SortCustomerByNameSpecification())
