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
"""List products."""

from __future__ import annotations

from typing import Protocol

import structlog

from crudkit.application.mapper import Mapper
from crudkit.application.products.models import ProductForListDto, ProductResourceParameter
from crudkit.application.products.specifications import ProductByNameSpecification, SortProductByNameSpecification
from crudkit.application.resource_parameters import CollectionResource, PaginationMetadata
from crudkit.application.result import Result
from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.properties import PagingProperties
from crudkit.data.specification import Specification
from crudkit.domain.entities import Product
from crudkit.kernel.exceptions import ValidationException

logger = structlog.get_logger("crudkit.application.products")


class ProductPagingSource(Protocol):
    async def get_products_with_pagination(
        self,
        specification: Specification[Product],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[Product]: ...


class GetProducts:
    """Application service listing products sorted by name.

    Without a parameter every product is returned on a single unpaged list.
    """

    def __init__(
        self,
        products: ProductPagingSource,
        mapper: Mapper | None = None,
        paging: PagingProperties | None = None,
    ) -> None:
        self._products = products
        self._mapper = mapper or Mapper()
        self._paging = paging or PagingProperties()

    async def execute(
        self, parameter: ProductResourceParameter | None = None
    ) -> Result[CollectionResource[ProductForListDto]]:
        parameter = parameter or ProductResourceParameter()
        specification = Specification.ALL.and_(ProductByNameSpecification(parameter.search_text))
        if parameter.is_ascending:
            specification = specification.sort_ascending(SortProductByNameSpecification())
        else:
            specification = specification.sort_descending(SortProductByNameSpecification())

        page_size = parameter.page_size
        if parameter.current_page != UNPAGED:
            page_size = self._paging.clamp(page_size)

        try:
            products = await self._products.get_products_with_pagination(
                specification, parameter.current_page, page_size
            )
        except ValidationException as exc:
            logger.warning("products.invalid_request", error=str(exc), code=exc.code)
            return Result.fail(str(exc), code=exc.code)

        logger.info("products.listed", total_count=products.total_count, current_page=products.current_page)
        return Result.ok(
            CollectionResource[ProductForListDto](
                pagination=PaginationMetadata.from_paged_list(products),
                results=self._mapper.map_list(products, ProductForListDto),
            )
        )
