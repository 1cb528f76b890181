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
"""Customer query parameters and DTOs."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from crudkit.application.resource_parameters import ResourceParameter


class CustomerResourceParameter(ResourceParameter):
    """Query parameters for the customer list.

    ``sort_by`` is matched case-insensitively; ``"name"`` sorts by last name
    in the direction given by ``is_ascending``.
    """

    sort_by: str = "Name"
    search_text: str | None = None


class SaleForListDto(BaseModel):
    product_name: str | None = None


class CustomerForListDto(BaseModel):
    customer_id: int
    first_name: str
    last_name: str
    email: str | None = None
    address: str | None = None
    sales: list[SaleForListDto] = Field(default_factory=list)


class SaleForDetailDto(BaseModel):
    sale_id: int | None = None
    date: datetime | None = None
    customer_id: int | None = None
    product_id: int | None = None
    quantity: int = 0
    unit_price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    product_name: str | None = None


class CustomerForDetailDto(BaseModel):
    """A single customer with every sale in full."""

    customer_id: int
    first_name: str
    last_name: str
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    sales: list[SaleForDetailDto] = Field(default_factory=list)
