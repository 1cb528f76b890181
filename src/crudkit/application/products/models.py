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
"""Product list query parameters and DTOs."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from crudkit.application.resource_parameters import ResourceParameter


class ProductResourceParameter(ResourceParameter):
    """Query parameters for the product list; defaults to every product."""

    current_page: int = 0
    search_text: str | None = None


class ProductForListDto(BaseModel):
    product_id: int
    name: str
    price: Decimal
