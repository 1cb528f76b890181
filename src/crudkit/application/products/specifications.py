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
"""Product filter and sort specifications."""

from __future__ import annotations

from crudkit.data.expression import Expression, contains
from crudkit.data.specification import Specification
from crudkit.domain.entities import Product


class ProductByNameSpecification(Specification[Product]):
    """Products whose name contains *product_name*, ignoring case."""

    def __init__(self, product_name: str | None) -> None:
        super().__init__()
        self._product_name = product_name

    def to_bool_expression(self) -> Expression:
        name = self._product_name
        return lambda product: contains(product.name, name, case_sensitive=False)


class SortProductByNameSpecification(Specification[Product]):
    def to_object_expression(self) -> Expression:
        return lambda product: product.name
