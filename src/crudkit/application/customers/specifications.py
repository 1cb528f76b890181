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
"""Customer filter and sort specifications."""

from __future__ import annotations

from crudkit.data.expression import Expression, contains
from crudkit.data.specification import Specification
from crudkit.domain.entities import Customer


class CustomerByNameSpecification(Specification[Customer]):
    """Customers whose full name contains *customer_name*.

    ``None`` or ``""`` matches every customer.
    """

    def __init__(self, customer_name: str | None, *, case_sensitive: bool = True) -> None:
        super().__init__()
        self._customer_name = customer_name
        self._case_sensitive = case_sensitive

    def to_bool_expression(self) -> Expression:
        name, case_sensitive = self._customer_name, self._case_sensitive
        return lambda customer: contains(customer.full_name, name, case_sensitive=case_sensitive)


class SortCustomerByNameSpecification(Specification[Customer]):
    """Sort key: last name."""

    def to_object_expression(self) -> Expression:
        return lambda customer: customer.last_name
