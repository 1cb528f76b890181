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
"""Customer queries: the paged list and single-customer detail."""

from crudkit.application.customers.get_customer import GetCustomer, customer_detail_mapper
from crudkit.application.customers.get_customers import GetCustomers, customer_mapper
from crudkit.application.customers.models import (
    CustomerForDetailDto,
    CustomerForListDto,
    CustomerResourceParameter,
    SaleForDetailDto,
    SaleForListDto,
)
from crudkit.application.customers.specifications import (
    CustomerByNameSpecification,
    SortCustomerByNameSpecification,
)

__all__ = [
    "CustomerByNameSpecification",
    "CustomerForDetailDto",
    "CustomerForListDto",
    "CustomerResourceParameter",
    "GetCustomer",
    "GetCustomers",
    "SaleForDetailDto",
    "SaleForListDto",
    "SortCustomerByNameSpecification",
    "customer_detail_mapper",
    "customer_mapper",
]
