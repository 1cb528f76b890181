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
"""Customer, product and sale entities."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from sqlalchemy.sql import ColumnElement

from crudkit.data.relational.sqlalchemy.entity import Base

NULL_CUSTOMER_ID = -1


class Customer(Base):
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str | None] = mapped_column(String(255), default=None)
    address: Mapped[str | None] = mapped_column(String(255), default=None)
    phone_number: Mapped[str | None] = mapped_column(String(50), default=None)

    sales: Mapped[list[Sale]] = relationship(back_populates="customer", cascade="all, delete-orphan")

    @hybrid_property
    def full_name(self) -> str:
        """First and last name separated by a space; a SQL expression at class level."""
        return f"{self.first_name} {self.last_name}"

    @full_name.inplace.expression
    @classmethod
    def _full_name_expression(cls) -> ColumnElement[str]:
        return cls.first_name + " " + cls.last_name

    def is_empty(self) -> bool:
        """Whether this is the placeholder returned for a missing customer."""
        return self.customer_id == NULL_CUSTOMER_ID

    def __repr__(self) -> str:
        return f"Customer(customer_id={self.customer_id!r}, full_name={self.full_name!r})"


def null_customer() -> Customer:
    """Transient placeholder for a customer that does not exist."""
    return Customer(customer_id=NULL_CUSTOMER_ID, first_name="", last_name="", sales=[])


class Product(Base):
    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2))

    sales: Mapped[list[Sale]] = relationship(back_populates="product")

    def __repr__(self) -> str:
        return f"Product(product_id={self.product_id!r}, name={self.name!r})"


class Sale(Base):
    """A product sold to a customer.

    ``total_price`` is kept equal to ``unit_price * quantity`` whenever
    either operand is assigned.
    """

    __tablename__ = "sales"

    sale_id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.customer_id"))
    product_id: Mapped[int] = mapped_column(ForeignKey("products.product_id"))
    quantity: Mapped[int] = mapped_column(default=0)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"))
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))

    customer: Mapped[Customer] = relationship(back_populates="sales")
    product: Mapped[Product] = relationship(back_populates="sales")

    @validates("quantity", "unit_price")
    def _recompute_total(self, key: str, value: Any) -> Any:
        quantity = value if key == "quantity" else self.quantity
        unit_price = value if key == "unit_price" else self.unit_price
        self.total_price = Decimal(unit_price or 0) * (quantity or 0)
        return value
