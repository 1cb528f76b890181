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
"""Shared sample data and SQLite fixtures."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from crudkit.data.relational.sqlalchemy.entity import Base
from crudkit.domain.entities import Customer, Product, Sale


def make_products() -> list[Product]:
    return [
        Product(name="Keyboard", price=Decimal("49.90")),
        Product(name="Monitor", price=Decimal("199.00")),
    ]


def make_customers(products: list[Product] | None = None) -> list[Customer]:
    """Five customers: Smith, Boyce, Richardson, Showman, Renze."""
    products = products or make_products()
    first, last = products[0], products[-1]
    return [
        Customer(
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@example.com",
            phone_number="1234567890",
            address="",
            sales=[Sale(product=first, quantity=1, unit_price=first.price), Sale(product=last, quantity=1, unit_price=last.price)],
        ),
        Customer(
            first_name="Phil",
            last_name="Boyce",
            email="phil.boyce@example.com",
            phone_number="9876543210",
            address="",
            sales=[Sale(product=first, quantity=2, unit_price=first.price)],
        ),
        Customer(
            first_name="Paul",
            last_name="Richardson",
            email="customer3@example.com",
            phone_number="5555555555",
            address="",
            sales=[Sale(product=last, quantity=1, unit_price=last.price)],
        ),
        Customer(
            first_name="Will",
            last_name="Showman",
            email="customer4@example.com",
            phone_number="9999999999",
            address="",
            sales=[Sale(product=first, quantity=1, unit_price=first.price), Sale(product=last, quantity=3, unit_price=last.price)],
        ),
        Customer(
            first_name="Lara",
            last_name="Renze",
            email="customer5@example.com",
            phone_number="7777777777",
            address="",
            sales=[Sale(product=first, quantity=1, unit_price=first.price)],
        ),
    ]


@pytest.fixture
def customers() -> list[Customer]:
    return make_customers()


# ---------------------------------------------------------------------------
# SQLite (aiosqlite) fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session with the five sample customers and two products flushed."""
    session.add_all(make_customers())
    await session.flush()
    return session
