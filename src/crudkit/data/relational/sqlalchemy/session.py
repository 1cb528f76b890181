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
"""Async engine and session factory built from configuration."""

from __future__ import annotations

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from crudkit.core.config import Config
from crudkit.data.properties import DatabaseProperties
from crudkit.data.relational.sqlalchemy.entity import Base

logger = logging.getLogger(__name__)


def create_engine_from_config(config: Config) -> AsyncEngine:
    """Create an ``AsyncEngine`` from ``crudkit.database``."""
    properties = config.bind(DatabaseProperties)
    logger.info("Creating database engine for %s", make_url(properties.url).render_as_string(hide_password=True))
    return create_async_engine(properties.url, echo=properties.echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables registered on :class:`Base`."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
