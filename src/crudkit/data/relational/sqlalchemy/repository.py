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
"""Generic read repository that evaluates specifications with SQLAlchemy."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar, cast, get_args, get_origin

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.data.evaluator import SpecificationEvaluator
from crudkit.data.paged_list import UNPAGED, PagedList
from crudkit.data.relational.sqlalchemy.queryable import SqlAlchemyQueryable
from crudkit.data.specification import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(Generic[T, ID]):
    """Specification-driven queries for one entity type.

    Type Parameters:
        T: The entity type (any SQLAlchemy model).
        ID: The primary key type.

    Usage::

        class CustomerRepository(Repository[Customer, int]):
            def base_statement(self):
                return select(Customer).options(selectinload(Customer.sales))
    """

    _entity_type: type | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", []):
            if get_origin(base) is Repository:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    cls._entity_type = args[0]
                break

    def __init__(self, session: AsyncSession | None = None, model: type[T] | None = None) -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either Repository[Entity, ID] declaration or explicit model argument"
            )
        self._model: type[T] = cast(type[T], resolved)
        self._session = session

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("No AsyncSession configured; pass a session to the repository")
        return self._session

    def base_statement(self) -> Select[Any]:
        """Statement every query starts from; override to add loader options."""
        return select(self._model)

    def query(self) -> SqlAlchemyQueryable[T]:
        """A fresh deferred query over all entities."""
        return SqlAlchemyQueryable(self._model, self._require_session(), self.base_statement())

    async def find_by_id(self, id: ID) -> T | None:
        """Find an entity by its primary key, with the base loader options applied."""
        session = self._require_session()
        (pk,) = self._model.__mapper__.primary_key  # type: ignore[attr-defined]
        stmt = self.base_statement().where(pk == id)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def find_all_by_spec(self, specification: Specification[T]) -> list[T]:
        """All entities matching *specification*, in its sort order."""
        query = SpecificationEvaluator.get_query(self.query(), specification)
        return await query.to_list()

    async def find_all_by_spec_paged(
        self,
        specification: Specification[T],
        current_page: int = UNPAGED,
        page_size: int = 0,
    ) -> PagedList[T]:
        """One page of entities matching *specification*."""
        query = SpecificationEvaluator.get_query(self.query(), specification)
        page = await PagedList.create_async(query, current_page, page_size)
        logger.debug(
            "Paged %s: page=%d size=%d total=%d",
            self._model.__name__,
            current_page,
            page_size,
            page.total_count,
        )
        return page

    async def count(self) -> int:
        """Total number of entities."""
        return await self.query().count()
