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
"""Deferred queries over SQLAlchemy 2.0 ``Select`` statements.

Expressions are called with the mapped entity class as root, so
``lambda root: root.last_name`` becomes the ``last_name`` column and
predicates become WHERE clauses.

Example::

    query = SqlAlchemyQueryable(Customer, session)
    query = query.where(lambda c: c.last_name == "Smith").order_by(lambda c: c.first_name)
    customers = await query.to_list()
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.data.expression import Expression

T = TypeVar("T")


class SqlAlchemyQueryable(Generic[T]):
    """Queryable backed by a SQLAlchemy ``Select`` and an ``AsyncSession``.

    Slicing is tracked apart from the statement and folded in as a single
    OFFSET/LIMIT pair, so ``take(3).skip(1)`` yields rows 2 and 3 exactly
    as the in-memory queryable does.  Filtering or ordering a sliced query
    raises ``TypeError``.

    Args:
        model: The mapped entity class passed to expressions as root.
        session: Session used when the query is materialized.
        statement: Base statement; defaults to ``select(model)``.  Use it to
            add loader options or joins before specifications are applied.
    """

    def __init__(
        self,
        model: type[T],
        session: AsyncSession | None = None,
        statement: Select[Any] | None = None,
        *,
        _ordered: bool = False,
        _offset: int = 0,
        _limit: int | None = None,
    ) -> None:
        self._model = model
        self._session = session
        self._statement: Select[Any] = statement if statement is not None else select(model)
        self._ordered = _ordered
        self._offset = _offset
        self._limit = _limit

    @property
    def statement(self) -> Select[Any]:
        """The composed ``Select`` (not yet executed)."""
        statement = self._statement
        if self._offset:
            statement = statement.offset(self._offset)
        if self._limit is not None:
            statement = statement.limit(self._limit)
        return statement

    @property
    def is_sliced(self) -> bool:
        return self._offset > 0 or self._limit is not None

    def _derive(
        self,
        statement: Select[Any] | None = None,
        *,
        ordered: bool | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> SqlAlchemyQueryable[T]:
        return SqlAlchemyQueryable(
            self._model,
            self._session,
            self._statement if statement is None else statement,
            _ordered=self._ordered if ordered is None else ordered,
            _offset=self._offset if offset is None else offset,
            _limit=self._limit if limit is None else limit,
        )

    def _require_unsliced(self, operation: str) -> None:
        if self.is_sliced:
            raise TypeError(f"{operation}() must come before skip() and take()")

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("No AsyncSession configured; pass a session to SqlAlchemyQueryable")
        return self._session

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def where(self, predicate: Expression) -> SqlAlchemyQueryable[T]:
        self._require_unsliced("where")
        return self._derive(self._statement.where(predicate(self._model)))

    def order_by(self, key: Expression, *, descending: bool = False) -> SqlAlchemyQueryable[T]:
        self._require_unsliced("order_by")
        column = key(self._model)
        # order_by(None) drops any earlier ordering: the new key is primary.
        statement = self._statement.order_by(None).order_by(desc(column) if descending else asc(column))
        return self._derive(statement, ordered=True)

    def then_by(self, key: Expression, *, descending: bool = False) -> SqlAlchemyQueryable[T]:
        if not self._ordered:
            raise TypeError("then_by() must follow order_by()")
        self._require_unsliced("then_by")
        column = key(self._model)
        return self._derive(self._statement.order_by(desc(column) if descending else asc(column)))

    def skip(self, count: int) -> SqlAlchemyQueryable[T]:
        count = max(count, 0)
        # Skipping inside a taken window shrinks the window.
        limit = None if self._limit is None else max(self._limit - count, 0)
        return self._derive(offset=self._offset + count, limit=limit)

    def take(self, count: int) -> SqlAlchemyQueryable[T]:
        count = max(count, 0)
        limit = count if self._limit is None else min(self._limit, count)
        return self._derive(limit=limit)

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    async def count(self) -> int:
        """Count rows this query would return, ignoring ordering."""
        session = self._require_session()
        statement = self.statement if self.is_sliced else self._statement.order_by(None)
        count_stmt = select(func.count()).select_from(statement.subquery())
        result = await session.execute(count_stmt)
        return result.scalar_one()

    async def to_list(self) -> list[T]:
        session = self._require_session()
        result = await session.execute(self.statement)
        return list(result.scalars().unique().all())
