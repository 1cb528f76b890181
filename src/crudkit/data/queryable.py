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
"""Queryable ports and the in-memory adapter.

A queryable is a not-yet-executed retrieval: filter, ordering and slicing
calls return a new queryable and nothing runs until the result is
materialized.  Data adapters implement :class:`AsyncQueryable`; the SQL
adapter lives in :mod:`crudkit.data.relational.sqlalchemy.queryable`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Literal, Protocol, TypeVar, runtime_checkable

from crudkit.data.expression import Expression

T = TypeVar("T")


@runtime_checkable
class Queryable(Protocol[T]):
    """Composable, deferred query over entities of type ``T``.

    Filtering and ordering come first; ``skip`` and ``take`` then slice the
    result in call order, and a sliced query can only be sliced further.
    """

    def where(self, predicate: Expression) -> Queryable[T]: ...

    def order_by(self, key: Expression, *, descending: bool = False) -> Queryable[T]: ...

    def then_by(self, key: Expression, *, descending: bool = False) -> Queryable[T]: ...

    def skip(self, count: int) -> Queryable[T]: ...

    def take(self, count: int) -> Queryable[T]: ...


@runtime_checkable
class AsyncQueryable(Queryable[T], Protocol[T]):
    """Queryable whose results are fetched asynchronously."""

    async def count(self) -> int: ...

    async def to_list(self) -> list[T]: ...


def _null_safe(value: Any) -> tuple[bool, Any]:
    # None sorts first, matching SQLite's ascending NULL placement.
    return (value is not None, value)


@dataclass(frozen=True)
class _Stage:
    kind: Literal["where", "order", "skip", "take"]
    argument: Any


class InMemoryQueryable(Generic[T]):
    """Deferred query over an in-memory iterable.

    Stages are recorded and replayed against a fresh copy of the source on
    every materialization, so the same queryable can be counted and listed
    independently.  Sorting is stable: ``then_by`` only breaks ties left by
    the keys before it.

    Usage::

        query = (
            InMemoryQueryable(customers)
            .where(lambda c: c.last_name.startswith("S"))
            .order_by(lambda c: c.last_name)
            .then_by(lambda c: c.first_name, descending=True)
        )
        first_page = list(query.skip(0).take(10))
    """

    def __init__(self, source: Iterable[T], _stages: tuple[_Stage, ...] = ()) -> None:
        # One-shot iterators are captured so every materialization sees the same items.
        self._source: Sequence[T] = source if isinstance(source, Sequence) else list(source)
        self._stages = _stages

    def _append(self, stage: _Stage) -> InMemoryQueryable[T]:
        return type(self)(self._source, self._stages + (stage,))

    def _require_unsliced(self, operation: str) -> None:
        if any(stage.kind in ("skip", "take") for stage in self._stages):
            raise TypeError(f"{operation}() must come before skip() and take()")

    def where(self, predicate: Expression) -> InMemoryQueryable[T]:
        self._require_unsliced("where")
        return self._append(_Stage("where", predicate))

    def order_by(self, key: Expression, *, descending: bool = False) -> InMemoryQueryable[T]:
        self._require_unsliced("order_by")
        return self._append(_Stage("order", ((key, descending),)))

    def then_by(self, key: Expression, *, descending: bool = False) -> InMemoryQueryable[T]:
        if not self._stages or self._stages[-1].kind != "order":
            raise TypeError("then_by() must directly follow order_by() or then_by()")
        last = self._stages[-1]
        return type(self)(
            self._source,
            self._stages[:-1] + (_Stage("order", last.argument + ((key, descending),)),),
        )

    def skip(self, count: int) -> InMemoryQueryable[T]:
        return self._append(_Stage("skip", max(count, 0)))

    def take(self, count: int) -> InMemoryQueryable[T]:
        return self._append(_Stage("take", max(count, 0)))

    def _evaluate(self) -> list[T]:
        items = list(self._source)
        for stage in self._stages:
            if stage.kind == "where":
                items = [item for item in items if stage.argument(item)]
            elif stage.kind == "order":
                # Least significant key first; each stable pass keeps earlier ties intact.
                for key, descending in reversed(stage.argument):
                    items.sort(key=lambda item, _k=key: _null_safe(_k(item)), reverse=descending)
            elif stage.kind == "skip":
                items = items[stage.argument :]
            else:
                items = items[: stage.argument]
        return items

    def __iter__(self) -> Iterator[T]:
        return iter(self._evaluate())

    async def count(self) -> int:
        return len(self._evaluate())

    async def to_list(self) -> list[T]:
        return self._evaluate()
