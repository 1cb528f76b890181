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
"""Deferred expressions shared by the in-memory and SQL query targets.

An expression is a plain callable that receives a *root* and returns a
value.  The same callable serves two execution targets:

* **in memory**: the root is an entity instance and the expression
  returns a Python value (``bool`` for predicates, any comparable value for
  sort keys);
* **SQL**: the root is the mapped entity class, so attribute access yields
  SQLAlchemy column expressions and the callable returns a
  ``ColumnElement`` that is rendered into the statement.

Example::

    by_city = lambda root: root.city == "Lisbon"

    by_city(customer)   # -> True / False
    by_city(Customer)   # -> customers.city = :city_1

The helpers below combine expression results without knowing which target
produced them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

import sqlalchemy as sa
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql import ClauseElement, ColumnElement

Expression: TypeAlias = Callable[[Any], Any]


def is_symbolic(value: Any) -> bool:
    """Whether *value* is a SQL construct rather than a concrete Python value."""
    return isinstance(value, ClauseElement) or hasattr(value, "__clause_element__")


def is_symbolic_root(root: Any) -> bool:
    """Whether *root* is a mapped class (SQL target) rather than an entity instance."""
    return isinstance(root, type)


# ---------------------------------------------------------------------------
# Base expressions
# ---------------------------------------------------------------------------


def always_true(root: Any) -> Any:
    """Predicate that matches every entity."""
    return sa.true() if is_symbolic_root(root) else True


def no_key(root: Any) -> Any:
    """Sort key that does not distinguish any two entities."""
    return sa.null() if is_symbolic_root(root) else None


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def conjoin(left: Expression, right: Expression) -> Expression:
    """Predicate true when both *left* and *right* hold for the same root.

    In memory the right side is not evaluated when the left side is false.
    """

    def expression(root: Any) -> Any:
        lhs = left(root)
        if not is_symbolic(lhs) and not lhs:
            return False
        rhs = right(root)
        if is_symbolic(lhs) or is_symbolic(rhs):
            return sa.and_(lhs, rhs)
        return bool(rhs)

    return expression


def disjoin(left: Expression, right: Expression) -> Expression:
    """Predicate true when either *left* or *right* holds for the same root."""

    def expression(root: Any) -> Any:
        lhs = left(root)
        if not is_symbolic(lhs) and lhs:
            return True
        rhs = right(root)
        if is_symbolic(lhs) or is_symbolic(rhs):
            return sa.or_(lhs, rhs)
        return bool(rhs)

    return expression


def negate(operand: Expression) -> Expression:
    """Predicate true when *operand* does not hold."""

    def expression(root: Any) -> Any:
        value = operand(root)
        if is_symbolic(value):
            return sa.not_(value)
        return not value

    return expression


# ---------------------------------------------------------------------------
# Value predicates
# ---------------------------------------------------------------------------


def contains(haystack: Any, needle: str | None, *, case_sensitive: bool = True) -> Any:
    """Substring test usable on both targets.

    ``None`` or an empty *needle* matches everything, including rows whose
    *haystack* is ``NULL``.
    """
    symbolic = is_symbolic(haystack)
    if not needle:
        return sa.true() if symbolic else True
    if symbolic:
        if case_sensitive:
            return CaseSensitiveContains(haystack, needle)
        return haystack.icontains(needle, autoescape=True)
    if haystack is None:
        return False
    if case_sensitive:
        return needle in haystack
    return needle.casefold() in haystack.casefold()


class CaseSensitiveContains(ColumnElement[bool]):
    """SQL substring test that honours letter case on every dialect.

    Renders ``LIKE`` with escaped wildcards by default.  SQLite's ``LIKE``
    ignores ASCII case, so that dialect renders ``instr(haystack, needle) > 0``
    instead.  A ``NULL`` haystack never matches.
    """

    type = sa.Boolean()
    inherit_cache = False

    def __init__(self, haystack: Any, needle: str) -> None:
        self.haystack = haystack
        self.needle = needle


@compiles(CaseSensitiveContains)
def _compile_contains(element: CaseSensitiveContains, compiler: Any, **kw: Any) -> str:
    return "(%s)" % compiler.process(element.haystack.contains(element.needle, autoescape=True), **kw)


@compiles(CaseSensitiveContains, "sqlite")
def _compile_contains_sqlite(element: CaseSensitiveContains, compiler: Any, **kw: Any) -> str:
    return "(%s)" % compiler.process(sa.func.instr(element.haystack, element.needle) > 0, **kw)
