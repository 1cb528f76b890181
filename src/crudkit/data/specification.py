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
"""Composable filter and sort specifications.

A :class:`Specification` produces a predicate expression
(:meth:`~Specification.to_bool_expression`), a sort-key expression
(:meth:`~Specification.to_object_expression`), and carries an ordered list
of :class:`Sort` directives.  Concrete filters override
``to_bool_expression``; concrete sort keys override
``to_object_expression``.

Example::

    class ActiveCustomers(Specification[Customer]):
        def to_bool_expression(self):
            return lambda root: root.active == True  # noqa: E712

    class ByLastName(Specification[Customer]):
        def to_object_expression(self):
            return lambda root: root.last_name

    spec = (
        Specification.ALL
        .and_(ActiveCustomers())
        .sort_ascending(ByLastName())
    )

Combining with ``&`` / ``|`` / ``~`` is equivalent to ``and_`` / ``or_`` /
``not_``.  Specifications are never mutated: ``sort_ascending`` and
``sort_descending`` return a copy with the directive appended.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from crudkit.data.expression import Expression, always_true, conjoin, disjoin, negate, no_key

T = TypeVar("T")


def _require(value: Any, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


@dataclass(frozen=True)
class Sort(Generic[T]):
    """One sort directive: a key specification and a direction."""

    specification: SortSpecification[T]
    ascending: bool = True


class Specification(Generic[T]):
    """Filter and sort criteria for entities of type ``T``.

    The base implementation matches every entity and provides no
    distinguishing sort key.
    """

    ALL: ClassVar[Specification[Any]]

    def __init__(self) -> None:
        self._sorts: tuple[Sort[T], ...] = ()

    @property
    def sorts(self) -> tuple[Sort[T], ...]:
        """Sort directives, primary key first."""
        return self._sorts

    def to_bool_expression(self) -> Expression:
        return always_true

    def to_object_expression(self) -> Expression:
        return no_key

    def is_satisfied_by(self, candidate: T) -> bool:
        """Evaluate the predicate against a single in-memory entity."""
        return bool(self.to_bool_expression()(candidate))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def and_(self, specification: Specification[T]) -> Specification[T]:
        """Both specifications must match.

        ``ALL`` is neutral: ``ALL.and_(s)`` is ``s`` and ``s.and_(ALL)`` is ``s``.
        """
        _require(specification, "specification")
        if self is Specification.ALL:
            return specification
        if specification is Specification.ALL:
            return self
        return AndSpecification(self, specification)

    def or_(self, specification: Specification[T]) -> Specification[T]:
        """Either specification may match.

        ``ALL`` absorbs: when either side is ``ALL`` the result matches
        everything.  The other side's sort directives are kept.
        """
        _require(specification, "specification")
        if self is Specification.ALL or specification is Specification.ALL:
            return Specification.ALL._with_sorts(self._sorts + specification._sorts)
        return OrSpecification(self, specification)

    def not_(self) -> Specification[T]:
        """Negate this specification's predicate."""
        return NotSpecification(self)

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return self.and_(other)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        return self.or_(other)

    def __invert__(self) -> Specification[T]:
        return self.not_()

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort_ascending(self, specification: Specification[T]) -> Specification[T]:
        """Append an ascending sort on *specification*'s key."""
        return self._with_sorts(self._sorts + (Sort(SortSpecification(specification), ascending=True),))

    def sort_descending(self, specification: Specification[T]) -> Specification[T]:
        """Append a descending sort on *specification*'s key."""
        return self._with_sorts(self._sorts + (Sort(SortSpecification(specification), ascending=False),))

    def _with_sorts(self, sorts: tuple[Sort[T], ...]) -> Specification[T]:
        if sorts == self._sorts:
            return self
        clone = copy.copy(self)
        clone._sorts = sorts
        return clone


class IdentitySpecification(Specification[T]):
    """Matches every entity."""

    def __repr__(self) -> str:
        return "Specification.ALL" if self is Specification.ALL else "IdentitySpecification()"


class AndSpecification(Specification[T]):
    """Matches when both operands match.

    Sort directives of the operands carry over, left operand first.
    """

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        _require(left, "left")
        _require(right, "right")
        super().__init__()
        self._left = left
        self._right = right
        self._sorts = left.sorts + right.sorts

    def to_bool_expression(self) -> Expression:
        return conjoin(self._left.to_bool_expression(), self._right.to_bool_expression())


class OrSpecification(Specification[T]):
    """Matches when either operand matches."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        _require(left, "left")
        _require(right, "right")
        super().__init__()
        self._left = left
        self._right = right
        self._sorts = left.sorts + right.sorts

    def to_bool_expression(self) -> Expression:
        return disjoin(self._left.to_bool_expression(), self._right.to_bool_expression())


class NotSpecification(Specification[T]):
    """Matches when the wrapped specification does not."""

    def __init__(self, specification: Specification[T]) -> None:
        _require(specification, "specification")
        super().__init__()
        self._specification = specification
        self._sorts = specification.sorts

    def to_bool_expression(self) -> Expression:
        return negate(self._specification.to_bool_expression())


class SortSpecification(Specification[T]):
    """Exposes the sort key of the wrapped specification."""

    def __init__(self, specification: Specification[T]) -> None:
        _require(specification, "specification")
        super().__init__()
        self._specification = specification

    def to_object_expression(self) -> Expression:
        return self._specification.to_object_expression()


Specification.ALL = IdentitySpecification()
