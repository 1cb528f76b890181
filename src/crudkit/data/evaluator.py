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
"""Applies a specification's filter and sort directives to a queryable."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from crudkit.data.queryable import Queryable
from crudkit.data.specification import Specification

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=Queryable[Any])


class SpecificationEvaluator:
    """Turns a :class:`Specification` into a filtered, ordered queryable.

    The evaluator only composes; the returned queryable is still deferred
    and can be paged or further refined before it runs.
    """

    @staticmethod
    def get_query(input_query: Q, specification: Specification[Any]) -> Q:
        """Filter *input_query* by *specification*, then order it.

        The first sort directive becomes the primary ordering; each later
        directive breaks ties in the order it was attached.  Without
        directives no ordering is requested at all.
        """
        if input_query is None:
            raise TypeError("input_query must not be None")
        if specification is None:
            raise TypeError("specification must not be None")

        query = input_query.where(specification.to_bool_expression())

        sorts = specification.sorts
        if sorts:
            primary, *rest = sorts
            query = query.order_by(
                primary.specification.to_object_expression(),
                descending=not primary.ascending,
            )
            for sort in rest:
                query = query.then_by(
                    sort.specification.to_object_expression(),
                    descending=not sort.ascending,
                )

        logger.debug("Composed query from %s with %d sort directive(s)", type(specification).__name__, len(sorts))
        return query  # type: ignore[return-value]
