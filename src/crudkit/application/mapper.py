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
"""Entity-to-DTO mapper.

Destination fields are filled by reading the attribute of the same name
from the source (so ORM attributes, hybrid properties and plain properties
all work), unless a computed field is registered for the pair.

Example::

    mapper = Mapper()
    mapper.add_mapping(Sale, SaleForListDto, computed={
        "product_name": lambda sale: sale.product.name,
    })
    dto = mapper.map(sale, SaleForListDto)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, get_type_hints

from pydantic import BaseModel

S = TypeVar("S")
D = TypeVar("D")


@dataclasses.dataclass
class MappingConfig:
    """Configuration for one source/destination pair.

    Attributes:
        computed: Functions receiving the whole source object, keyed by
            destination field name.
        exclude: Destination fields left to their defaults.
    """

    computed: dict[str, Callable[[Any], Any]] = dataclasses.field(default_factory=dict)
    exclude: set[str] = dataclasses.field(default_factory=set)


class Mapper:
    """Maps entities onto Pydantic models or dataclasses by field name."""

    def __init__(self) -> None:
        self._mappings: dict[tuple[type, type], MappingConfig] = {}

    def add_mapping(
        self,
        source_type: type[S],
        dest_type: type[D],
        *,
        computed: dict[str, Callable[[S], Any]] | None = None,
        exclude: set[str] | None = None,
    ) -> None:
        """Register computed or excluded fields for a source/destination pair."""
        self._mappings[(source_type, dest_type)] = MappingConfig(
            computed=dict(computed or {}),
            exclude=set(exclude or ()),
        )

    def map(self, source: S, dest_type: type[D]) -> D:
        """Map *source* to a new *dest_type* instance.

        Source attributes that do not exist are skipped, leaving the
        destination default in place.
        """
        config = self._mappings.get((type(source), dest_type), MappingConfig())

        kwargs: dict[str, Any] = {}
        for dest_field in self._get_field_names(dest_type):
            if dest_field in config.exclude:
                continue
            if dest_field in config.computed:
                kwargs[dest_field] = config.computed[dest_field](source)
            elif hasattr(source, dest_field):
                kwargs[dest_field] = getattr(source, dest_field)

        return dest_type(**kwargs)

    def map_list(self, sources: Iterable[S], dest_type: type[D]) -> list[D]:
        return [self.map(s, dest_type) for s in sources]

    @staticmethod
    def _get_field_names(cls: type) -> list[str]:
        if isinstance(cls, type) and issubclass(cls, BaseModel):
            return list(cls.model_fields)
        if dataclasses.is_dataclass(cls):
            return [f.name for f in dataclasses.fields(cls)]
        return list(get_type_hints(cls).keys())
