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
"""Configuration properties for data access (``crudkit.database``, ``crudkit.paging``)."""

from __future__ import annotations

from dataclasses import dataclass

from crudkit.core.config import config_properties


@config_properties(prefix="crudkit.database")
@dataclass
class DatabaseProperties:
    """Connection settings for the async SQLAlchemy engine."""

    url: str = "sqlite+aiosqlite:///crud.db"
    echo: bool = False


@config_properties(prefix="crudkit.paging")
@dataclass
class PagingProperties:
    """Paging limits applied by the application services."""

    default_page_size: int = 10
    max_page_size: int = 100

    def clamp(self, page_size: int) -> int:
        """Cap *page_size* at ``max_page_size``; non-positive sizes fall back to the default."""
        if page_size < 1:
            return self.default_page_size
        return min(page_size, self.max_page_size)
