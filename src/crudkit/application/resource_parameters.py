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
"""Collection query parameters and paged response envelopes."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from crudkit.data.paged_list import PagedList

T = TypeVar("T")


class ResourceParameter(BaseModel):
    """Paging and direction parameters shared by collection queries.

    ``current_page=0`` requests every item without paging.
    """

    current_page: int = 1
    page_size: int = 10
    is_ascending: bool = True


class PaginationMetadata(BaseModel):
    total_count: int
    page_size: int
    current_page: int
    total_pages: int

    @classmethod
    def from_paged_list(cls, paged: PagedList[object]) -> PaginationMetadata:
        return cls(
            total_count=paged.total_count,
            page_size=paged.page_size,
            current_page=paged.current_page,
            total_pages=paged.total_pages,
        )


class CollectionResource(BaseModel, Generic[T]):
    """One page of DTOs with its pagination metadata."""

    pagination: PaginationMetadata
    results: list[T] = Field(default_factory=list)
