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
"""Success-or-error outcome returned by application services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call.

    Attributes:
        success: Whether the call succeeded.
        value: The payload on success, ``None`` otherwise.
        error: The error message on failure, ``None`` otherwise.
        code: Machine-readable error code of the failure, if any.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    code: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error:
            raise ValueError("A successful result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("A failed result requires an error message")

    @property
    def is_failure(self) -> bool:
        return not self.success

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(success=True, value=value)

    @staticmethod
    def fail(error: str, code: str | None = None) -> Result[T]:
        return Result(success=False, error=error, code=code)
