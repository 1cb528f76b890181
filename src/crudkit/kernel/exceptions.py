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
"""CrudKit exception hierarchy.

Business exceptions describe requests the caller can fix, such as bad paging
arguments.  Data-source errors propagate unchanged.  Programming errors, such as passing ``None`` where a
specification is required, raise the builtin ``TypeError`` instead.
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class CrudKitException(Exception):
    """Base exception for all CrudKit errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "PAGING_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(CrudKitException):
    """Domain rule violations and business logic errors."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidPageRequestException(ValidationException):
    """Page number or page size cannot be used to slice a result set."""

    def __init__(self, message: str, current_page: int, page_size: int) -> None:
        super().__init__(
            message,
            code="PAGING_001",
            context={"current_page": current_page, "page_size": page_size},
        )
