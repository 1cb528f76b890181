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
"""Tests for the CrudKit exception hierarchy."""

import pytest

import crudkit.kernel
from crudkit.kernel import (
    BusinessException,
    CrudKitException,
    InvalidPageRequestException,
    ValidationException,
)


class TestCrudKitException:
    def test_message_code_and_context(self):
        exc = CrudKitException("boom", code="X_1", context={"key": "value"})
        assert str(exc) == "boom"
        assert exc.code == "X_1"
        assert exc.context == {"key": "value"}

    def test_context_defaults_to_empty_dict(self):
        exc = CrudKitException("boom")
        assert exc.code is None
        assert exc.context == {}


class TestHierarchy:
    @pytest.mark.parametrize(
        ("exc_type", "base"),
        [
            (BusinessException, CrudKitException),
            (ValidationException, BusinessException),
            (InvalidPageRequestException, ValidationException),
        ],
    )
    def test_subclassing(self, exc_type, base):
        assert issubclass(exc_type, base)

    def test_kernel_exports_only_raised_exceptions(self):
        assert sorted(crudkit.kernel.__all__) == [
            "BusinessException",
            "CrudKitException",
            "InvalidPageRequestException",
            "ValidationException",
        ]

    def test_invalid_page_request_is_a_crudkit_exception(self):
        with pytest.raises(CrudKitException):
            raise InvalidPageRequestException("bad page", current_page=-1, page_size=0)


class TestInvalidPageRequestException:
    def test_carries_page_request(self):
        exc = InvalidPageRequestException("bad page", current_page=-1, page_size=10)
        assert exc.code == "PAGING_001"
        assert exc.context == {"current_page": -1, "page_size": 10}
        assert str(exc) == "bad page"
