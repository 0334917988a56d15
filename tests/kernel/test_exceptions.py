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
"""Tests for pypage exception hierarchy."""

from pypage.kernel.exceptions import (
    InvalidDirectionException,
    InvalidEnumValueException,
    InvalidNavigationException,
    InvalidNullHandlingException,
    InvalidParameterException,
    ParseException,
    PyPageException,
    SortParseException,
    UnlimitedException,
    UnpagedException,
)


class TestPyPageException:
    def test_basic_creation(self):
        exc = PyPageException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyPageException("bad page", code="PAGE_001", context={"page": 3})
        assert exc.code == "PAGE_001"
        assert exc.context["page"] == 3

    def test_context_defaults_to_empty_dict(self):
        exc = PyPageException("test")
        exc.context["key"] = "value"
        assert PyPageException("test2").context == {}


class TestSpecificExceptions:
    def test_unpaged_defaults(self):
        exc = UnpagedException()
        assert str(exc) == "request is unpaged"
        assert exc.code == "UNPAGED"

    def test_unlimited_defaults(self):
        exc = UnlimitedException()
        assert str(exc) == "limit is unlimited"
        assert exc.code == "UNLIMITED"

    def test_enum_exception_names_value(self):
        exc = InvalidDirectionException("up")
        assert str(exc) == "invalid direction: value 'up'"
        assert exc.value == "up"
        assert exc.context == {"value": "up"}

    def test_null_handling_exception(self):
        exc = InvalidNullHandlingException("sometimes")
        assert str(exc) == "invalid null handling: value 'sometimes'"
        assert exc.code == "INVALID_NULL_HANDLING"

    def test_sort_parse_exception_keeps_text(self):
        exc = SortParseException("cannot parse empty sort clause", "")
        assert exc.text == ""
        assert exc.context == {"text": ""}

    def test_invalid_parameter_exception(self):
        exc = InvalidParameterException("size", "ten")
        assert exc.parameter == "size"
        assert exc.context == {"parameter": "size", "value": "ten"}
        assert "'size'" in str(exc)


class TestExceptionHierarchy:
    def test_parse_exceptions(self):
        for cls in (InvalidEnumValueException, SortParseException, InvalidParameterException):
            assert issubclass(cls, ParseException)
        assert issubclass(InvalidDirectionException, InvalidEnumValueException)
        assert issubclass(InvalidNullHandlingException, InvalidEnumValueException)

    def test_catch_all_pypage_exceptions(self):
        exceptions = [
            UnpagedException(),
            UnlimitedException(),
            InvalidNavigationException("before first page"),
            InvalidDirectionException("x"),
            SortParseException("empty", ""),
            InvalidParameterException("page", "x"),
        ]
        for exc in exceptions:
            try:
                raise exc
            except PyPageException as caught:
                assert caught is exc
