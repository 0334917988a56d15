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
"""Unified exception hierarchy for pypage.

All library exceptions inherit from PyPageException, so callers can catch
every pagination failure with a single handler or target a specific kind.

Categories:
- UnpagedException / UnlimitedException: numeric access on values that carry none
- ParseException: text that does not follow the sort grammar or enum names
- InvalidParameterException: malformed query parameters
- InvalidNavigationException: navigation past the first page
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class PyPageException(Exception):
    """Base exception for all pypage errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "UNPAGED").
        context: Arbitrary key-value pairs describing the failing input.
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
# Missing pagination information
# =============================================================================


class UnpagedException(PyPageException):
    """Page number, size, offset or scroll position requested from an unpaged request."""

    def __init__(self, message: str = "request is unpaged", context: dict | None = None) -> None:
        super().__init__(message, code="UNPAGED", context=context)


class UnlimitedException(PyPageException):
    """Numeric maximum requested from an unlimited Limit."""

    def __init__(self, message: str = "limit is unlimited") -> None:
        super().__init__(message, code="UNLIMITED")


class InvalidNavigationException(PyPageException):
    """Navigation to a page that cannot exist (e.g. before the first one)."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_NAVIGATION", context=context)


# =============================================================================
# Parse Exceptions
# =============================================================================


class ParseException(PyPageException):
    """Text could not be parsed into a sort or pagination value."""


class InvalidEnumValueException(ParseException):
    """Text matches none of an enumeration's canonical names.

    The offending raw text is available as ``context["value"]``.
    """

    enum_name: str = "value"
    error_code: str = "INVALID_ENUM_VALUE"

    def __init__(self, value: str) -> None:
        super().__init__(
            f"invalid {self.enum_name}: value {value!r}",
            code=self.error_code,
            context={"value": value},
        )
        self.value = value


class InvalidDirectionException(InvalidEnumValueException):
    """Unknown sort direction text."""

    enum_name = "direction"
    error_code = "INVALID_DIRECTION"


class InvalidNullHandlingException(InvalidEnumValueException):
    """Unknown null handling text."""

    enum_name = "null handling"
    error_code = "INVALID_NULL_HANDLING"


class SortParseException(ParseException):
    """Empty or malformed sort clause."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message, code="SORT_PARSE", context={"text": text})
        self.text = text


class InvalidParameterException(ParseException):
    """A query parameter holds a value that is not a non-negative integer."""

    def __init__(self, parameter: str, value: str) -> None:
        super().__init__(
            f"invalid value {value!r} for parameter '{parameter}': expected a non-negative integer",
            code="INVALID_PARAMETER",
            context={"parameter": parameter, "value": value},
        )
        self.parameter = parameter
        self.value = value
