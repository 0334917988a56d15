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
"""Sort direction and null handling enumerations."""

from __future__ import annotations

from enum import Enum

from pypage.kernel.exceptions import InvalidDirectionException, InvalidNullHandlingException


class Direction(Enum):
    """Sort direction of a single order clause."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> Direction:
        """Parse a direction case-insensitively (``"asc"``, ``"Desc"``, ...)."""
        try:
            return cls(value.upper())
        except ValueError:
            raise InvalidDirectionException(value) from None

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC

    def reverse(self) -> Direction:
        """Return the opposite direction."""
        return Direction.DESC if self is Direction.ASC else Direction.ASC

    def __str__(self) -> str:
        return self.value


class NullHandling(Enum):
    """Hint for where ``null`` values go in an ordered result."""

    NATIVE = "NATIVE"
    NULLS_FIRST = "NULLS_FIRST"
    NULLS_LAST = "NULLS_LAST"

    @classmethod
    def parse(cls, value: str) -> NullHandling:
        """Parse a null handling hint case-insensitively."""
        try:
            return cls(value.upper())
        except ValueError:
            raise InvalidNullHandlingException(value) from None

    def __str__(self) -> str:
        return self.value


DEFAULT_DIRECTION = Direction.ASC
DEFAULT_NULL_HANDLING = NullHandling.NATIVE
