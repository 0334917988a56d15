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
"""Offset-based scroll positions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OffsetScrollPosition:
    """A scroll position based on the offset within a query result."""

    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    @staticmethod
    def of(offset: int) -> OffsetScrollPosition:
        return OffsetScrollPosition(offset=offset)

    @staticmethod
    def initial() -> OffsetScrollPosition:
        """The position to start scrolling from."""
        return INITIAL_OFFSET

    @property
    def is_initial(self) -> bool:
        return self.offset == INITIAL_OFFSET.offset

    def advance_by(self, delta: int) -> OffsetScrollPosition:
        """Advance by *delta*, which may be negative; the result never drops below zero."""
        return OffsetScrollPosition(offset=max(self.offset + delta, 0))


INITIAL_OFFSET = OffsetScrollPosition()
