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
"""Limit — the maximum number of results an operation should produce."""

from __future__ import annotations

from dataclasses import dataclass

from pypage.kernel.exceptions import UnlimitedException


@dataclass(frozen=True)
class Limit:
    """A bounded or unbounded maximum result count.

    A value of ``0`` means unlimited, so a genuine limit of zero results
    cannot be expressed.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"limit must be >= 0, got {self.value}")

    @staticmethod
    def of(max: int) -> Limit:
        """Create a limit for the given maximum (``0`` is unlimited)."""
        return Limit(value=max)

    @staticmethod
    def unlimited() -> Limit:
        return UNLIMITED

    @property
    def is_limited(self) -> bool:
        return self.value != 0

    @property
    def is_unlimited(self) -> bool:
        return not self.is_limited

    def max(self) -> int:
        """Return the maximum number of results.

        Raises:
            UnlimitedException: If this limit is unlimited.
        """
        if self.is_unlimited:
            raise UnlimitedException()
        return self.value


UNLIMITED = Limit()
