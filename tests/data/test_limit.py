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
"""Tests for Limit and OffsetScrollPosition."""

from __future__ import annotations

import pytest

from pypage.data.limit import UNLIMITED, Limit
from pypage.data.scroll import INITIAL_OFFSET, OffsetScrollPosition
from pypage.kernel.exceptions import UnlimitedException


class TestLimit:
    def test_zero_is_unlimited(self) -> None:
        # A limit of zero results cannot be expressed: 0 means unlimited.
        assert Limit.of(0).is_unlimited
        assert not Limit.of(0).is_limited
        assert Limit.of(0) == UNLIMITED
        assert Limit.unlimited() is UNLIMITED

    def test_max_of_unlimited_fails(self) -> None:
        with pytest.raises(UnlimitedException, match="unlimited") as exc_info:
            UNLIMITED.max()
        assert exc_info.value.code == "UNLIMITED"

    @pytest.mark.parametrize("value", [1, 10, 2**40])
    def test_positive_limit(self, value: int) -> None:
        limit = Limit.of(value)
        assert limit.is_limited
        assert not limit.is_unlimited
        assert limit.max() == value

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="limit must be >= 0"):
            Limit.of(-1)


class TestOffsetScrollPosition:
    def test_initial(self) -> None:
        assert OffsetScrollPosition.initial() is INITIAL_OFFSET
        assert INITIAL_OFFSET.offset == 0
        assert INITIAL_OFFSET.is_initial
        assert not OffsetScrollPosition.of(3).is_initial

    def test_advance_by_positive(self) -> None:
        assert OffsetScrollPosition.of(5).advance_by(10) == OffsetScrollPosition.of(15)

    def test_advance_by_negative(self) -> None:
        assert OffsetScrollPosition.of(15).advance_by(-10).offset == 5

    def test_advance_by_clamps_at_zero(self) -> None:
        position = OffsetScrollPosition.of(5).advance_by(-10)
        assert position.offset == 0
        assert position.is_initial

    def test_advance_returns_new_value(self) -> None:
        position = OffsetScrollPosition.of(5)
        position.advance_by(1)
        assert position.offset == 5

    def test_rejects_negative_offset(self) -> None:
        with pytest.raises(ValueError, match="offset must be >= 0"):
            OffsetScrollPosition(offset=-1)
