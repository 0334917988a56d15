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
"""Tests for Direction and NullHandling."""

from __future__ import annotations

import pytest

from pypage.data.direction import DEFAULT_DIRECTION, DEFAULT_NULL_HANDLING, Direction, NullHandling
from pypage.kernel.exceptions import (
    InvalidDirectionException,
    InvalidEnumValueException,
    InvalidNullHandlingException,
)

# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------


class TestDirection:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ASC", Direction.ASC),
            ("asc", Direction.ASC),
            ("Asc", Direction.ASC),
            ("DESC", Direction.DESC),
            ("desc", Direction.DESC),
            ("dEsC", Direction.DESC),
        ],
    )
    def test_parse_is_case_insensitive(self, text: str, expected: Direction) -> None:
        assert Direction.parse(text) is expected

    @pytest.mark.parametrize("text", ["asc", "DESC", "Desc"])
    def test_parse_normalisation_is_idempotent(self, text: str) -> None:
        parsed = Direction.parse(text)
        assert Direction.parse(str(parsed)) is parsed

    def test_str_is_canonical_upper_case(self) -> None:
        assert str(Direction.ASC) == "ASC"
        assert str(Direction.DESC) == "DESC"

    def test_parse_rejects_unknown_value(self) -> None:
        with pytest.raises(InvalidDirectionException, match="'ascending'") as exc_info:
            Direction.parse("ascending")
        assert exc_info.value.value == "ascending"
        assert exc_info.value.context == {"value": "ascending"}
        assert exc_info.value.code == "INVALID_DIRECTION"

    def test_parse_rejects_empty_value(self) -> None:
        with pytest.raises(InvalidEnumValueException):
            Direction.parse("")

    def test_reverse(self) -> None:
        assert Direction.ASC.reverse() is Direction.DESC
        assert Direction.DESC.reverse() is Direction.ASC

    def test_predicates(self) -> None:
        assert Direction.ASC.is_ascending
        assert not Direction.ASC.is_descending
        assert Direction.DESC.is_descending
        assert not Direction.DESC.is_ascending

    def test_default_is_ascending(self) -> None:
        assert DEFAULT_DIRECTION is Direction.ASC


# ---------------------------------------------------------------------------
# NullHandling
# ---------------------------------------------------------------------------


class TestNullHandling:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("NATIVE", NullHandling.NATIVE),
            ("native", NullHandling.NATIVE),
            ("nulls_first", NullHandling.NULLS_FIRST),
            ("Nulls_First", NullHandling.NULLS_FIRST),
            ("NULLS_LAST", NullHandling.NULLS_LAST),
        ],
    )
    def test_parse_is_case_insensitive(self, text: str, expected: NullHandling) -> None:
        assert NullHandling.parse(text) is expected

    @pytest.mark.parametrize("member", list(NullHandling))
    def test_str_parses_back(self, member: NullHandling) -> None:
        assert NullHandling.parse(str(member)) is member

    def test_parse_rejects_unknown_value(self) -> None:
        with pytest.raises(InvalidNullHandlingException, match="'nulls_middle'"):
            NullHandling.parse("nulls_middle")

    def test_invalid_null_handling_is_enum_error(self) -> None:
        assert issubclass(InvalidNullHandlingException, InvalidEnumValueException)

    def test_default_is_native(self) -> None:
        assert DEFAULT_NULL_HANDLING is NullHandling.NATIVE
