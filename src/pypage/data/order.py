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
"""Order — a single sort clause and its compact text form.

Text grammar::

    property[,DIRECTION[,ignore_case[,NULL_HANDLING]]]

Fields are positional. Only the property is mandatory; missing fields fall
back to ``ASC``, case-sensitive and ``NATIVE``. Fields past the fourth are
ignored so that newer producers can append data.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pypage.data.direction import DEFAULT_DIRECTION, DEFAULT_NULL_HANDLING, Direction, NullHandling
from pypage.kernel.exceptions import SortParseException

IGNORE_CASE_TOKEN = "ignore_case"
_MAX_FIELDS = 4


@dataclass(frozen=True)
class Order:
    """A single sort order: property name, direction, case and null handling.

    The property is opaque to this library; it is never checked against a
    schema. Every ``with_*`` style method returns a new Order.
    """

    property: str
    direction: Direction = DEFAULT_DIRECTION
    ignore_case: bool = False
    null_handling: NullHandling = DEFAULT_NULL_HANDLING

    def __post_init__(self) -> None:
        if not self.property:
            raise ValueError("property must not be empty")

    # -- factories ---------------------------------------------------------

    @staticmethod
    def by(property: str) -> Order:
        """Create an order for the given property using the default direction."""
        return Order(property=property)

    @staticmethod
    def asc(property: str) -> Order:
        """Create an ascending order for the given property."""
        return Order(property=property, direction=Direction.ASC)

    @staticmethod
    def desc(property: str) -> Order:
        """Create a descending order for the given property."""
        return Order(property=property, direction=Direction.DESC)

    @staticmethod
    def parse(text: str) -> Order:
        """Parse an order from its compact text form.

        Raises:
            SortParseException: If *text* or its property field is empty.
            InvalidDirectionException: If the direction field is unknown.
            InvalidNullHandlingException: If the null handling field is unknown.
        """
        if not text:
            raise SortParseException("cannot parse empty sort clause", text)

        fields = [part.strip() for part in text.split(",")[:_MAX_FIELDS]]
        fields += [""] * (_MAX_FIELDS - len(fields))
        prop, direction, ignore_case, null_handling = fields

        if not prop:
            raise SortParseException(f"sort clause {text!r} has no property", text)

        return Order(
            property=prop,
            direction=Direction.parse(direction) if direction else DEFAULT_DIRECTION,
            ignore_case=ignore_case == IGNORE_CASE_TOKEN,
            null_handling=NullHandling.parse(null_handling) if null_handling else DEFAULT_NULL_HANDLING,
        )

    # -- queries -----------------------------------------------------------

    @property
    def is_ascending(self) -> bool:
        return self.direction.is_ascending

    @property
    def is_descending(self) -> bool:
        return self.direction.is_descending

    # -- derived orders ----------------------------------------------------

    def with_direction(self, direction: Direction) -> Order:
        return replace(self, direction=direction)

    def reverse(self) -> Order:
        """Return the same order with ascending and descending swapped."""
        return replace(self, direction=self.direction.reverse())

    def with_property(self, property: str) -> Order:
        return replace(self, property=property)

    def ignoring_case(self) -> Order:
        """Return the same order compared case-insensitively."""
        return replace(self, ignore_case=True)

    def with_null_handling(self, null_handling: NullHandling) -> Order:
        return replace(self, null_handling=null_handling)

    def nulls_first(self) -> Order:
        return self.with_null_handling(NullHandling.NULLS_FIRST)

    def nulls_last(self) -> Order:
        return self.with_null_handling(NullHandling.NULLS_LAST)

    def nulls_native(self) -> Order:
        return self.with_null_handling(NullHandling.NATIVE)

    # -- rendering ---------------------------------------------------------

    def to_text(self) -> str:
        """Render the minimal wire form accepted by :meth:`parse`.

        Trailing fields equal to their defaults are dropped, but every slot
        before the last non-default one is written out. A case-sensitive
        order that still needs the slot leaves it empty (``name,desc,,nulls_last``).
        """
        has_null_handling = self.null_handling is not DEFAULT_NULL_HANDLING
        fields = [self.property]
        if self.direction is not DEFAULT_DIRECTION or self.ignore_case or has_null_handling:
            fields.append(self.direction.value.lower())
        if self.ignore_case or has_null_handling:
            fields.append(IGNORE_CASE_TOKEN if self.ignore_case else "")
        if has_null_handling:
            fields.append(self.null_handling.value.lower())
        return ",".join(fields)

    def __str__(self) -> str:
        result = f"{self.property}: {self.direction}"
        if self.null_handling is not NullHandling.NATIVE:
            result += f", {self.null_handling}"
        if self.ignore_case:
            result += ", ignoring case"
        return result


def orders(direction: Direction, *properties: str) -> tuple[Order, ...]:
    """Create one order per property, all sharing *direction*."""
    return tuple(Order(property=p, direction=direction) for p in properties)
