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
"""Spring-like Sort: an ordered collection of Order clauses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pypage.data.direction import Direction
from pypage.data.order import Order, orders


@dataclass(frozen=True)
class Sort:
    """Collection of sort orders, primary key first.

    The empty Sort is "unsorted". Wherever a Sort is accepted, ``None`` is
    treated the same as :meth:`unsorted`.
    """

    orders: tuple[Order, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.orders, tuple):
            object.__setattr__(self, "orders", tuple(self.orders))

    @staticmethod
    def by(*properties: str, direction: Direction = Direction.ASC) -> Sort:
        """Create a sort by properties, ascending unless *direction* says otherwise."""
        return Sort(orders=orders(direction, *properties))

    @staticmethod
    def by_orders(*clauses: Order) -> Sort:
        """Create a sort from explicit orders."""
        return Sort(orders=clauses)

    @staticmethod
    def unsorted() -> Sort:
        """No sorting."""
        return UNSORTED

    @staticmethod
    def parse(*texts: str) -> Sort:
        """Parse one sort clause per text (see :meth:`Order.parse`).

        Parsing stops at the first invalid clause and its exception
        propagates; no partial Sort is ever returned.
        """
        if not texts:
            return UNSORTED
        return Sort(orders=tuple(Order.parse(text) for text in texts))

    @property
    def is_empty(self) -> bool:
        return not self.orders

    @property
    def is_sorted(self) -> bool:
        return not self.is_empty

    @property
    def is_unsorted(self) -> bool:
        return self.is_empty

    def and_then(self, other: Sort | None) -> Sort:
        """Combine sorts, appending *other*'s orders after this sort's orders."""
        if other is None:
            return self
        return Sort(orders=self.orders + other.orders)

    def descending(self) -> Sort:
        """Return same sort but all directions flipped to desc."""
        return self._with_direction(Direction.DESC)

    def ascending(self) -> Sort:
        """Return same sort but all directions flipped to asc."""
        return self._with_direction(Direction.ASC)

    def reverse(self) -> Sort:
        """Return same sort with every order's direction reversed."""
        return Sort(orders=tuple(o.reverse() for o in self.orders))

    def order_for(self, property: str) -> Order | None:
        """Return the first order on *property*, or ``None`` if there is none."""
        for order in self.orders:
            if order.property == property:
                return order
        return None

    def to_text(self) -> list[str]:
        """Render each order in its minimal wire form, in sort precedence."""
        return [o.to_text() for o in self.orders]

    def _with_direction(self, direction: Direction) -> Sort:
        return Sort(orders=tuple(o.with_direction(direction) for o in self.orders))

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def __bool__(self) -> bool:
        return self.is_sorted

    def __str__(self) -> str:
        if self.is_unsorted:
            return "UNSORTED"
        return ", ".join(str(o) for o in self.orders)


UNSORTED = Sort()


def sort_or_unsorted(sort: Sort | None) -> Sort:
    """Normalise an optional sort to a Sort instance."""
    return UNSORTED if sort is None else sort
