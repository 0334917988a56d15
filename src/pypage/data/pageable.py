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
"""Spring-like Pageable types for pagination requests.

A :class:`Pageable` is either a :class:`PageRequest` (zero-based page number,
page size and sort) or :class:`Unpaged` (only a sort, meaning "everything").
Both variants implement every operation of the protocol; the numeric
accessors of :class:`Unpaged` raise :class:`UnpagedException`, so check
:attr:`Pageable.is_paged` first instead of catching.

Navigation is pure arithmetic on the page number. A request never knows how
many pages exist; that is reported by :class:`~pypage.data.page.Page`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pypage.data.limit import UNLIMITED, Limit
from pypage.data.scroll import OffsetScrollPosition
from pypage.data.sort import UNSORTED, Sort
from pypage.kernel.exceptions import InvalidNavigationException, UnpagedException


class Pageable(Protocol):
    """Capability shared by paged and unpaged requests."""

    @property
    def is_paged(self) -> bool: ...
    @property
    def is_unpaged(self) -> bool: ...
    @property
    def page_number(self) -> int: ...
    @property
    def page_size(self) -> int: ...
    @property
    def offset(self) -> int: ...
    @property
    def sort(self) -> Sort: ...
    @property
    def has_previous(self) -> bool: ...
    def sort_or(self, sort: Sort) -> Sort: ...
    def next(self) -> Pageable: ...
    def previous_or_first(self) -> Pageable: ...
    def first(self) -> Pageable: ...
    def with_page(self, page_number: int) -> Pageable: ...
    def to_limit(self) -> Limit: ...
    def to_scroll_position(self) -> OffsetScrollPosition: ...


@dataclass(frozen=True)
class Unpaged:
    """A request without pagination, optionally sorted."""

    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self) -> None:
        if self.sort is None:
            object.__setattr__(self, "sort", UNSORTED)

    @property
    def is_paged(self) -> bool:
        return False

    @property
    def is_unpaged(self) -> bool:
        return True

    @property
    def page_number(self) -> int:
        raise UnpagedException("page number requested from an unpaged request")

    @property
    def page_size(self) -> int:
        raise UnpagedException("page size requested from an unpaged request")

    @property
    def offset(self) -> int:
        raise UnpagedException("offset requested from an unpaged request")

    @property
    def has_previous(self) -> bool:
        return False

    def sort_or(self, sort: Sort) -> Sort:
        """Return this request's sort if sorted, otherwise *sort*."""
        return self.sort if self.sort.is_sorted else sort

    def next(self) -> Unpaged:
        return self

    def previous_or_first(self) -> Unpaged:
        return self

    def first(self) -> Unpaged:
        return self

    def with_page(self, page_number: int) -> Unpaged:
        """Only page 0 exists for an unpaged request."""
        if page_number == 0:
            return self
        raise UnpagedException(
            f"cannot select page {page_number} of an unpaged request",
            context={"page": page_number},
        )

    def to_limit(self) -> Limit:
        return UNLIMITED

    def to_scroll_position(self) -> OffsetScrollPosition:
        raise UnpagedException("scroll position requested from an unpaged request")

    def __str__(self) -> str:
        return "UNPAGED"


@dataclass(frozen=True)
class PageRequest:
    """Pagination request: zero-based page number, page size and sort criteria.

    Neither *page* nor *size* is bounded from above; asking for a page past
    the end of the data is legal and yields an empty last page.
    """

    page: int = 0
    size: int = 20
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        if self.sort is None:
            object.__setattr__(self, "sort", UNSORTED)

    @staticmethod
    def of(page: int, size: int, sort: Sort | None = None) -> PageRequest:
        """Create a pageable for the given page, size, and optional sort."""
        return PageRequest(page=page, size=size, sort=sort if sort is not None else UNSORTED)

    @staticmethod
    def of_size(size: int) -> PageRequest:
        """Create an unsorted request for the first page of the given size."""
        return PageRequest(page=0, size=size)

    @property
    def is_paged(self) -> bool:
        return True

    @property
    def is_unpaged(self) -> bool:
        return False

    @property
    def page_number(self) -> int:
        return self.page

    @property
    def page_size(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        """Calculate the pagination offset."""
        return self.page * self.size

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def sort_or(self, sort: Sort) -> Sort:
        """Return this request's sort if sorted, otherwise *sort*."""
        return self.sort if self.sort.is_sorted else sort

    def next(self) -> PageRequest:
        """Return Pageable for next page."""
        return self.with_page(self.page + 1)

    def previous(self) -> PageRequest:
        """Return Pageable for previous page.

        Only valid while :attr:`has_previous` holds; use
        :meth:`previous_or_first` when that is not known.

        Raises:
            InvalidNavigationException: If this is already the first page.
        """
        if not self.has_previous:
            raise InvalidNavigationException(
                "cannot navigate before the first page",
                context={"page": self.page, "size": self.size},
            )
        return self.with_page(self.page - 1)

    def previous_or_first(self) -> PageRequest:
        return self.previous() if self.has_previous else self.first()

    def first(self) -> PageRequest:
        return self.with_page(0)

    def with_page(self, page_number: int) -> PageRequest:
        return PageRequest(page=page_number, size=self.size, sort=self.sort)

    def to_limit(self) -> Limit:
        return Limit.of(self.size)

    def to_scroll_position(self) -> OffsetScrollPosition:
        return OffsetScrollPosition.of(self.offset)

    def __str__(self) -> str:
        return f"Page request [number: {self.page}, size: {self.size}, sort: {self.sort}]"


def unpaged(sort: Sort | None = None) -> Unpaged:
    """No pagination (fetch all), keeping an optional sort."""
    if sort is None:
        return UNPAGED
    return Unpaged(sort=sort)


UNPAGED = Unpaged()
