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
"""Pagination types for paginated query results.

:class:`Slice` knows only whether more data follows; :class:`Page` also
carries the total element count and derives the number of pages from it.
Both share the navigation logic of :class:`Chunk`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from pypage.data.pageable import UNPAGED, Pageable, unpaged
from pypage.data.sort import Sort

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Chunk(ABC, Generic[T]):
    """Content plus the pageable that requested it.

    Attributes:
        content: The items on this chunk, in query order.
        pageable: The request that produced the chunk.
    """

    content: tuple[T, ...] = ()
    pageable: Pageable = UNPAGED

    def __post_init__(self) -> None:
        if not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))
        if self.pageable is None:
            object.__setattr__(self, "pageable", UNPAGED)

    @property
    def number(self) -> int:
        """Zero-based number of this chunk; 0 when unpaged."""
        return self.pageable.page_number if self.pageable.is_paged else 0

    @property
    def size(self) -> int:
        """Requested page size, or the content length when unpaged."""
        return self.pageable.page_size if self.pageable.is_paged else self.number_of_elements

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def sort(self) -> Sort:
        return self.pageable.sort

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    @abstractmethod
    def has_next(self) -> bool:
        """Whether there is a next chunk."""

    def next_pageable(self) -> Pageable:
        """Pageable for the next chunk.

        Unpaged (keeping the current sort) when this is the last chunk, so
        check :attr:`has_next` before trusting it.
        """
        if self.has_next:
            return self.pageable.next()
        return unpaged(self.sort)

    def previous_pageable(self) -> Pageable:
        """Pageable for the previous chunk, unpaged when this is the first."""
        if self.has_previous:
            return self.pageable.previous_or_first()
        return unpaged(self.sort)

    def next_or_last_pageable(self) -> Pageable:
        """Pageable for the next chunk, or this chunk's own when it is the last."""
        return self.next_pageable() if self.has_next else self.pageable

    def previous_or_first_pageable(self) -> Pageable:
        """Pageable for the previous chunk, or this chunk's own when it is the first."""
        return self.previous_pageable() if self.has_previous else self.pageable

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Slice(Chunk[T]):
    """A chunk that only knows whether another one follows it."""

    more: bool = False

    @property
    def has_next(self) -> bool:
        return self.more

    @staticmethod
    def of(content: Iterable[T], pageable: Pageable, has_next: bool) -> Slice[T]:
        return Slice(content=tuple(content), pageable=pageable, more=has_next)

    def map(self, func: Callable[[T], U]) -> Slice[U]:
        """Transform items using a mapping function, preserving navigation."""
        return Slice(content=tuple(func(item) for item in self.content), pageable=self.pageable, more=self.more)


@dataclass(frozen=True)
class Page(Chunk[T]):
    """A page of results from a paginated query.

    When the pageable is paged and the content is not empty, the total is
    raised to at least ``offset + size`` so that it never contradicts the
    page being returned.

    Attributes:
        total_elements: Total number of items across all pages.
    """

    total_elements: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.total_elements < 0:
            raise ValueError(f"total_elements must be >= 0, got {self.total_elements}")
        if self.content and self.pageable.is_paged:
            floor = self.pageable.offset + self.pageable.page_size
            if floor > self.total_elements:
                object.__setattr__(self, "total_elements", floor)

    @staticmethod
    def of(content: Sequence[T], pageable: Pageable, total_elements: int) -> Page[T]:
        """Create a page of *content* requested by *pageable*."""
        return Page(content=tuple(content), pageable=pageable, total_elements=total_elements)

    @staticmethod
    def from_list(content: Sequence[T]) -> Page[T]:
        """Create a single unpaged page holding all of *content*."""
        return Page(content=tuple(content), pageable=UNPAGED, total_elements=len(content))

    @staticmethod
    def empty(pageable: Pageable | None = None) -> Page[T]:
        """Create a page without content, unpaged unless *pageable* is given."""
        return Page(content=(), pageable=pageable if pageable is not None else UNPAGED, total_elements=0)

    @property
    def total_pages(self) -> int:
        """Total number of pages; a chunk without size counts as one page."""
        size = self.size
        if size > 0:
            return (self.total_elements + size - 1) // size
        return 1

    @property
    def has_next(self) -> bool:
        """Whether there is a next page."""
        return self.number + 1 < self.total_pages

    def map(self, func: Callable[[T], U]) -> Page[U]:
        """Transform items using a mapping function, preserving pagination metadata."""
        return Page(
            content=tuple(func(item) for item in self.content),
            pageable=self.pageable,
            total_elements=self.total_elements,
        )

    def __str__(self) -> str:
        content_type = type(self.content[0]).__name__ if self.content else "UNKNOWN"
        return f"Page {self.number + 1} of {self.total_pages} containing {content_type} instances"
