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
"""Structured (JSON) wire shape for pages.

A page serializes to::

    {"content": [...], "number": 4, "size": 5, "sort": ["name,desc"],
     "totalElements": 56, "totalPages": 12}

``sort`` is a list with one compact clause per order. Reading a page back
always yields a :class:`PageRequest` built from ``number``/``size``/``sort``,
even when the original page was unpaged.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pypage.data.page import Page
from pypage.data.pageable import PageRequest
from pypage.data.sort import Sort
from pypage.logging import get_logger

T = TypeVar("T")

logger = get_logger("pypage.data.serialization")


class PageModel(BaseModel, Generic[T]):
    """Pydantic model of the page wire shape."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[T] = Field(default_factory=list)
    number: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0)
    sort: list[str] = Field(default_factory=list)
    total_elements: int = Field(default=0, ge=0, alias="totalElements")
    total_pages: int = Field(default=0, ge=0, alias="totalPages")

    @classmethod
    def from_page(cls, page: Page[Any]) -> PageModel[Any]:
        return cls(
            content=list(page.content),
            number=page.number,
            size=page.size,
            sort=page.sort.to_text(),
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )

    def to_page(self) -> Page[T]:
        """Rebuild the page; ``totalPages`` is derived again rather than trusted."""
        pageable = PageRequest(page=self.number, size=self.size, sort=Sort.parse(*self.sort))
        return Page(content=tuple(self.content), pageable=pageable, total_elements=self.total_elements)


def page_to_dict(page: Page[Any]) -> dict[str, Any]:
    """JSON-compatible dict of *page* using the wire field names."""
    return PageModel.from_page(page).model_dump(mode="json", by_alias=True)


def page_to_json(page: Page[Any]) -> str:
    return PageModel.from_page(page).model_dump_json(by_alias=True)


def page_from_dict(data: dict[str, Any], item_type: Any = Any) -> Page[Any]:
    """Rebuild a page from its wire dict, validating items as *item_type*."""
    model = PageModel[item_type].model_validate(data)  # type: ignore[valid-type]
    logger.debug("page_deserialized", number=model.number, size=model.size, elements=len(model.content))
    return model.to_page()


def page_from_json(data: str | bytes, item_type: Any = Any) -> Page[Any]:
    """Rebuild a page from JSON text, validating items as *item_type*."""
    model = PageModel[item_type].model_validate_json(data)  # type: ignore[valid-type]
    logger.debug("page_deserialized", number=model.number, size=model.size, elements=len(model.content))
    return model.to_page()
