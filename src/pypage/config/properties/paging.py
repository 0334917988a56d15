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
"""Paging configuration properties (pypage.paging.*)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pypage.core.config import config_properties
from pypage.data.sort import Sort
from pypage.kernel.exceptions import ParseException


@config_properties(prefix="pypage.paging")
class PagingProperties(BaseModel):
    """Parameter names and fallbacks used when resolving a pageable from a query.

    Values are passed explicitly to :func:`pypage.data.resolver.pageable_from_query`;
    there is no process-wide default instance to mutate.
    """

    model_config = ConfigDict(frozen=True)

    page_param: str = "page"
    size_param: str = "size"
    sort_param: str = "sort"
    default_page: int = Field(default=0, ge=0)
    default_size: int = Field(default=10, ge=0)
    default_sort: tuple[str, ...] = ()
    max_size: int | None = Field(default=None, ge=1)

    @field_validator("page_param", "size_param", "sort_param")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("parameter name must not be blank")
        return value

    @field_validator("default_sort", mode="before")
    @classmethod
    def _split_text(cls, value: object) -> object:
        # Environment values arrive as one string: "name,desc;id".
        if isinstance(value, str):
            return tuple(clause.strip() for clause in value.split(";") if clause.strip())
        return value

    @field_validator("default_sort")
    @classmethod
    def _parseable(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        try:
            Sort.parse(*value)
        except ParseException as exc:
            raise ValueError(str(exc)) from exc
        return value

    @property
    def fallback_sort(self) -> Sort:
        """The default sort clauses, parsed."""
        return Sort.parse(*self.default_sort)
