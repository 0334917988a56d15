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
"""Resolve a PageRequest from query-string parameters.

Usage::

    pageable = pageable_from_query(request.query_params)
    pageable = pageable_from_query({"page": "2", "sort": ["name,desc", "id"]}, properties)

Any string-keyed multi-value source works: a plain mapping whose values are
strings or sequences of strings, or an object exposing ``getlist`` such as
Starlette's ``QueryParams``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pypage.config.properties.paging import PagingProperties
from pypage.data.pageable import PageRequest
from pypage.data.sort import Sort
from pypage.kernel.exceptions import InvalidParameterException
from pypage.logging import get_logger

logger = get_logger("pypage.data.resolver")

_DEFAULT_PROPERTIES = PagingProperties()


def _values(query: Any, name: str) -> list[str]:
    """All non-blank values of *name* in *query*, in order, as text.

    ``None`` entries count as absent; other non-string values (``{"page": 2}``)
    are read through ``str``.
    """
    getlist = getattr(query, "getlist", None)
    if callable(getlist):
        raw: Sequence[Any] = getlist(name)
    elif isinstance(query, Mapping):
        value = query.get(name)
        if value is None:
            raw = []
        elif isinstance(value, str) or not isinstance(value, Iterable):
            raw = [value]
        else:
            raw = list(value)
    else:
        raise TypeError(f"unsupported query source: {type(query).__name__}")
    texts = [v if isinstance(v, str) else str(v) for v in raw if v is not None]
    return [v for v in texts if v.strip()]


def _parse_int(name: str, value: str) -> int:
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidParameterException(name, value)
    return int(text)


def pageable_from_query(query: Any, properties: PagingProperties | None = None) -> PageRequest:
    """Build a :class:`PageRequest` from the page, size and sort parameters of *query*.

    Absent or blank parameters fall back to the defaults in *properties*;
    malformed ones raise instead of falling back.

    Raises:
        InvalidParameterException: If page or size is not a non-negative integer.
        ParseException: If a sort value is not a valid sort clause.
    """
    props = properties if properties is not None else _DEFAULT_PROPERTIES

    page = props.default_page
    pages = _values(query, props.page_param)
    if pages:
        page = _parse_int(props.page_param, pages[0])

    size = props.default_size
    sizes = _values(query, props.size_param)
    if sizes:
        size = _parse_int(props.size_param, sizes[0])
    if props.max_size is not None and size > props.max_size:
        logger.debug("page_size_clamped", requested=size, max_size=props.max_size)
        size = props.max_size

    sorts = _values(query, props.sort_param)
    sort = Sort.parse(*sorts) if sorts else props.fallback_sort

    logger.debug("pageable_resolved", page=page, size=size, sort=sort.to_text())
    return PageRequest(page=page, size=size, sort=sort)
