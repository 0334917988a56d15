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
"""pypage Data — pagination and sorting value objects.

Requests (:class:`PageRequest`, :class:`Unpaged`) describe which slice of a
result to fetch; :class:`Page` and :class:`Slice` describe what came back.
:class:`Sort` and :class:`Order` describe ordering and have a compact text
form (``name,desc,ignore_case,nulls_last``) for query strings and JSON.

Query resolution lives in :mod:`pypage.data.resolver`, which depends on the
configuration layer and is therefore not re-exported here.
"""

from pypage.data.direction import Direction, NullHandling
from pypage.data.limit import UNLIMITED, Limit
from pypage.data.order import Order
from pypage.data.page import Chunk, Page, Slice
from pypage.data.pageable import UNPAGED, Pageable, PageRequest, Unpaged, unpaged
from pypage.data.scroll import INITIAL_OFFSET, OffsetScrollPosition
from pypage.data.serialization import PageModel, page_from_dict, page_from_json, page_to_dict, page_to_json
from pypage.data.sort import UNSORTED, Sort

__all__ = [
    # Sorting
    "Direction",
    "NullHandling",
    "Order",
    "Sort",
    "UNSORTED",
    # Requests
    "Pageable",
    "PageRequest",
    "Unpaged",
    "UNPAGED",
    "unpaged",
    "Limit",
    "UNLIMITED",
    "OffsetScrollPosition",
    "INITIAL_OFFSET",
    # Results
    "Chunk",
    "Page",
    "Slice",
    # Adapters
    "PageModel",
    "page_from_dict",
    "page_from_json",
    "page_to_dict",
    "page_to_json",
]
