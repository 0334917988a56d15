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
"""Tests for the page wire shape."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from pypage.data.order import Order
from pypage.data.page import Page
from pypage.data.pageable import PageRequest
from pypage.data.serialization import PageModel, page_from_dict, page_from_json, page_to_dict, page_to_json
from pypage.data.sort import Sort
from pypage.kernel.exceptions import InvalidDirectionException


class Item(BaseModel):
    id: int
    name: str


class TestPageToDict:
    def test_wire_fields(self) -> None:
        sort = Sort.by_orders(Order.desc("name"), Order.asc("id").nulls_last())
        page = Page.of([1, 2, 3, 4, 5], PageRequest.of(4, 5, sort), 56)
        assert page_to_dict(page) == {
            "content": [1, 2, 3, 4, 5],
            "number": 4,
            "size": 5,
            "sort": ["name,desc", "id,asc,,nulls_last"],
            "totalElements": 56,
            "totalPages": 12,
        }

    def test_unpaged_page(self) -> None:
        data = page_to_dict(Page.from_list(["a", "b"]))
        assert data["number"] == 0
        assert data["size"] == 2
        assert data["sort"] == []
        assert data["totalPages"] == 1

    def test_model_items_are_dumped(self) -> None:
        page = Page.of([Item(id=1, name="a")], PageRequest.of(0, 10), 1)
        assert page_to_dict(page)["content"] == [{"id": 1, "name": "a"}]

    def test_to_json(self) -> None:
        page = Page.of([1, 2], PageRequest.of(0, 2), 4)
        assert json.loads(page_to_json(page)) == page_to_dict(page)


class TestPageFromDict:
    def test_round_trip_of_paged_page(self) -> None:
        sort = Sort.by_orders(Order.desc("name").ignoring_case())
        page = Page.of([1, 2, 3, 4, 5], PageRequest.of(4, 5, sort), 56)
        assert page_from_dict(page_to_dict(page), int) == page

    def test_unpaged_page_comes_back_paged(self) -> None:
        # Lossy: an unpaged page is rebuilt as a PageRequest.
        restored = page_from_dict(page_to_dict(Page.from_list(["a", "b"])), str)
        assert restored.pageable == PageRequest.of(0, 2)
        assert restored.content == ("a", "b")
        assert restored.total_elements == 2

    def test_items_are_validated(self) -> None:
        data = {"content": [{"id": 1, "name": "a"}], "number": 0, "size": 10, "sort": [], "totalElements": 1}
        page = page_from_dict(data, Item)
        assert page.content == (Item(id=1, name="a"),)

    def test_invalid_items_fail(self) -> None:
        with pytest.raises(ValidationError):
            page_from_dict({"content": ["x"], "number": 0, "size": 1}, int)

    def test_total_pages_is_derived(self) -> None:
        data = {"content": [], "number": 0, "size": 10, "sort": [], "totalElements": 25, "totalPages": 99}
        assert page_from_dict(data).total_pages == 3

    def test_invalid_sort_fails(self) -> None:
        with pytest.raises(InvalidDirectionException):
            page_from_dict({"content": [], "number": 0, "size": 10, "sort": ["name,upwards"]})

    def test_from_json(self) -> None:
        text = '{"content": [1, 2], "number": 1, "size": 2, "sort": ["id,desc"], "totalElements": 6, "totalPages": 3}'
        page = page_from_json(text, int)
        assert page.content == (1, 2)
        assert page.pageable == PageRequest.of(1, 2, Sort.by_orders(Order.desc("id")))
        assert page.has_next
        assert page.has_previous


class TestPageModel:
    def test_populates_by_field_name_and_alias(self) -> None:
        by_name = PageModel[int](content=[1], number=0, size=1, sort=[], total_elements=1, total_pages=1)
        by_alias = PageModel[int].model_validate({"content": [1], "size": 1, "totalElements": 1, "totalPages": 1})
        assert by_name == by_alias

    def test_rejects_negative_numbers(self) -> None:
        with pytest.raises(ValidationError):
            PageModel[int].model_validate({"number": -1})
