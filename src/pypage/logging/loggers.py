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
"""Loggers and level filtering for pypage events.

Every pypage module logs through :func:`get_logger`, which tags each event
with the emitting module under the ``logger`` key. Applications that run
their own structlog chain can add :class:`LevelFilter` to it to apply the
``pypage.logging.level`` table to pypage events only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog
from structlog.typing import EventDict

if TYPE_CHECKING:
    from pypage.config.properties.logging import LoggingProperties

_ROOT_NAME = "pypage"

# structlog method names that are not stdlib level names.
_METHOD_LEVELS = {"warn": "WARNING", "exception": "ERROR", "fatal": "CRITICAL", "msg": "INFO"}


def level_number(level: str) -> int:
    """Numeric stdlib level for a level or structlog method name."""
    name = _METHOD_LEVELS.get(level.lower(), level.upper())
    value = getattr(logging, name, None)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def get_logger(name: str) -> Any:
    """Lazy structlog logger for the pypage module *name*."""
    return structlog.get_logger(name, logger=name)


class LevelFilter:
    """structlog processor dropping pypage events below their configured level.

    *levels* maps logger names to level names; ``root`` is the level for
    every pypage logger without a more specific entry. The longest matching
    name wins, so with ``{"root": "INFO", "pypage.data": "WARNING"}`` a
    debug event from ``pypage.data.resolver`` is dropped. Events that do not
    come from a pypage logger pass through untouched.
    """

    def __init__(self, levels: Mapping[str, str]) -> None:
        table = {name: level_number(level) for name, level in levels.items()}
        self._root = table.pop("root", logging.INFO)
        self._modules = sorted(table.items(), key=lambda item: len(item[0]), reverse=True)

    @classmethod
    def from_properties(cls, properties: LoggingProperties) -> LevelFilter:
        return cls(properties.level)

    def level_for(self, name: str) -> int:
        for module, level in self._modules:
            if name == module or name.startswith(module + "."):
                return level
        return self._root

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        name = event_dict.get("logger")
        if not isinstance(name, str) or not (name == _ROOT_NAME or name.startswith(_ROOT_NAME + ".")):
            return event_dict
        if level_number(method_name) < self.level_for(name):
            raise structlog.DropEvent
        return event_dict
