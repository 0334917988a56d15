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
"""Stand-alone structlog setup for applications without their own."""

from __future__ import annotations

import sys

import structlog

from pypage.config.properties.logging import LoggingProperties
from pypage.core.config import Config
from pypage.logging.loggers import LevelFilter


def configure_logging(config: Config | None = None) -> LoggingProperties:
    """Install a structlog chain driven by the ``pypage.logging`` section.

    Events are written to stdout as console text or JSON lines, depending
    on ``pypage.logging.format``. Handlers of the stdlib ``logging`` module
    are left as the application set them up.

    Args:
        config: Source of the logging section; the packaged defaults when omitted.

    Returns:
        The bound logging properties.
    """
    source = config if config is not None else Config.defaults()
    properties = source.bind(LoggingProperties)

    renderer: structlog.typing.Processor
    if properties.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            LevelFilter.from_properties(properties),
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
    )
    return properties
