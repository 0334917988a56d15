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
"""pypage Logging — structlog loggers and level filtering.

:func:`pypage.logging.setup.configure_logging` installs a complete chain for
applications that do not configure structlog themselves.
"""

from pypage.logging.loggers import LevelFilter, get_logger, level_number

__all__ = ["LevelFilter", "get_logger", "level_number"]
