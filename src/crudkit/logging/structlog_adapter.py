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
"""structlog-backed logging configured from ``crudkit.logging``."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any

import structlog

from crudkit.core.config import Config, config_properties

_HANDLER_NAME = "crudkit"


@config_properties(prefix="crudkit.logging")
@dataclass
class LoggingProperties:
    """``format`` is ``console`` or ``json``; ``level`` maps logger names to levels, ``root`` included."""

    format: str = "console"
    level: dict[str, str] = field(default_factory=lambda: {"root": "INFO"})

    def __post_init__(self) -> None:
        # A bare level (e.g. from CRUDKIT_LOGGING_LEVEL) applies to the root logger.
        if isinstance(self.level, str):
            self.level = {"root": self.level}


def _level_number(level: str) -> int:
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Services log through structlog (``structlog.get_logger``); library
    modules keep ``logging.getLogger(__name__)``.  Both end up in one stdout
    handler whose formatter runs the same processor chain, so stdlib records
    are rendered exactly like structlog events.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        properties = config.bind(LoggingProperties)
        levels = {name: str(level).upper() for name, level in properties.level.items()}
        self._root_level = levels.pop("root", "INFO")
        self._module_levels = levels
        self._format = properties.format.lower()

        self._install()
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the stdlib level of logger *name*; unknown names mean INFO."""
        logging.getLogger(name).setLevel(_level_number(level))

    def _install(self) -> None:
        shared: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer = (
            structlog.processors.JSONRenderer() if self._format == "json" else structlog.dev.ConsoleRenderer()
        )

        structlog.configure(
            processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )

        root = logging.getLogger()
        for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
            root.removeHandler(existing)
        root.addHandler(handler)
        root.setLevel(_level_number(self._root_level))


def configure_logging(config: Config) -> StructlogAdapter:
    """Configure structlog from *config* and return the adapter."""
    adapter = StructlogAdapter()
    adapter.configure(config)
    return adapter
