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
"""StructlogAdapter: renders pycriteria's log events with structlog."""

from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from pycriteria.core.config import Config
from pycriteria.logging.library import LIBRARY_LOGGER


class StructlogAdapter:
    """Attach a structlog-rendered handler to the ``pycriteria`` loggers.

    Reads ``pycriteria.logging.level`` (default ``WARNING``),
    ``pycriteria.logging.format`` (``console`` or ``json``) and
    ``pycriteria.logging.propagate`` (default ``false``). Global structlog
    configuration and the root logger are left to the host application.

    Usage::

        StructlogAdapter().configure(Config({"pycriteria": {"logging": {"level": "DEBUG"}}}))
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._level: str = "WARNING"
        self._format: str = "console"
        self._propagate: bool = False
        self._handler: logging.Handler | None = None

    @property
    def level(self) -> str:
        return self._level

    @property
    def format(self) -> str:
        return self._format

    def configure(self, config: Config) -> None:
        """(Re)install the handler from the logging section of config."""
        self._level = str(config.get("pycriteria.logging.level", "WARNING")).upper()
        self._format = str(config.get("pycriteria.logging.format", "console")).lower()
        propagate = config.get("pycriteria.logging.propagate", False)
        self._propagate = propagate if isinstance(propagate, bool) else str(propagate).lower() in ("true", "1", "yes")

        library = logging.getLogger(LIBRARY_LOGGER)
        if self._handler is not None:
            library.removeHandler(self._handler)
        self._handler = logging.StreamHandler(self._stream)
        self._handler.setFormatter(self._formatter())
        library.addHandler(self._handler)
        library.setLevel(getattr(logging, self._level, logging.WARNING))
        library.propagate = self._propagate

    def reset(self) -> None:
        """Remove the installed handler and hand level control back to the host."""
        library = logging.getLogger(LIBRARY_LOGGER)
        if self._handler is not None:
            library.removeHandler(self._handler)
            self._handler = None
        library.setLevel(logging.NOTSET)
        library.propagate = True

    def _formatter(self) -> structlog.stdlib.ProcessorFormatter:
        renderer: Any
        if self._format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)
        return structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.TimeStamper(fmt="iso"),
                renderer,
            ],
        )
