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
"""Loggers used inside pycriteria.

Events go to stdlib loggers under the ``pycriteria`` namespace, so they
stay silent until the host application enables that namespace, either
through its own logging setup or with
:class:`~pycriteria.logging.structlog_adapter.StructlogAdapter`.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

LIBRARY_LOGGER = "pycriteria"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """Return a structlog logger writing to the stdlib logger *name*.

    Levels are checked against the stdlib logger before any processing, and
    the event dict is handed over in the form
    :class:`structlog.stdlib.ProcessorFormatter` renders.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
