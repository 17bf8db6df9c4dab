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
"""Adapters exposing inbound request parameters to criteria."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.requests import HTTPConnection


class StarletteRequestAdapter:
    """RequestPort over a Starlette/FastAPI request's query string.

    A parameter given once yields its string value; a parameter repeated in
    the query string (``?filter=a&filter=b``) yields the list of values.
    """

    def __init__(self, request: HTTPConnection) -> None:
        self._request = request

    def get(self, name: str) -> Any:
        values = self._request.query_params.getlist(name)
        if not values:
            return None
        if len(values) == 1:
            return values[0]
        return values


class MappingRequest:
    """RequestPort over a plain mapping, for callers outside a web request."""

    def __init__(self, params: Mapping[str, Any] | None = None) -> None:
        self._params = dict(params or {})

    def get(self, name: str) -> Any:
        return self._params.get(name)
