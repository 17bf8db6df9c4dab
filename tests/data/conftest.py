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
"""Shared fixtures for data tests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pytest


class RecordingQuery:
    """In-memory QueryBuilderPort that records every builder call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def select(self, *columns: Any) -> RecordingQuery:
        names: list[str] = []
        for column in columns:
            names.extend([column] if isinstance(column, str) else column)
        self.calls.append(("select", tuple(names)))
        return self

    def order_by(self, column: str, direction: str = "asc") -> RecordingQuery:
        self.calls.append(("order_by", column, direction))
        return self

    def with_relations(self, relations: Iterable[str]) -> RecordingQuery:
        self.calls.append(("with_relations", tuple(relations)))
        return self

    def with_trashed(self) -> RecordingQuery:
        self.calls.append(("with_trashed",))
        return self

    def where(self, column: str, value: Any) -> RecordingQuery:
        self.calls.append(("where", column, value))
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> RecordingQuery:
        self.calls.append(("where_in", column, tuple(values)))
        return self

    def where_raw(self, sql: Any, bindings: Mapping[str, Any] | None = None) -> RecordingQuery:
        self.calls.append(("where_raw", sql, dict(bindings or {})))
        return self

    def get(self, columns: Any = ("*",)) -> list[Any]:
        raise AssertionError("criteria and conditions must not execute the query")

    first = paginate = simple_paginate = get


@pytest.fixture
def recording_query() -> RecordingQuery:
    return RecordingQuery()
