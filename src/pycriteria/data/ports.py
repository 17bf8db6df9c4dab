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
"""Outbound ports: the query builder and inbound request interfaces.

Criteria and conditions only ever talk to these protocols, so a criterion
written once works against any adapter that implements them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from pycriteria.data.page import Page, Slice

T = TypeVar("T")


@runtime_checkable
class QueryBuilderPort(Protocol[T]):
    """A mutable, unexecuted query scoped to one entity type.

    Builder methods return the same object so calls can be chained.
    """

    def select(self, *columns: str | Iterable[str]) -> QueryBuilderPort[T]: ...

    def order_by(self, column: str, direction: str = "asc") -> QueryBuilderPort[T]: ...

    def with_relations(self, relations: Iterable[str]) -> QueryBuilderPort[T]: ...

    def with_trashed(self) -> QueryBuilderPort[T]: ...

    def where(self, column: str, value: Any) -> QueryBuilderPort[T]: ...

    def where_in(self, column: str, values: Iterable[Any]) -> QueryBuilderPort[T]: ...

    def where_raw(self, sql: Any, bindings: Mapping[str, Any] | None = None) -> QueryBuilderPort[T]: ...

    def get(self, columns: Sequence[str] = ("*",)) -> list[T]: ...

    def first(self, columns: Sequence[str] = ("*",)) -> T | None: ...

    def paginate(
        self,
        per_page: int = 20,
        columns: Sequence[str] = ("*",),
        page_name: str = "page",
        page: int = 1,
    ) -> Page[T]: ...

    def simple_paginate(
        self,
        per_page: int = 20,
        columns: Sequence[str] = ("*",),
        page_name: str = "page",
        page: int = 1,
    ) -> Slice[T]: ...


@runtime_checkable
class RequestPort(Protocol):
    """An inbound request exposing its named parameters.

    ``get`` returns the parameter as a string, ``None`` when absent, or
    any other value the transport produced (e.g. a list for repeated keys).
    """

    def get(self, name: str) -> Any: ...
