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
"""Criteria that add a single ORDER BY clause."""

from __future__ import annotations

from pycriteria.data.criteria.base import Q, Criterion


class OrderedBy(Criterion):
    """Order results by *column*, newest/highest first unless ``descending=False``."""

    def __init__(self, column: str, descending: bool = True) -> None:
        self._column = column
        self._descending = descending

    @property
    def column(self) -> str:
        return self._column

    @property
    def descending(self) -> bool:
        return self._descending

    def apply(self, query: Q) -> Q:
        query.order_by(self._column, "desc" if self._descending else "asc")
        return query

    def __repr__(self) -> str:
        return f"{type(self).__name__}(column={self._column!r}, descending={self._descending})"


class OrderedByCreation(OrderedBy):
    """Return results ordered by the ``created_at`` column."""

    def __init__(self, descending: bool = True) -> None:
        super().__init__("created_at", descending)


class OrderedByModification(OrderedBy):
    """Return results ordered by the ``updated_at`` column."""

    def __init__(self, descending: bool = True) -> None:
        super().__init__("updated_at", descending)
