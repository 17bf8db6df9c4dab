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
"""Restrict selected columns from a request's ``filter`` parameter.

Concrete criteria declare which columns callers may ask for::

    class UserColumns(FilterCriteria):
        columns = ("id", "name", "email")

    repo.add_criteria(UserColumns(StarletteRequestAdapter(request)))

A request carrying ``?filter=name;age;email`` then selects ``name`` and
``email`` only. Requested names are matched exactly and case-sensitively
against the allow-list and are selected in allow-list order. Unknown names
are dropped silently; when nothing matches, or the parameter is missing or
not a string, the selection is left untouched.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from pycriteria.data.criteria.base import Q, Criterion
from pycriteria.data.ports import RequestPort
from pycriteria.data.properties import FilterProperties
from pycriteria.kernel.exceptions import MissingFilterableColumnsException
from pycriteria.logging.library import get_logger

logger = get_logger(__name__)


class FilterCriteria(Criterion):
    """Column projection driven by a request parameter.

    Subclasses must set ``columns``. Leaving it unset is a programming
    error reported the first time the criterion is applied.
    """

    columns: ClassVar[Sequence[str] | None] = None

    def __init__(self, request: RequestPort, properties: FilterProperties | None = None) -> None:
        self._request = request
        self._properties = properties or FilterProperties()

    def apply(self, query: Q) -> Q:
        allowed = self.columns
        if allowed is None:
            logger.error("filter_columns_missing", criterion=type(self).__name__)
            raise MissingFilterableColumnsException(type(self).__name__)

        requested = self._request.get(self._properties.parameter)
        if not isinstance(requested, str):
            return query

        selected = self.filterable(requested.split(self._properties.delimiter), allowed)
        if selected:
            logger.debug("filter_columns_selected", criterion=type(self).__name__, columns=selected)
            query.select(selected)
        return query

    @staticmethod
    def filterable(requested: Sequence[str], allowed: Sequence[str]) -> list[str]:
        """Allowed columns that were requested, in allow-list order, without duplicates."""
        wanted = set(requested)
        return [column for column in dict.fromkeys(allowed) if column in wanted]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(columns={self.columns!r})"
