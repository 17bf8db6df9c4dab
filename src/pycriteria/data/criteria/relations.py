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
"""Eager-load named relations with the query."""

from __future__ import annotations

from collections.abc import Iterable

from pycriteria.data.criteria.base import Q, Criterion


class WithRelations(Criterion):
    """Load all provided relations with the query.

    Accepts either several names or a single pre-built list::

        WithRelations("author", "tags")
        WithRelations(["author", "tags"])

    Dotted paths such as ``"posts.comments"`` load nested relations.
    """

    def __init__(self, *relations: str | Iterable[str]) -> None:
        if len(relations) == 1 and not isinstance(relations[0], str):
            self._relations: tuple[str, ...] = tuple(relations[0])
        else:
            self._relations = tuple(relations)  # type: ignore[arg-type]

    @property
    def relations(self) -> tuple[str, ...]:
        return self._relations

    def apply(self, query: Q) -> Q:
        query.with_relations(self._relations)
        return query

    def __repr__(self) -> str:
        return f"WithRelations({', '.join(repr(r) for r in self._relations)})"
