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
"""Criterion port: a reusable, named rule that decorates a query.

A criterion receives an unexecuted query, configures it (ordering,
projection, eager loading, scopes) and returns it. It never executes the
query and has no side effects beyond it.

Example::

    class OnlyAdmins(Criterion):
        def apply(self, query):
            return query.where("role", "admin")

    repo.add_criteria(OnlyAdmins(), OrderedByCreation())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pycriteria.data.ports import QueryBuilderPort

Q = TypeVar("Q", bound=QueryBuilderPort[Any])


class Criterion(ABC):
    """Abstract base for all criteria."""

    @abstractmethod
    def apply(self, query: Q) -> Q: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
