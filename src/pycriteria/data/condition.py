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
"""Ad-hoc query conditions as a tagged variant.

Each condition kind is its own frozen dataclass that knows how to apply
itself to a :class:`~pycriteria.data.ports.QueryBuilderPort`:

* :class:`Equals`: ``column = value``
* :class:`In`: ``column IN (values)``
* :class:`Raw`: a literal SQL fragment
* :class:`Custom`: a callback that receives the query and takes full
  control of it

Callers either build conditions explicitly::

    conditions = Conditions().equals("role", "admin").in_("status", ["new", "open"])
    repo.get(conditions)

or pass a plain mapping, which is converted once at the boundary by
:meth:`Conditions.from_mapping`::

    repo.get({"role": "admin", "status": ["new", "open"], "_": raw("age > 18")})
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import TextClause

from pycriteria.data.ports import QueryBuilderPort

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class Equals:
    """``column = value``."""

    column: str
    value: Any

    def apply(self, query: QueryBuilderPort[Any]) -> None:
        query.where(self.column, self.value)


@dataclass(frozen=True)
class In:
    """``column IN (values)``. An empty ``values`` matches nothing."""

    column: str
    values: tuple[Any, ...]

    def apply(self, query: QueryBuilderPort[Any]) -> None:
        query.where_in(self.column, self.values)


@dataclass(frozen=True)
class Raw:
    """A literal SQL fragment with optional named bind parameters."""

    sql: str | TextClause
    bindings: Mapping[str, Any] = field(default_factory=dict)

    def apply(self, query: QueryBuilderPort[Any]) -> None:
        query.where_raw(self.sql, self.bindings or None)


@dataclass(frozen=True)
class Custom:
    """Hands the query to *callback*; its return value is ignored."""

    callback: Callable[[QueryBuilderPort[Any]], Any]

    def apply(self, query: QueryBuilderPort[Any]) -> None:
        self.callback(query)


Condition = Equals | In | Raw | Custom


def raw(sql: str | TextClause, **bindings: Any) -> Raw:
    """Mark *sql* as a raw WHERE fragment, e.g. ``raw("age > :age", age=18)``."""
    return Raw(sql, bindings)


def to_condition(key: str, value: Any) -> Condition:
    """Choose the condition kind for one mapping entry.

    Precedence: callable, then raw SQL, then sequence, then equality.
    """
    if callable(value):
        return Custom(value)
    if isinstance(value, Raw):
        return value
    if isinstance(value, TextClause):
        return Raw(value)
    if isinstance(value, _SEQUENCE_TYPES):
        return In(key, tuple(value))
    return Equals(key, value)


class Conditions:
    """Ordered collection of conditions with a fluent builder API."""

    def __init__(self, conditions: Iterable[Condition] = ()) -> None:
        self._conditions: list[Condition] = list(conditions)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Conditions:
        """Convert a loosely-typed ``{column: value}`` mapping, preserving key order."""
        return cls(to_condition(key, value) for key, value in mapping.items())

    @classmethod
    def by(cls, **kwargs: Any) -> Conditions:
        """Shorthand for :meth:`from_mapping` with keyword arguments."""
        return cls.from_mapping(kwargs)

    @classmethod
    def of(cls, conditions: Conditions | Mapping[str, Any] | Iterable[Condition] | None) -> Conditions:
        """Normalise anything a repository accepts as conditions."""
        if conditions is None:
            return cls()
        if isinstance(conditions, Conditions):
            return conditions
        if isinstance(conditions, Mapping):
            return cls.from_mapping(conditions)
        if isinstance(conditions, Condition):
            return cls([conditions])
        items = list(conditions)
        for item in items:
            if not isinstance(item, Condition):
                raise TypeError(f"Expected a condition, got {type(item).__name__}")
        return cls(items)

    def equals(self, column: str, value: Any) -> Conditions:
        self._conditions.append(Equals(column, value))
        return self

    def in_(self, column: str, values: Iterable[Any]) -> Conditions:
        self._conditions.append(In(column, tuple(values)))
        return self

    def raw(self, sql: str | TextClause, **bindings: Any) -> Conditions:
        self._conditions.append(Raw(sql, bindings))
        return self

    def custom(self, callback: Callable[[QueryBuilderPort[Any]], Any]) -> Conditions:
        self._conditions.append(Custom(callback))
        return self

    def apply(self, query: QueryBuilderPort[Any]) -> QueryBuilderPort[Any]:
        """Apply every condition to *query*, in order."""
        for condition in self._conditions:
            condition.apply(query)
        return query

    def __iter__(self) -> Iterator[Condition]:
        return iter(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __bool__(self) -> bool:
        return bool(self._conditions)

    def __repr__(self) -> str:
        return f"Conditions({self._conditions!r})"
