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
"""Mutable query builder over a SQLAlchemy 2.0 ``Select``.

:class:`Query` is the SQLAlchemy implementation of
:class:`~pycriteria.data.ports.QueryBuilderPort`. Builder methods record
clauses and return ``self``; nothing touches the database until one of the
terminal methods (``get``, ``first``, ``count``, ``paginate``,
``simple_paginate``) runs.

Usage::

    rows = (
        Query(User, session)
        .where("role", "admin")
        .where_in("status", ["new", "open"])
        .order_by("created_at", "desc")
        .with_relations(["posts.comments"])
        .get()
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, TextClause, func, select, text
from sqlalchemy.orm import Session, load_only, selectinload

from pycriteria.data.page import Page, Slice
from pycriteria.data.relational.sqlalchemy.entity import SoftDeleteMixin

T = TypeVar("T")

_DIRECTIONS = ("asc", "desc")


def _flatten(columns: tuple[str | Iterable[str], ...]) -> list[str]:
    names: list[str] = []
    for column in columns:
        if isinstance(column, str):
            names.append(column)
        else:
            names.extend(column)
    return names


class Query(Generic[T]):
    """Chainable, unexecuted query for one entity type."""

    def __init__(self, model: type[T], session: Session | None = None) -> None:
        self._model = model
        self._session = session
        self._statement: Select[Any] = select(model)
        self._columns: tuple[str, ...] | None = None
        self._relations: list[str] = []
        self._with_trashed = False

    @property
    def model(self) -> type[T]:
        return self._model

    @property
    def selected_columns(self) -> tuple[str, ...] | None:
        """Columns chosen with :meth:`select`, or ``None`` when unrestricted."""
        return self._columns

    @property
    def relations(self) -> tuple[str, ...]:
        return tuple(self._relations)

    @property
    def includes_trashed(self) -> bool:
        return self._with_trashed

    def _require_session(self) -> Session:
        """Return the session or raise if none is configured."""
        if self._session is None:
            raise RuntimeError(f"No Session configured for {self._model.__name__} query; pass one to the repository")
        return self._session

    def _attribute(self, column: str) -> Any:
        return getattr(self._model, column)

    # ------------------------------------------------------------------
    # Builder methods
    # ------------------------------------------------------------------

    def select(self, *columns: str | Iterable[str]) -> Query[T]:
        """Restrict the loaded columns. Replaces any earlier selection."""
        self._columns = tuple(_flatten(columns))
        return self

    def order_by(self, column: str, direction: str = "asc") -> Query[T]:
        direction = direction.lower()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Order direction must be 'asc' or 'desc', got {direction!r}")
        attr = self._attribute(column)
        self._statement = self._statement.order_by(attr.desc() if direction == "desc" else attr.asc())
        return self

    def with_relations(self, relations: str | Iterable[str]) -> Query[T]:
        """Eager-load relations; dotted paths load nested relations."""
        if isinstance(relations, str):
            relations = [relations]
        for relation in relations:
            if relation not in self._relations:
                self._relations.append(relation)
        return self

    def with_trashed(self) -> Query[T]:
        """Include soft-deleted rows."""
        self._with_trashed = True
        return self

    def where(self, column: str, value: Any) -> Query[T]:
        """``column = value``; ``None`` compiles to ``IS NULL``."""
        self._statement = self._statement.where(self._attribute(column) == value)
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> Query[T]:
        self._statement = self._statement.where(self._attribute(column).in_(list(values)))
        return self

    def where_raw(self, sql: str | TextClause, bindings: Mapping[str, Any] | None = None) -> Query[T]:
        clause = sql if isinstance(sql, TextClause) else text(sql)
        if bindings:
            clause = clause.bindparams(**bindings)
        self._statement = self._statement.where(clause)
        return self

    # ------------------------------------------------------------------
    # Statement compilation
    # ------------------------------------------------------------------

    def _is_soft_deletable(self) -> bool:
        return isinstance(self._model, type) and issubclass(self._model, SoftDeleteMixin)

    def _filtered_statement(self) -> Select[Any]:
        stmt = self._statement
        if self._is_soft_deletable() and not self._with_trashed:
            stmt = stmt.where(self._model.deleted_at.is_(None))  # type: ignore[attr-defined]
        return stmt

    def _eager_load(self, path: str) -> Any:
        parts = path.split(".")
        attr = getattr(self._model, parts[0])
        option = selectinload(attr)
        for part in parts[1:]:
            attr = getattr(attr.property.mapper.class_, part)
            option = option.selectinload(attr)
        return option

    def to_statement(self, columns: Sequence[str] = ("*",)) -> Select[Any]:
        """Compile the recorded clauses into an executable ``Select``.

        Columns chosen with :meth:`select` win over *columns*. The primary
        key is always loaded so results stay identity-mapped entities.
        """
        stmt = self._filtered_statement()
        projection = self._columns if self._columns is not None else tuple(columns)
        if projection and "*" not in projection:
            stmt = stmt.options(load_only(*(self._attribute(c) for c in projection)))
        for path in self._relations:
            stmt = stmt.options(self._eager_load(path))
        return stmt

    # ------------------------------------------------------------------
    # Terminal methods
    # ------------------------------------------------------------------

    def get(self, columns: Sequence[str] = ("*",)) -> list[T]:
        """Execute and return every matching entity."""
        session = self._require_session()
        return list(session.scalars(self.to_statement(columns)).all())

    def first(self, columns: Sequence[str] = ("*",)) -> T | None:
        """Execute and return the first matching entity, or ``None``."""
        session = self._require_session()
        return session.scalars(self.to_statement(columns).limit(1)).first()

    def count(self) -> int:
        """Count matching rows, ignoring ordering and eager loads."""
        session = self._require_session()
        subquery = self._filtered_statement().order_by(None).subquery()
        return session.execute(select(func.count()).select_from(subquery)).scalar_one()

    def paginate(
        self,
        per_page: int = 20,
        columns: Sequence[str] = ("*",),
        page_name: str = "page",
        page: int = 1,
    ) -> Page[T]:
        """Execute a counted pagination: one COUNT plus one page fetch."""
        _check_page(per_page, page)
        session = self._require_session()
        total = self.count()
        items: list[T] = []
        if total:
            stmt = self.to_statement(columns).offset((page - 1) * per_page).limit(per_page)
            items = list(session.scalars(stmt).all())
        return Page(items=items, total=total, page=page, size=per_page, page_name=page_name)

    def simple_paginate(
        self,
        per_page: int = 20,
        columns: Sequence[str] = ("*",),
        page_name: str = "page",
        page: int = 1,
    ) -> Slice[T]:
        """Execute an uncounted pagination, fetching one extra row to detect a next page."""
        _check_page(per_page, page)
        session = self._require_session()
        stmt = self.to_statement(columns).offset((page - 1) * per_page).limit(per_page + 1)
        rows = list(session.scalars(stmt).all())
        return Slice(
            items=rows[:per_page],
            page=page,
            size=per_page,
            has_next=len(rows) > per_page,
            page_name=page_name,
        )

    def __repr__(self) -> str:
        return f"Query({self._model.__name__})"


def _check_page(per_page: int, page: int) -> None:
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
