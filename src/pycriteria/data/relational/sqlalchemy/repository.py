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
"""Criteria-aware repository built on SQLAlchemy 2.0."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar, cast, get_args, get_origin

from sqlalchemy.orm import Session

from pycriteria.data.condition import Condition, Conditions
from pycriteria.data.criteria.base import Criterion
from pycriteria.data.page import Page, Slice
from pycriteria.data.ports import QueryBuilderPort
from pycriteria.data.properties import RepositoryProperties
from pycriteria.data.relational.sqlalchemy.query import Query
from pycriteria.logging.library import get_logger

T = TypeVar("T")

ConditionsLike = Conditions | Mapping[str, Any] | Iterable[Condition] | Condition | None

logger = get_logger(__name__)


class Repository(Generic[T]):
    """Per-entity facade applying ad-hoc conditions and registered criteria.

    Subclass with a concrete entity type, or pass the model explicitly::

        class UserRepository(Repository[User]):
            pass

        users = UserRepository(session=session)
        users.add_criteria(WithRelations("posts"), OrderedByCreation())
        page = users.paginate({"role": "admin"}, per_page=20, page=2)

    Criteria are kept in one flat list in registration order and stay
    registered across calls until :meth:`clear_criteria`. An instance is
    meant to be owned by a single request or use case.
    """

    _entity_type: type | None = None
    # Type parameter still standing for the entity in a generic subclass.
    _entity_param: TypeVar | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Repository)):
                continue
            param = T if origin is Repository else origin._entity_param
            parameters = getattr(origin, "__parameters__", ())
            if param is None or param not in parameters:
                continue
            arg = get_args(base)[parameters.index(param)]
            if isinstance(arg, TypeVar):
                cls._entity_param = arg
            else:
                cls._entity_type = arg
                cls._entity_param = None
            break

    def __init__(
        self,
        model: type[T] | None = None,
        session: Session | None = None,
        properties: RepositoryProperties | None = None,
    ) -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either Repository[Entity] declaration or explicit model argument"
            )
        self._model: type[T] = cast(type[T], resolved)
        self._session = session
        self._properties = properties or RepositoryProperties()
        self._criteria: list[Criterion] = []
        self._criteria_enabled = self._properties.criteria_enabled

    @property
    def model(self) -> type[T]:
        """The entity class this repository is bound to."""
        return self._model

    @property
    def criteria(self) -> tuple[Criterion, ...]:
        return tuple(self._criteria)

    @property
    def criteria_enabled(self) -> bool:
        return self._criteria_enabled

    def make(self, **attributes: Any) -> T:
        """Create a new, unsaved instance of the entity."""
        return self._model(**attributes)

    def query(self) -> Query[T]:
        """A fresh query scoped to the entity, with nothing applied."""
        return Query(self._model, self._session)

    # ------------------------------------------------------------------
    # Criteria management
    # ------------------------------------------------------------------

    def set_criteria_mode(self, enabled: bool) -> Repository[T]:
        """Toggle whether registered criteria apply to the next builds."""
        self._criteria_enabled = enabled
        return self

    def use_criteria(self) -> Repository[T]:
        return self.set_criteria_mode(True)

    def no_criteria(self) -> Repository[T]:
        return self.set_criteria_mode(False)

    def add_criteria(self, *criteria: Criterion) -> Repository[T]:
        """Append criteria; they apply after any registered earlier, in the order given."""
        for criterion in criteria:
            if not isinstance(criterion, Criterion):
                raise TypeError(f"Expected a Criterion, got {type(criterion).__name__}")
        self._criteria.extend(criteria)
        return self

    def clear_criteria(self) -> Repository[T]:
        self._criteria.clear()
        return self

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def build_query(self, conditions: ConditionsLike = None) -> QueryBuilderPort[T]:
        """Build an unexecuted query from *conditions* and the active criteria.

        *conditions* may be a :class:`Conditions` builder, a single condition,
        an iterable of conditions, or a ``{column: value}`` mapping where a
        callable receives the query, a :func:`~pycriteria.data.condition.raw`
        value becomes a raw WHERE fragment, a list/tuple/set becomes
        ``IN (...)`` and anything else becomes ``=``.

        Each criterion receives the query returned by the one before it, so a
        criterion may hand back a different builder than it was given.
        """
        query: QueryBuilderPort[T] = self.query()
        resolved = Conditions.of(conditions)
        query = resolved.apply(query)

        applied = 0
        if self._criteria_enabled:
            for criterion in self._criteria:
                query = criterion.apply(query)
                applied += 1

        logger.debug(
            "query_built",
            model=self._model.__name__,
            conditions=len(resolved),
            criteria=applied,
            criteria_enabled=self._criteria_enabled,
        )
        return query

    # ------------------------------------------------------------------
    # Terminal methods
    # ------------------------------------------------------------------

    def get(self, conditions: ConditionsLike = None, columns: Sequence[str] = ("*",)) -> list[T]:
        """Return all matching entities."""
        return self.build_query(conditions).get(columns)

    def first(self, conditions: ConditionsLike = None, columns: Sequence[str] = ("*",)) -> T | None:
        """Return the first matching entity, or ``None``."""
        return self.build_query(conditions).first(columns)

    def paginate(
        self,
        conditions: ConditionsLike = None,
        per_page: int | None = None,
        page_name: str | None = None,
        page: int = 1,
        columns: Sequence[str] = ("*",),
    ) -> Page[T]:
        """Return one page of matching entities plus the total count.

        Args:
            conditions: Ad-hoc conditions, see :meth:`build_query`.
            per_page: Page size; defaults to ``pycriteria.repository.per_page``.
            page_name: Page request parameter name; defaults to
                ``pycriteria.repository.page_name``.
            page: Page number (1-based).
            columns: Columns to load when no criterion selected any.
        """
        return self.build_query(conditions).paginate(
            per_page if per_page is not None else self._properties.per_page,
            columns,
            page_name or self._properties.page_name,
            page,
        )

    def simple_paginate(
        self,
        conditions: ConditionsLike = None,
        per_page: int | None = None,
        page_name: str | None = None,
        page: int = 1,
        columns: Sequence[str] = ("*",),
    ) -> Slice[T]:
        """Like :meth:`paginate` but without counting; cheaper on large tables."""
        return self.build_query(conditions).simple_paginate(
            per_page if per_page is not None else self._properties.per_page,
            columns,
            page_name or self._properties.page_name,
            page,
        )
