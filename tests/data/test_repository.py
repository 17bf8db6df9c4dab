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
"""Tests for the criteria-aware Repository."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Generic, TypeVar

import pytest
from sqlalchemy import String, create_engine, inspect
from sqlalchemy.orm import Mapped, Session, mapped_column

from pycriteria.data.condition import Conditions, raw
from pycriteria.data.criteria import (
    Criterion,
    FilterCriteria,
    OrderedByCreation,
    OrderedByModification,
    WithTrashed,
)
from pycriteria.data.page import Page, Slice
from pycriteria.data.properties import RepositoryProperties
from pycriteria.data.relational.sqlalchemy.entity import Base, BaseEntity, SoftDeleteMixin
from pycriteria.data.relational.sqlalchemy.query import Query
from pycriteria.data.relational.sqlalchemy.repository import Repository
from pycriteria.kernel.exceptions import MissingFilterableColumnsException
from pycriteria.web.request import MappingRequest


class Member(BaseEntity, SoftDeleteMixin):
    __tablename__ = "repo_members"

    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), default="")
    role: Mapped[str] = mapped_column(String(50), default="user")


class MemberRepository(Repository[Member]):
    pass


E = TypeVar("E")
K = TypeVar("K")


class ScopedRepository(Repository[E]):
    pass


class ScopedMembers(ScopedRepository[Member]):
    pass


class AuditedRepository(ScopedRepository[E]):
    pass


class AuditedMembers(AuditedRepository[Member]):
    pass


class KeyedRepository(Repository[E], Generic[K, E]):
    pass


class KeyedMembers(KeyedRepository[str, Member]):
    pass


class AdminMembers(MemberRepository):
    pass


class Marker(Criterion):
    """Records its label when applied."""

    def __init__(self, label: str, log: list[str]) -> None:
        self.label = label
        self.log = log

    def apply(self, query):
        self.log.append(self.label)
        return query


class NamedOnly(Criterion):
    """Hands back a new query instead of the one it was given."""

    def __init__(self, name: str, session: Session | None = None) -> None:
        self.name = name
        self.session = session

    def apply(self, query):
        return Query(query.model, self.session).where("name", self.name)


class Seen(Criterion):
    """Records the query it receives."""

    def __init__(self) -> None:
        self.queries: list = []

    def apply(self, query):
        self.queries.append(query)
        return query


class MemberColumns(FilterCriteria):
    columns = ("name", "email")


class UndeclaredColumns(FilterCriteria):
    pass


@pytest.fixture
def engine():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(session):
    return MemberRepository(session=session)


@pytest.fixture
def members(session):
    start = datetime(2026, 3, 1)
    rows = [
        Member(name="Ann", email="ann@example.com", role="admin", created_at=start, updated_at=start),
        Member(
            name="Ben",
            email="ben@example.com",
            role="user",
            created_at=start + timedelta(days=1),
            updated_at=start + timedelta(days=5),
        ),
        Member(
            name="Cid",
            email="cid@example.com",
            role="user",
            created_at=start + timedelta(days=2),
            updated_at=start + timedelta(days=3),
        ),
    ]
    session.add_all(rows)
    session.commit()
    return rows


class TestEntityBinding:
    def test_generic_declaration_binds_model(self):
        assert MemberRepository().model is Member

    def test_intermediate_generic_repository_binds_model(self):
        assert ScopedMembers().model is Member

    def test_two_level_generic_chain_binds_model(self):
        assert AuditedMembers().model is Member

    def test_entity_parameter_resolved_by_position(self):
        assert KeyedMembers().model is Member

    def test_plain_subclass_inherits_model(self):
        assert AdminMembers().model is Member

    def test_unparameterized_generic_repository_raises(self):
        with pytest.raises(TypeError, match="requires either"):
            ScopedRepository()

    def test_explicit_model(self):
        assert Repository(Member).model is Member

    def test_missing_model_raises(self):
        with pytest.raises(TypeError, match="requires either"):
            Repository()

    def test_make_builds_unsaved_instance(self):
        member = MemberRepository().make(name="New", role="admin")
        assert isinstance(member, Member)
        assert member.name == "New"
        assert inspect(member).transient

    def test_query_is_fresh_each_time(self):
        repo = MemberRepository()
        first, second = repo.query(), repo.query()
        assert isinstance(first, Query)
        assert first is not second


class TestCriteriaRegistration:
    def test_batches_apply_in_registration_order(self):
        log: list[str] = []
        repo = MemberRepository()
        repo.add_criteria(Marker("a1", log), Marker("a2", log))
        repo.add_criteria(Marker("b1", log))
        repo.build_query()
        assert log == ["a1", "a2", "b1"]

    def test_criteria_persist_across_builds(self):
        log: list[str] = []
        repo = MemberRepository().add_criteria(Marker("a", log))
        repo.build_query()
        repo.build_query()
        assert log == ["a", "a"]

    def test_conditions_apply_before_criteria(self):
        log: list[str] = []
        repo = MemberRepository().add_criteria(Marker("criterion", log))
        repo.build_query({"scope": lambda q: log.append("condition")})
        assert log == ["condition", "criterion"]

    def test_criteria_mode_off_suppresses_all(self):
        log: list[str] = []
        repo = MemberRepository().add_criteria(*(Marker(str(i), log) for i in range(5)))
        repo.set_criteria_mode(False)
        repo.build_query()
        assert log == []
        assert repo.criteria_enabled is False

    def test_criteria_mode_back_on_reapplies_without_registration(self):
        log: list[str] = []
        repo = MemberRepository().add_criteria(Marker("a", log))
        repo.no_criteria().build_query()
        repo.use_criteria().build_query()
        assert log == ["a"]
        assert repo.criteria_enabled is True

    def test_clear_criteria(self):
        log: list[str] = []
        repo = MemberRepository().add_criteria(Marker("a", log))
        repo.clear_criteria()
        repo.build_query()
        assert log == []
        assert repo.criteria == ()
        assert repo.criteria_enabled is True

    def test_criteria_is_a_flat_tuple(self):
        log: list[str] = []
        a, b, c = Marker("a", log), Marker("b", log), Marker("c", log)
        repo = MemberRepository().add_criteria(a, b).add_criteria(c)
        assert repo.criteria == (a, b, c)

    def test_rejects_non_criteria(self):
        repo = MemberRepository()
        with pytest.raises(TypeError, match="Expected a Criterion"):
            repo.add_criteria("OrderedByCreation")  # type: ignore[arg-type]
        assert repo.criteria == ()

    def test_properties_set_initial_mode(self):
        log: list[str] = []
        repo = MemberRepository(properties=RepositoryProperties(criteria_enabled=False))
        repo.add_criteria(Marker("a", log)).build_query()
        assert log == []

    def test_build_query_does_not_execute(self):
        assert isinstance(MemberRepository().build_query({"name": "Ann"}), Query)

    def test_criterion_may_return_a_new_query(self, session, members):
        repo = MemberRepository(session=session).add_criteria(NamedOnly("Ben", session))
        assert [m.name for m in repo.get()] == ["Ben"]

    def test_next_criterion_receives_returned_query(self):
        seen = Seen()
        repo = MemberRepository().add_criteria(NamedOnly("Ben"), seen)
        query = repo.build_query()
        assert seen.queries == [query]
        assert isinstance(query, Query)

    def test_returned_query_reaches_pagination(self, session, members):
        repo = MemberRepository(session=session).add_criteria(NamedOnly("Cid", session))
        page = repo.paginate(per_page=10)
        assert page.total == 1
        assert [m.name for m in page.items] == ["Cid"]


class TestTerminalMethods:
    def test_get_all(self, repo, members):
        assert len(repo.get()) == 3

    def test_get_with_equality(self, repo, members):
        assert [m.name for m in repo.get({"role": "admin"})] == ["Ann"]

    def test_get_with_membership(self, repo, members):
        rows = repo.add_criteria(OrderedByCreation(descending=False)).get({"name": ["Ann", "Cid"]})
        assert [m.name for m in rows] == ["Ann", "Cid"]

    def test_get_with_raw(self, repo, members):
        rows = repo.get({"_": raw("name <> :name", name="Ann")})
        assert sorted(m.name for m in rows) == ["Ben", "Cid"]

    def test_get_with_custom(self, repo, members):
        rows = repo.get({"_": lambda q: q.where("name", "Ben")})
        assert [m.name for m in rows] == ["Ben"]

    def test_get_with_conditions_builder(self, repo, members):
        rows = repo.get(Conditions().equals("role", "user").in_("name", ["Cid"]))
        assert [m.name for m in rows] == ["Cid"]

    def test_get_columns(self, repo, members):
        member = repo.get({"name": "Ann"}, columns=["email"])[0]
        assert "email" not in inspect(member).unloaded
        assert "name" in inspect(member).unloaded

    def test_first_with_ordering_criteria(self, repo, members):
        assert repo.add_criteria(OrderedByCreation()).first().name == "Cid"

    def test_first_ordered_by_modification(self, repo, members):
        assert repo.add_criteria(OrderedByModification()).first().name == "Ben"

    def test_first_without_match(self, repo, members):
        assert repo.first({"name": "Zed"}) is None

    def test_no_criteria_ignores_ordering(self, repo, members):
        repo.add_criteria(OrderedByCreation(descending=False))
        assert repo.first().name == "Ann"
        repo.no_criteria()
        assert repo.first({"name": "Cid"}).name == "Cid"

    def test_with_trashed_criterion(self, repo, members, session):
        members[0].soft_delete()
        session.commit()
        assert len(repo.get()) == 2
        assert len(repo.add_criteria(WithTrashed()).get()) == 3

    def test_unknown_column_propagates(self, repo, members):
        with pytest.raises(AttributeError):
            repo.get({"missing_column": 1})


class TestFilterCriteriaIntegration:
    def test_restricts_loaded_columns(self, repo, members):
        repo.add_criteria(MemberColumns(MappingRequest({"filter": "name;role"})))
        member = repo.first({"name": "Ann"})
        unloaded = inspect(member).unloaded
        assert "name" not in unloaded
        assert "role" in unloaded
        assert "email" in unloaded

    def test_unmatched_filter_loads_everything(self, repo, members):
        repo.add_criteria(MemberColumns(MappingRequest({"filter": "role"})))
        member = repo.first({"name": "Ann"})
        assert "role" not in inspect(member).unloaded

    def test_missing_allow_list_raises_on_build(self, repo):
        criterion = UndeclaredColumns(MappingRequest({"filter": "name"}))
        repo.add_criteria(criterion)
        with pytest.raises(MissingFilterableColumnsException):
            repo.build_query()

    def test_missing_allow_list_ignored_when_criteria_disabled(self, repo):
        repo.add_criteria(UndeclaredColumns(MappingRequest()))
        repo.no_criteria().build_query()


class TestPagination:
    @pytest.fixture
    def crowd(self, session):
        session.add_all([Member(name=f"M{i:02d}", role="user" if i % 3 else "admin") for i in range(45)])
        session.commit()

    def test_paginate(self, repo, crowd):
        page = repo.paginate(per_page=20, page=1)
        assert isinstance(page, Page)
        assert len(page.items) == 20
        assert page.total == 45
        assert page.total_pages == 3
        assert page.page_name == "page"

    def test_simple_paginate(self, repo, crowd):
        page = repo.simple_paginate(per_page=20, page=1)
        assert isinstance(page, Slice)
        assert len(page.items) == 20
        assert page.has_next is True

    def test_paginate_with_conditions(self, repo, crowd):
        page = repo.paginate({"role": "admin"}, per_page=10)
        assert page.total == 15
        assert len(page.items) == 10

    def test_paginate_uses_configured_defaults(self, session, crowd):
        repo = MemberRepository(session=session, properties=RepositoryProperties(per_page=7, page_name="p"))
        page = repo.paginate()
        assert len(page.items) == 7
        assert page.size == 7
        assert page.page_name == "p"

    def test_default_page_size_is_twenty(self, repo, crowd):
        assert len(repo.simple_paginate().items) == 20

    def test_paginate_projection(self, repo, crowd):
        page = repo.paginate(per_page=5, columns=["name"])
        assert all("role" in inspect(m).unloaded for m in page.items)

    def test_paginate_rejects_zero_page_size(self, repo, crowd):
        with pytest.raises(ValueError):
            repo.paginate(per_page=0)
