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
"""pycriteria data — criteria, conditions and the repository pattern.

Backend-neutral types (criteria, conditions, pages, ports) live here; the
SQLAlchemy adapter lives in :mod:`pycriteria.data.relational.sqlalchemy` and
its main types are re-exported for convenience.
"""

from pycriteria.data.condition import Condition, Conditions, Custom, Equals, In, Raw, raw
from pycriteria.data.criteria import (
    Criterion,
    FilterCriteria,
    OrderedBy,
    OrderedByCreation,
    OrderedByModification,
    WithRelations,
    WithTrashed,
)
from pycriteria.data.page import Page, Slice
from pycriteria.data.ports import QueryBuilderPort, RequestPort
from pycriteria.data.properties import FilterProperties, RepositoryProperties
from pycriteria.data.relational.sqlalchemy import Base, BaseEntity, Query, Repository, SoftDeleteMixin

__all__ = [
    "Base",
    "BaseEntity",
    "Condition",
    "Conditions",
    "Criterion",
    "Custom",
    "Equals",
    "FilterCriteria",
    "FilterProperties",
    "In",
    "OrderedBy",
    "OrderedByCreation",
    "OrderedByModification",
    "Page",
    "Query",
    "QueryBuilderPort",
    "Raw",
    "Repository",
    "RepositoryProperties",
    "RequestPort",
    "Slice",
    "SoftDeleteMixin",
    "WithRelations",
    "WithTrashed",
    "raw",
]
