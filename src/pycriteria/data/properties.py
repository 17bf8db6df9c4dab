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
"""Bindable configuration models for repositories and filter criteria."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pycriteria.core.config import config_properties


@config_properties(prefix="pycriteria.repository")
class RepositoryProperties(BaseModel):
    """Defaults used by :class:`~pycriteria.data.relational.sqlalchemy.repository.Repository`.

    Attributes:
        per_page: Page size when a paginated fetch does not pass one.
        page_name: Request parameter name that carries the page number.
        criteria_enabled: Initial criteria mode of new repositories.
    """

    per_page: int = Field(default=20, ge=1)
    page_name: str = "page"
    criteria_enabled: bool = True


@config_properties(prefix="pycriteria.filter")
class FilterProperties(BaseModel):
    """Where :class:`~pycriteria.data.criteria.filter.FilterCriteria` reads its input."""

    parameter: str = "filter"
    delimiter: str = Field(default=";", min_length=1)
