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
"""Tests for configuration loading and property binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from pycriteria.core.config import Config, config_properties
from pycriteria.data.properties import FilterProperties, RepositoryProperties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "svc", "port": 8080}})
        assert config.get("app.name") == "svc"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        assert Config({"a": 1}).get("a.b", "x") == "x"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "pycriteria.yaml"
        config_file.write_text("pycriteria:\n  repository:\n    per_page: 50\n")
        assert Config.from_file(config_file).get("pycriteria.repository.per_page") == 50

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "pycriteria.toml"
        config_file.write_text('[pycriteria.filter]\nparameter = "fields"\n')
        assert Config.from_file(config_file).get("pycriteria.filter.parameter") == "fields"

    def test_missing_file_is_empty(self, tmp_path: Path):
        assert Config.from_file(tmp_path / "nope.yaml").to_dict() == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("PYCRITERIA_REPOSITORY_PAGE_NAME", "p")
        config = Config({"pycriteria": {"repository": {"page_name": "page"}}})
        assert config.get("pycriteria.repository.page_name") == "p"

    def test_get_section(self):
        config = Config({"pycriteria": {"filter": {"parameter": "fields", "delimiter": ","}}})
        assert config.get_section("pycriteria.filter") == {"parameter": "fields", "delimiter": ","}

    def test_get_section_missing(self):
        assert Config({}).get_section("pycriteria.filter") == {}


class TestPlaceholderResolution:
    def test_resolve_env_var(self, monkeypatch):
        monkeypatch.setenv("FILTER_PARAM", "cols")
        config = Config({"pycriteria": {"filter": {"parameter": "${FILTER_PARAM}"}}})
        assert config.get("pycriteria.filter.parameter") == "cols"

    def test_resolve_config_reference(self):
        config = Config({"base": "fields", "param": "${base}"})
        assert config.get("param") == "fields"

    def test_resolve_with_default(self):
        assert Config({"key": "${MISSING_VAR_XYZ:fallback}"}).get("key") == "fallback"

    def test_unresolvable_raises(self):
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            Config({"key": "${MISSING_VAR_XYZ}"}).get("key")


class TestBinding:
    def test_bind_repository_properties(self):
        config = Config({"pycriteria": {"repository": {"per_page": 50, "criteria_enabled": False}}})
        props = config.bind(RepositoryProperties)
        assert props.per_page == 50
        assert props.page_name == "page"
        assert props.criteria_enabled is False

    def test_bind_defaults(self):
        props = Config({}).bind(FilterProperties)
        assert props.parameter == "filter"
        assert props.delimiter == ";"

    def test_bind_env_override_without_file_value(self, monkeypatch):
        monkeypatch.setenv("PYCRITERIA_REPOSITORY_PER_PAGE", "15")
        assert Config({}).bind(RepositoryProperties).per_page == 15

    def test_bind_validation_failure(self):
        config = Config({"pycriteria": {"repository": {"per_page": 0}}})
        with pytest.raises(ValueError, match="RepositoryProperties"):
            config.bind(RepositoryProperties)

    def test_bind_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            Config({"pycriteria": {"filter": {"delimiter": ""}}}).bind(FilterProperties)

    def test_bind_dataclass(self):
        @config_properties(prefix="app.paging")
        @dataclass
        class Paging:
            size: int = 10
            enabled: bool = True

        config = Config({"app": {"paging": {"size": "25", "enabled": "false"}}})
        paging = config.bind(Paging)
        assert paging.size == 25
        assert paging.enabled is False

    def test_bind_undecorated_raises(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
