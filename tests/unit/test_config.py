#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config.py
"""Unit tests for configuration discovery and loading.

Tests cover:
- Finding config files in parent directories and pyproject.toml
- Loading TOML, YAML and JSON files
- Environment variable overrides
- Building options from configuration values

"""

from pathlib import Path

import pytest

from txtdoc.config import (
    discover_config_file,
    find_config_in_parents,
    get_env_overrides,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)
from txtdoc.exceptions import ConfigError
from txtdoc.options import TxtRendererOptions


@pytest.mark.unit
class TestDiscovery:
    """Tests for configuration file discovery."""

    def test_finds_file_in_parent(self, tmp_path: Path) -> None:
        """Test that a config file in a parent directory is found."""
        config = tmp_path / ".txtdoc.toml"
        config.write_text("max_width = 72\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_preferred(self, tmp_path: Path) -> None:
        """Test the priority order of dedicated config file names."""
        (tmp_path / ".txtdoc.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".txtdoc.yaml").write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path).name == ".txtdoc.yaml"

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        """Test that pyproject.toml counts only with a [tool.txtdoc] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) != pyproject.resolve()

        pyproject.write_text('[project]\nname = "x"\n\n[tool.txtdoc]\nmax_width = 100\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_home_fallback(self, isolated_env: Path) -> None:
        """Test that the home directory is searched last."""
        work = isolated_env / "work"
        work.mkdir()
        home_config = isolated_env / ".txtdoc.yml"
        home_config.write_text("max_width: 50\n", encoding="utf-8")
        assert discover_config_file(work) is not None


@pytest.mark.unit
class TestLoading:
    """Tests for loading configuration files."""

    def test_toml(self, tmp_path: Path) -> None:
        """Test loading a TOML file."""
        path = tmp_path / ".txtdoc.toml"
        path.write_text("max_width = 72\n", encoding="utf-8")
        assert load_config_file(path) == {"max_width": 72}

    def test_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / ".txtdoc.yaml"
        path.write_text("max-width: 60\n", encoding="utf-8")
        assert load_config_file(path) == {"max-width": 60}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test that an empty YAML file is an empty configuration."""
        path = tmp_path / ".txtdoc.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path: Path) -> None:
        """Test loading a JSON file."""
        path = tmp_path / ".txtdoc.json"
        path.write_text('{"max_width": 40}', encoding="utf-8")
        assert load_config_file(path) == {"max_width": 40}

    def test_pyproject_section(self, tmp_path: Path) -> None:
        """Test that only the tool section of pyproject.toml is returned."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.txtdoc]\nmax_width = 100\n', encoding="utf-8")
        assert load_config_file(path) == {"max_width": 100}

    @pytest.mark.parametrize(
        "name,content",
        [
            (".txtdoc.toml", "max_width = ["),
            (".txtdoc.json", "{"),
            (".txtdoc.json", "[1, 2]"),
            (".txtdoc.yaml", "- a\n- b\n"),
            ("config.ini", "[x]"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, name: str, content: str) -> None:
        """Test that unreadable or unsupported files raise ConfigError."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config_file(tmp_path / "missing.toml")


@pytest.mark.unit
class TestOptionsFromConfig:
    """Tests for building options from configuration values."""

    def test_empty_config_keeps_base(self) -> None:
        """Test that an empty configuration returns the base options."""
        base = TxtRendererOptions(max_width=50)
        assert options_from_config({}, base=base) is base

    def test_dashed_keys_and_string_values(self) -> None:
        """Test key normalization and string conversion."""
        assert options_from_config({"max-width": "60"}).max_width == 60

    def test_unknown_key(self) -> None:
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigError, match="Unknown option 'width'"):
            options_from_config({"width": 10}, source=".txtdoc.toml")

    @pytest.mark.parametrize("value", [0, "abc", "-3"])
    def test_invalid_values(self, value) -> None:
        """Test that invalid values raise ConfigError."""
        with pytest.raises(ConfigError):
            options_from_config({"max_width": value})


@pytest.mark.unit
class TestEnvironmentAndPriority:
    """Tests for environment variables and load priority."""

    def test_env_overrides(self) -> None:
        """Test that only TXTDOC_ option variables are collected."""
        environ = {"TXTDOC_MAX_WIDTH": "50", "TXTDOC_UNKNOWN": "x", "MAX_WIDTH": "10"}
        assert get_env_overrides(environ) == {"max_width": "50"}

    def test_env_beats_config(self) -> None:
        """Test that environment values override file values."""
        options = options_from_config({"max_width": 70})
        options = options_from_config(get_env_overrides({"TXTDOC_MAX_WIDTH": "50"}), base=options)
        assert options.max_width == 50

    def test_no_config(self, isolated_env: Path) -> None:
        """Test that discovery can be disabled."""
        (isolated_env / ".txtdoc.toml").write_text("max_width = 72\n", encoding="utf-8")
        assert load_config_with_priority(no_config=True) == ({}, None)

    def test_explicit_path_wins(self, isolated_env: Path) -> None:
        """Test that an explicit path is loaded even with discovery disabled."""
        (isolated_env / ".txtdoc.toml").write_text("max_width = 72\n", encoding="utf-8")
        explicit = isolated_env / "other.json"
        explicit.write_text('{"max_width": 30}', encoding="utf-8")
        config, path = load_config_with_priority(explicit_path=str(explicit), no_config=True)
        assert config == {"max_width": 30}
        assert path == explicit

    def test_env_var_path(self, isolated_env: Path) -> None:
        """Test loading from the path given by TXTDOC_CONFIG."""
        env_config = isolated_env / "env.yaml"
        env_config.write_text("max_width: 45\n", encoding="utf-8")
        config, _ = load_config_with_priority(env_var_path=str(env_config))
        assert config == {"max_width": 45}

    def test_discovery(self, isolated_env: Path) -> None:
        """Test that a config file in the working directory is discovered."""
        (isolated_env / ".txtdoc.toml").write_text("max_width = 72\n", encoding="utf-8")
        config, path = load_config_with_priority()
        assert config == {"max_width": 72}
        assert path is not None and path.name == ".txtdoc.toml"
