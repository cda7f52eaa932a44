"""Tests for configuration file loader."""
from __future__ import annotations

from pathlib import Path

import pytest

from license_headers.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_headers.exceptions import ConfigurationError
from license_headers.models.config import TaskConfig


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_yaml_extension(self, tmp_path: Path) -> None:
        """Test that .yaml extension is found."""
        config_file = tmp_path / ".license-headers.yaml"
        config_file.write_text("build_dir: out\n")

        assert find_config_file(tmp_path) == config_file

    def test_finds_yml_extension(self, tmp_path: Path) -> None:
        """Test that .yml extension is found."""
        config_file = tmp_path / ".license-headers.yml"
        config_file.write_text("build_dir: out\n")

        assert find_config_file(tmp_path) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Test that None is returned when no config file exists."""
        assert find_config_file(tmp_path) is None

    def test_yaml_takes_precedence_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml file takes precedence over .yml."""
        yaml_file = tmp_path / ".license-headers.yaml"
        yml_file = tmp_path / ".license-headers.yml"
        yaml_file.write_text("build_dir: a\n")
        yml_file.write_text("build_dir: b\n")

        assert find_config_file(tmp_path) == yaml_file

    def test_uses_cwd_when_no_start_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that current working directory is used when start_dir is None."""
        config_file = tmp_path / ".license-headers.yaml"
        config_file.write_text("build_dir: out\n")
        monkeypatch.chdir(tmp_path)

        assert find_config_file() == config_file


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_loads_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "build_dir: out\n"
            "source_sets:\n"
            "  - [core/src/main/java, core/src/main/resources]\n"
            "  - [core/src/test/java]\n"
            "header_lines: 50\n"
            "add_default_matchers: false\n"
        )

        result = load_config_file(config_file)
        base = tmp_path.resolve()

        assert isinstance(result, TaskConfig)
        assert result.build_dir == base / "out"
        assert result.source_sets == [
            [base / "core/src/main/java", base / "core/src/main/resources"],
            [base / "core/src/test/java"],
        ]
        assert result.header_lines == 50
        assert result.add_default_matchers is False

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file yields defaults relative to its directory."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        result = load_config_file(config_file)

        assert result.build_dir == tmp_path.resolve() / "build"
        assert result.source_sets == [
            [tmp_path.resolve() / "src/main/java"],
            [tmp_path.resolve() / "src/test/java"],
        ]

    def test_comments_only_returns_defaults(self, tmp_path: Path) -> None:
        """Test that a file with only comments yields defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("# nothing configured\n")

        assert load_config_file(config_file).build_dir == tmp_path.resolve() / "build"

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("source_sets: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
            load_config_file(config_file)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        """Test that a list at the root is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- build\n")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config_file(config_file)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Test that unknown keys are reported with their location."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("classpath: rat.jar\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)

        assert "classpath" in str(exc_info.value)

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        """Test that invalid values are reported with their location."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("header_lines: 0\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)

        assert "header_lines:" in str(exc_info.value)

    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yaml")


class TestLoadConfig:
    """Tests for load_config function."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test that an explicit path is loaded."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("build_dir: custom-out\n")

        assert load_config(str(config_file)).build_dir == tmp_path.resolve() / "custom-out"

    def test_discovers_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a config file in the cwd is discovered."""
        (tmp_path / ".license-headers.yaml").write_text("build_dir: found\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().build_dir == tmp_path.resolve() / "found"

    def test_defaults_relative_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that defaults resolve against the cwd without a config file."""
        monkeypatch.chdir(tmp_path)

        assert load_config().build_dir == Path.cwd() / "build"
