"""Tests for TaskConfig Pydantic model."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from license_headers.models.config import TaskConfig


class TestTaskConfig:
    """Tests for TaskConfig model."""

    def test_defaults(self) -> None:
        """Test the default build directory and source sets."""
        config = TaskConfig()

        assert config.build_dir == Path("build")
        assert config.source_sets == [[Path("src/main/java")], [Path("src/test/java")]]
        assert config.header_lines is None
        assert config.add_default_matchers is True

    def test_default_source_sets_not_shared(self) -> None:
        """Test that each instance gets its own source set lists."""
        first = TaskConfig()
        first.source_sets[0].append(Path("extra"))

        assert TaskConfig().source_sets[0] == [Path("src/main/java")]

    def test_strings_become_paths(self) -> None:
        """Test that string paths are coerced."""
        config = TaskConfig(build_dir="out", source_sets=[["a", "b"], ["c"]])

        assert config.build_dir == Path("out")
        assert config.source_sets == [[Path("a"), Path("b")], [Path("c")]]

    def test_header_lines_must_be_positive(self) -> None:
        """Test that header_lines below one is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            TaskConfig(header_lines=0)

        assert "header_lines" in str(exc_info.value)

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown keys are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            TaskConfig(classpath="x")  # type: ignore[call-arg]

        assert "classpath" in str(exc_info.value)

    def test_resolve_paths(self, tmp_path: Path) -> None:
        """Test that relative paths are resolved against a base directory."""
        absolute = tmp_path / "abs"
        config = TaskConfig(build_dir="build", source_sets=[["src"], [absolute]])

        resolved = config.resolve_paths(tmp_path)

        assert resolved.build_dir == tmp_path / "build"
        assert resolved.source_sets == [[tmp_path / "src"], [absolute]]
        assert config.build_dir == Path("build")
