"""Shared fixtures for license-headers tests."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

APACHE_HEADER = (
    "/*\n"
    " * Licensed to the Apache Software Foundation (ASF) under one\n"
    " * or more contributor license agreements.\n"
    " */\n"
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_report(tmp_path: Path):
    """Write a synthetic report and return its path."""

    def _write(*lines: str) -> Path:
        report = tmp_path / "rat.log"
        report.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return report

    return _write


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a source directory with one Apache-licensed Java file."""
    src = tmp_path / "src" / "main" / "java"
    src.mkdir(parents=True)
    (src / "Foo.java").write_text(APACHE_HEADER + "class Foo {}\n", encoding="utf-8")
    return src
