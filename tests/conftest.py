"""Shared test fixtures for wire_check tests."""

import sys
import textwrap
from pathlib import Path

import pytest

# Add src to path so tests can import wire_check
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wire_check.inputs.directory_scanning import load_package  # noqa: E402
from wire_check.parser import GoParser  # noqa: E402


@pytest.fixture(scope="session")
def go_parser():
    return GoParser()


@pytest.fixture
def write_go(tmp_path):
    """Writes dedented Go source to tmp_path/<name> and returns the path."""
    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_package(tmp_path, go_parser):
    """Writes {filename: source} into tmp_path/pkg and loads it as a Package."""
    def _make(files: dict, directory: str = "pkg"):
        pkg_dir = tmp_path / directory
        pkg_dir.mkdir(parents=True, exist_ok=True)
        for name, source in files.items():
            (pkg_dir / name).write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return load_package(pkg_dir, go_parser)
    return _make
