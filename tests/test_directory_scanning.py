"""Tests for loading a directory of Go files as one package."""

import pytest

from wire_check.exceptions import PackageLoadError
from wire_check.inputs.directory_scanning import go_files, load_package


class TestGoFiles:
    def test_sorted_and_filtered(self, tmp_path):
        for name in ("b.go", "a.go", "a_test.go", "notes.md"):
            (tmp_path / name).write_text("package x\n")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.go").write_text("package sub\n")
        assert [p.name for p in go_files(tmp_path)] == ["a.go", "b.go"]
        assert [p.name for p in go_files(tmp_path, include_tests=True)] == ["a.go", "a_test.go", "b.go"]


class TestLoadPackage:
    def test_loads_all_files(self, make_package):
        package = make_package({
            "a.go": "package app\nfunc A() {}\n",
            "b.go": "package app\nfunc B() {}\n",
        })
        assert package.name == "app"
        assert [f.name for f in package.functions()] == ["A", "B"]

    def test_skips_unparsable_file(self, make_package, caplog):
        package = make_package({
            "a.go": "package app\nfunc A() {}\n",
            "broken.go": "package app\nfunc B( {\n",
        })
        assert [f.name for f in package.functions()] == ["A"]
        assert "broken.go" in caplog.text

    def test_skips_other_package(self, tmp_path, go_parser):
        (tmp_path / "a.go").write_text("package app\nfunc A() {}\n")
        (tmp_path / "a_test.go").write_text("package app_test\nfunc TestA() {}\n")
        package = load_package(tmp_path, go_parser, include_tests=True)
        assert [f.name for f in package.functions()] == ["A"]

    def test_empty_directory(self, tmp_path, go_parser):
        with pytest.raises(PackageLoadError):
            load_package(tmp_path, go_parser)

    def test_not_a_directory(self, tmp_path, go_parser):
        with pytest.raises(PackageLoadError):
            load_package(tmp_path / "missing", go_parser)

    def test_find_function(self, make_package):
        package = make_package({"a.go": "package app\nfunc A() {}\n"})
        assert package.find_function("A").name == "A"
        assert package.find_function("A", "app").name == "A"
        assert package.find_function("A", "other") is None
        assert package.find_function("B") is None
