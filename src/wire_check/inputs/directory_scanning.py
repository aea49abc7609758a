# --- Directory scanning convenience -----------------------------------------
import logging
from pathlib import Path
from typing import Union

from wire_check.exceptions import PackageLoadError, ParseError
from wire_check.models.ast_models import Package, SyntaxTree
from wire_check.parser import GoParser

logger = logging.getLogger(__name__)


def go_files(directory: Path, include_tests: bool = False) -> list[Path]:
    """The package's .go files in name order. Subdirectories are other packages."""
    files = []
    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.suffix != ".go":
            continue
        if path.name.endswith("_test.go") and not include_tests:
            continue
        files.append(path)
    return files


def load_package(directory: Union[str, Path], parser: GoParser,
                 include_tests: bool = False) -> Package:
    """
    Parses the Go package in `directory`. The first file decides the package
    name; files of another package (an external `foo_test`) and files that
    fail to parse are skipped with a warning.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise PackageLoadError(f"{directory} is not a directory")

    trees: list[SyntaxTree] = []
    for path in go_files(directory, include_tests):
        try:
            tree = parser.parse_file(path)
        except ParseError as e:
            logger.warning("Failed to parse %s: %s", path, e)
            continue
        if trees and tree.package_name != trees[0].package_name:
            logger.warning("Skipping %s: package %s, expected %s",
                           path, tree.package_name, trees[0].package_name)
            continue
        trees.append(tree)

    if not trees:
        raise PackageLoadError(f"no Go files in {directory}")
    return Package(name=trees[0].package_name, files=tuple(trees))
