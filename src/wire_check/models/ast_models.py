# --- Data models for the analysis --------------------------------------------
from dataclasses import dataclass, field
from typing import Optional

from tree_sitter import Node


@dataclass(frozen=True)
class Position:
    """A source location. Line and column are 0-based, like tree-sitter points."""
    path: Optional[str]  # None means "no position" (e.g. a failed wire-gen parse)
    line: int = 0
    col: int = 0

    @property
    def is_valid(self) -> bool:
        return self.path is not None


NO_POSITION = Position(path=None)


@dataclass(frozen=True)
class FunctionDecl:
    """A top-level `func` declaration, plain function or method."""
    name: str  # e.g. "ProvideService"
    params: tuple[str, ...]  # declared parameter names; method receivers are not included
    body: Optional[Node] = field(compare=False, repr=False)  # None for bodyless (assembly-backed) funcs
    position: Position = NO_POSITION
    source: bytes = field(default=b"", compare=False, repr=False)


@dataclass(frozen=True)
class SyntaxTree:
    """Parsed, read-only view of one Go file."""
    path: str
    package_name: str
    functions: tuple[FunctionDecl, ...]
    root: Node = field(compare=False, repr=False)


@dataclass(frozen=True)
class Package:
    """The syntax forest of the package under analysis."""
    name: str
    files: tuple[SyntaxTree, ...]

    def functions(self):
        for tree in self.files:
            yield from tree.functions

    def find_function(self, name: str, qualifier: str = "") -> Optional[FunctionDecl]:
        """
        First declaration called `name` in this package. A qualified reference
        only resolves when the qualifier is this package's own name; anything
        else is another package and stays unresolved.
        """
        if qualifier and qualifier != self.name:
            return None
        for decl in self.functions():
            if decl.name == name:
                return decl
        return None


@dataclass(frozen=True)
class FunctionCallRef:
    """A call site found inside a function body."""
    name: str  # callee name, e.g. "newStore"
    qualifier: str  # "" for a bare call, otherwise the identifier before the dot
    position: Position


@dataclass(frozen=True)
class MethodCallFinding:
    """A call of a method on one of the function's own parameters."""
    receiver: str  # parameter name, e.g. "cfg"
    method: str  # e.g. "Load"
    position: Position
    call_path: tuple[str, ...] = ()


@dataclass(frozen=True)
class Diagnostic:
    position: Position
    message: str
