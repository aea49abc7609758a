import logging
from pathlib import Path
from typing import Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from wire_check.exceptions import ParseError
from wire_check.models.ast_models import FunctionDecl, Position, SyntaxTree
from wire_check.tree_sitter_helpers import iter_preorder, node_point, node_text

logger = logging.getLogger(__name__)


# --- Tree-sitter language loading -------------------------------------------

def load_go_language() -> Language:
    """
    Loads the Tree-sitter Go grammar shipped by the `tree-sitter-go` wheel.
    """
    return Language(tree_sitter_go.language())


# --- The parser --------------------------------------------------------------

class GoParser:
    """
    Parses Go source into a SyntaxTree: the package name plus every top-level
    function and method declaration with its parameter names and body.

    Tree-sitter never refuses input, it recovers and marks the damage with
    ERROR / MISSING nodes. Any such node is turned into a ParseError here, so
    callers get the all-or-nothing behaviour of a regular compiler front end.
    """

    def __init__(self, language: Optional[Language] = None):
        self.language = language or load_go_language()
        self.parser = Parser(self.language)

    def parse(self, source_bytes: bytes) -> Tree:
        return self.parser.parse(source_bytes)

    def parse_file(self, path: Union[str, Path]) -> SyntaxTree:
        path = str(path)
        try:
            source_bytes = Path(path).read_bytes()
        except OSError as e:
            raise ParseError(path, e.strerror or str(e)) from e
        except ValueError as e:
            # e.g. an embedded NUL byte in a path taken from settings
            raise ParseError(path, str(e)) from e
        return self.parse_bytes(source_bytes, path)

    def parse_source(self, source: str, path: str = "<source>") -> SyntaxTree:
        return self.parse_bytes(source.encode("utf-8"), path)

    def parse_bytes(self, source_bytes: bytes, path: str) -> SyntaxTree:
        tree = self.parse(source_bytes)
        root: Node = tree.root_node
        if root.has_error:
            self._raise_first_error(source_bytes, root, path)

        package_name = self._find_package(source_bytes, root)
        if package_name is None:
            raise ParseError(path, "expected 'package' clause", 1, 1)

        functions = tuple(
            self._function_decl(source_bytes, child, path)
            for child in root.children
            if child.type in ("function_declaration", "method_declaration")
        )
        logger.debug("parsed %s: package %s, %d functions", path, package_name, len(functions))
        return SyntaxTree(path=path, package_name=package_name, functions=functions, root=root)

    # -- AST helpers ----------------------------------------------------------

    def _raise_first_error(self, source_bytes: bytes, root: Node, path: str):
        for node in iter_preorder(root):
            if node.is_missing:
                line, col = node_point(node)
                raise ParseError(path, f"expected {node.type!r}", line + 1, col + 1)
            if node.is_error:
                line, col = node_point(node)
                snippet = node_text(source_bytes, node).strip().splitlines()
                near = f" near {snippet[0][:40]!r}" if snippet else ""
                raise ParseError(path, f"syntax error{near}", line + 1, col + 1)
        raise ParseError(path, "syntax error")

    def _find_package(self, source_bytes: bytes, root: Node) -> Optional[str]:
        """
        Grabs the package name from the 'package_clause' node.
        """
        for child in root.children:
            if child.type == "package_clause":
                for part in child.children:
                    if part.type == "package_identifier":
                        return node_text(source_bytes, part)
        return None

    def _function_decl(self, source_bytes: bytes, node: Node, path: str) -> FunctionDecl:
        name_node = node.child_by_field_name("name")
        name = node_text(source_bytes, name_node) if name_node else "<anonymous>"
        line, col = node_point(name_node or node)
        return FunctionDecl(
            name=name,
            params=parameter_names(source_bytes, node.child_by_field_name("parameters")),
            body=node.child_by_field_name("body"),
            position=Position(path, line, col),
            source=source_bytes,
        )


def parameter_names(source_bytes: bytes, params_node: Optional[Node]) -> tuple[str, ...]:
    """
    Names declared in a parameter_list, in order. `a, b int` yields both
    names; unnamed parameters (`func(int, string)`) and `_` yield nothing.
    """
    if params_node is None:
        return ()
    names = []
    for p in params_node.named_children:
        if p.type not in ("parameter_declaration", "variadic_parameter_declaration"):
            continue
        for name_node in p.children_by_field_name("name"):
            name = node_text(source_bytes, name_node)
            if name != "_":
                names.append(name)
    return tuple(names)
