"""
Provider discovery.

Wire's generated `wire_gen.go` holds one or more `Initialize*` injectors that
call every provider in dependency order. The targets of those calls are the
provider set: no generator metadata is needed to recover it.
"""
import logging

from tree_sitter import Node

from wire_check.models.ast_models import SyntaxTree
from wire_check.tree_sitter_helpers import iter_calls, node_text

logger = logging.getLogger(__name__)

INITIALIZER_PREFIX = "Initialize"


def is_initializer(name: str) -> bool:
    return name.startswith(INITIALIZER_PREFIX)


def discover_providers(tree: SyntaxTree) -> frozenset[str]:
    """
    Names of every function called from an `Initialize*` function in `tree`.
    `Foo()` contributes "Foo"; `pkg.Foo()` contributes "Foo" as well.
    """
    providers: set[str] = set()
    for decl in tree.functions:
        if not is_initializer(decl.name) or decl.body is None:
            continue
        for call in iter_calls(decl.body):
            name = _callee_name(decl.source, call)
            if name:
                providers.add(name)
    logger.info("found %d provider functions in %s", len(providers), tree.path)
    return frozenset(providers)


def _callee_name(source_bytes: bytes, call: Node):
    fn = call.child_by_field_name("function")
    if fn is None:
        return None
    if fn.type == "identifier":
        return node_text(source_bytes, fn)
    if fn.type == "selector_expression":
        field = fn.child_by_field_name("field")
        return node_text(source_bytes, field) if field else None
    return None
