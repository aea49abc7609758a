"""
Syntax-only scanning of one function body.

Note: a receiver is matched against the declared parameter names by text
alone. There is no type resolution, so a local that shadows a parameter is
still reported and a parameter reached through an alias is not.
"""
from typing import Iterator

from wire_check.models.ast_models import FunctionCallRef, FunctionDecl, MethodCallFinding, Position
from wire_check.tree_sitter_helpers import iter_calls, node_point, node_text


def find_method_calls(decl: FunctionDecl) -> Iterator[MethodCallFinding]:
    """
    Yields one finding per `param.Method(...)` call site in the body, in
    source order, closures included. Only a bare parameter identifier is
    matched as the receiver, so `p.A().B()` reports `p.A` and nothing else.
    """
    if decl.body is None or not decl.params:
        return
    params = set(decl.params)
    source_bytes = decl.source
    for call in iter_calls(decl.body):
        fn = call.child_by_field_name("function")
        if fn is None or fn.type != "selector_expression":
            continue
        operand = fn.child_by_field_name("operand")
        field = fn.child_by_field_name("field")
        if operand is None or field is None or operand.type != "identifier":
            continue
        receiver = node_text(source_bytes, operand)
        if receiver in params:
            line, col = node_point(call)
            yield MethodCallFinding(
                receiver=receiver,
                method=node_text(source_bytes, field),
                position=Position(decl.position.path, line, col),
            )


def find_function_calls(decl: FunctionDecl) -> Iterator[FunctionCallRef]:
    """
    Yields the call sites that could name a function: `foo()` with an empty
    qualifier and `x.foo()` qualified by `x`. Other callee shapes
    (`a.b.c()`, `f()()`, `(*T).m()`) are skipped.
    """
    if decl.body is None:
        return
    source_bytes = decl.source
    for call in iter_calls(decl.body):
        fn = call.child_by_field_name("function")
        if fn is None:
            continue
        line, col = node_point(call)
        position = Position(decl.position.path, line, col)
        if fn.type == "identifier":
            yield FunctionCallRef(node_text(source_bytes, fn), "", position)
        elif fn.type == "selector_expression":
            operand = fn.child_by_field_name("operand")
            field = fn.child_by_field_name("field")
            if operand is not None and field is not None and operand.type == "identifier":
                yield FunctionCallRef(
                    node_text(source_bytes, field),
                    node_text(source_bytes, operand),
                    position,
                )
