# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Iterator

from tree_sitter import Node


def node_text(source_bytes: bytes, node: Node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node: Node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    """
    return (node.start_point[0], node.start_point[1])


def iter_preorder(node: Node) -> Iterator[Node]:
    """
    Depth-first, source-order walk over `node` and everything below it.
    Children are pushed reversed so the leftmost child is popped first.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_calls(node: Node) -> Iterator[Node]:
    """Every `call_expression` under `node`, closures included."""
    for child in iter_preorder(node):
        if child.type == "call_expression":
            yield child
