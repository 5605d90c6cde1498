"""
walker.py - Depth-first traversal helpers over tree-sitter nodes.

Both helpers visit nodes in pre-order (parent first, children in source
order) using an explicit stack, so deeply nested files do not hit the
interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

from tree_sitter import Node


def find_all(
    root: Optional[Node],
    predicate: Callable[[Node], bool],
    prune: bool = False,
) -> Iterator[Node]:
    """Yield every node under *root* (inclusive) for which *predicate* holds.

    Args:
        root:      Node to start from.  ``None`` yields nothing.
        predicate: Visit predicate.
        prune:     When True, do not descend into the children of a
                   matched node.
    """
    if root is None:
        return
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            yield node
            if prune:
                continue
        stack.extend(reversed(node.children))


def find_all_of_type(
    root: Optional[Node],
    *kinds: str,
    prune: bool = False,
) -> list[Node]:
    """Collect every node under *root* whose type is one of *kinds*."""
    wanted = frozenset(kinds)
    return list(find_all(root, lambda n: n.type in wanted, prune=prune))
