"""
Branch-point views of a trie.

A branch point is a non-root node where sequences diverge: it has more
than one continuation, counting its children and, if terminal, the
sequence that ends there.
"""
from typing import Any, Dict, List, Optional, Tuple

from abstrie.core.node import TrieNode
from abstrie.models.labels import Label

PrefixDict = Dict[Tuple[Any, ...], Optional[dict]]
LengthDict = Dict[int, Optional[dict]]


def _token(label: Label) -> Any:
    return label if label.is_generalized else label.value


def _finalize(tree: dict) -> None:
    """Replace empty nested dicts with None."""
    stack = [tree]
    while stack:
        current = stack.pop()
        for key, value in current.items():
            if value:
                stack.append(value)
            else:
                current[key] = None


def branch_prefixes(root: TrieNode) -> Tuple[PrefixDict, LengthDict]:
    """
    Build the prefix and length dictionaries of a trie's branch points.

    The prefix dictionary maps each outermost branch prefix (a tuple of
    tokens; generalized labels stay as labels) to a dict of the branch
    points nested beneath it, or None if there are none. The length
    dictionary has the same shape keyed by prefix length, so branch
    points of equal length under the same parent share one entry.

    Args:
        root: Root node

    Returns:
        Tuple of (prefixes, lengths)
    """
    prefixes: PrefixDict = {}
    lengths: LengthDict = {}

    # Shared token path, truncated to the parent's depth on every pop
    path: List[Any] = []
    stack = [
        (child, label, 0, prefixes, lengths)
        for label, child in reversed(root.sorted_edges())
    ]
    while stack:
        node, label, depth, prefix_level, length_level = stack.pop()
        del path[depth:]
        path.append(_token(label))

        continuations = len(node.edges) + (1 if node.is_terminal else 0)
        if continuations > 1:
            key = tuple(path)
            prefix_level[key] = {}
            prefix_level = prefix_level[key]
            length_level = length_level.setdefault(len(path), {})

        for child_label, child in reversed(node.sorted_edges()):
            stack.append((child, child_label, depth + 1, prefix_level, length_level))

    _finalize(prefixes)
    _finalize(lengths)
    return prefixes, lengths
