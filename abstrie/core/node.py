"""
Trie node and the structural union used by merging.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from abstrie.models.labels import Label


@dataclass(eq=False)
class TrieNode:
    """Node in the generalization trie."""

    label: Optional[Label] = None
    edges: Dict[Label, "TrieNode"] = field(default_factory=dict, repr=False)
    is_terminal: bool = False
    count: int = 0
    terminal_count: int = 0
    depth: int = 0

    def add_child(self, label: Label) -> "TrieNode":
        """Return the child under ``label``, creating it if needed."""
        child = self.edges.get(label)
        if child is None:
            child = TrieNode(label=label, depth=self.depth + 1)
            self.edges[label] = child
        return child

    def get_child(self, label: Label) -> Optional["TrieNode"]:
        """Get child node by label."""
        return self.edges.get(label)

    def sorted_edges(self) -> List[Tuple[Label, "TrieNode"]]:
        """
        Edges in deterministic order.

        Ordered by the labels' sort keys; ties keep first-insertion order.
        """
        return sorted(self.edges.items(), key=lambda item: item[0].sort_key())

    def children(self) -> List["TrieNode"]:
        return [child for _, child in self.sorted_edges()]

    @property
    def is_leaf(self) -> bool:
        return not self.edges

    @property
    def token(self):
        """Concrete token value of this node's label, or None."""
        if self.label is None or self.label.is_generalized:
            return None
        return self.label.value

    def iter_subtree(self) -> Iterator["TrieNode"]:
        """Pre-order walk of this node and its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for _, child in reversed(node.sorted_edges()))

    def subtree_size(self) -> int:
        return sum(1 for _ in self.iter_subtree())

    def copy(self) -> "TrieNode":
        """Deep copy of this subtree."""
        return union_nodes([self], self.label)

    def __str__(self) -> str:
        return "[" + ", ".join(str(label) for label, _ in self.sorted_edges()) + "]"

    def __repr__(self) -> str:
        return (
            f"TrieNode(label={self.label!r}, children={len(self.edges)}, "
            f"is_terminal={self.is_terminal}, count={self.count})"
        )


def union_nodes(nodes: Iterable[TrieNode], label: Optional[Label] = None) -> TrieNode:
    """
    Build one fresh node standing for all of ``nodes``.

    Children are unioned recursively: children sharing a label are combined
    into a single child. Counts are summed and the terminal flag is set if any
    input was terminal. The inputs are left untouched.

    Args:
        nodes: Nodes to combine (at least one)
        label: Label for the resulting node

    Returns:
        The combined node
    """
    nodes = list(nodes)
    if not nodes:
        raise ValueError("union_nodes requires at least one node")

    result = TrieNode(label=label, depth=nodes[0].depth)
    stack = [(result, nodes)]
    while stack:
        target, sources = stack.pop()
        target.count = sum(source.count for source in sources)
        target.terminal_count = sum(source.terminal_count for source in sources)
        target.is_terminal = any(source.is_terminal for source in sources)

        grouped: Dict[Label, List[TrieNode]] = {}
        for source in sources:
            for child_label, child in source.sorted_edges():
                grouped.setdefault(child_label, []).append(child)

        for child_label, group in grouped.items():
            child = TrieNode(label=child_label, depth=target.depth + 1)
            target.edges[child_label] = child
            stack.append((child, group))

    return result
