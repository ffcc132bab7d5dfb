"""
Pattern extraction from a (possibly merged) trie.
"""
from typing import Any, Iterator, List, Tuple

import pandas as pd

from abstrie.core.node import TrieNode
from abstrie.exceptions import PatternExtractionError
from abstrie.models.labels import Label


class PatternExtractor:
    """
    Enumerate root-to-terminal paths and turn each into a pattern.

    The walk uses an explicit stack, so path length is not limited by the
    interpreter's recursion limit. Each call to ``extract`` starts a fresh
    generator; the trie is never modified.
    """

    def __init__(self, root: TrieNode, strategy=None):
        """
        Initialize extractor.

        Args:
            root: Root node of the trie
            strategy: Strategy whose ``extract_pattern`` builds the output;
                defaults to IdentityStrategy
        """
        if strategy is None:
            from abstrie.strategies.identity import IdentityStrategy
            strategy = IdentityStrategy()

        self.root = root
        self.strategy = strategy

    def iter_paths(self) -> Iterator[Tuple[List[Label], TrieNode]]:
        """
        Yield (label path, terminal node) pairs in deterministic pre-order.

        A terminal node's own path comes before the paths below it. One
        label list is shared by the whole walk and truncated to the parent's
        depth on every pop; only yielded paths are copied.
        """
        if self.root.is_terminal:
            yield [], self.root

        path: List[Label] = []
        stack = [(child, label, 0) for label, child in reversed(self.root.sorted_edges())]
        while stack:
            node, label, depth = stack.pop()
            del path[depth:]
            path.append(label)
            if node.is_terminal:
                yield list(path), node
            for child_label, child in reversed(node.sorted_edges()):
                stack.append((child, child_label, depth + 1))

    def extract(self) -> Iterator[Any]:
        """
        Yield one pattern per terminal node.

        Raises:
            PatternExtractionError: If the strategy fails on some path
        """
        for path, _ in self.iter_paths():
            yield self._extract_one(path)

    def extract_with_counts(self) -> Iterator[Tuple[Any, int]]:
        """Yield (pattern, number of sequences ending on that path)."""
        for path, node in self.iter_paths():
            yield self._extract_one(path), node.terminal_count

    def to_dataframe(self, separator: str = " ") -> pd.DataFrame:
        """
        Collect all patterns into a DataFrame.

        Args:
            separator: Separator used to render each pattern

        Returns:
            DataFrame with columns pattern, slots, generalized_slots, count
        """
        rows = []
        for pattern, count in self.extract_with_counts():
            slots = getattr(pattern, "slots", None)
            rows.append({
                "pattern": pattern.render(separator) if hasattr(pattern, "render") else str(pattern),
                "slots": len(slots) if slots is not None else None,
                "generalized_slots": (
                    sum(1 for slot in slots if slot.is_generalized) if slots is not None else None
                ),
                "count": count,
            })
        return pd.DataFrame(rows, columns=["pattern", "slots", "generalized_slots", "count"])

    def _extract_one(self, path: List[Label]) -> Any:
        try:
            return self.strategy.extract_pattern(path)
        except Exception as e:
            rendered = " ".join(str(label) for label in path)
            raise PatternExtractionError(
                f"{self.strategy.__class__.__name__}.extract_pattern failed "
                f"for path [{rendered}]: {e}",
                path=path
            ) from e
