"""
Generalization trie: shared-prefix tree over token sequences.
"""
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from abstrie.config_manager import Config
from abstrie.core.extractor import PatternExtractor
from abstrie.core.merger import MergeEngine
from abstrie.core.node import TrieNode, union_nodes
from abstrie.core.prefixes import LengthDict, PrefixDict, branch_prefixes
from abstrie.core.visualizer import TreeVisualizer
from abstrie.models.labels import Concrete
from abstrie.models.pattern import MergeStatistics
from abstrie.utils.logger import get_logger
from abstrie.utils.metrics import TrieMetrics

logger = get_logger("trie")


class GeneralizationTrie:
    """
    Prefix tree over sequences of hashable tokens.

    Sequences are inserted one at a time; a strategy can then collapse
    similar sibling branches, and the resulting root-to-terminal paths are
    extracted as patterns.

    Only ``insert``, ``update`` and ``merge_with_strategy`` modify the trie.
    They need exclusive access; reads may share it.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize trie.

        Args:
            config: Configuration (visualization and merging sections are used)
        """
        self.config = config or Config()
        self.root = TrieNode()
        self.strategy = None

        logger.debug("GeneralizationTrie initialized")

    @classmethod
    def from_sequences(
        cls,
        sequences: Iterable[Iterable[Hashable]],
        config: Optional[Config] = None
    ) -> "GeneralizationTrie":
        """Build a trie from token sequences."""
        trie = cls(config)
        trie.insert_many(sequences)
        return trie

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        config: Optional[Config] = None
    ) -> "GeneralizationTrie":
        """Build a character trie from words."""
        return cls.from_sequences((list(word) for word in words), config)

    @property
    def total_sequences(self) -> int:
        return self.root.count

    def insert(self, sequence: Iterable[Hashable]) -> TrieNode:
        """
        Insert a sequence of tokens.

        Every node on the path, root included, counts one more sequence
        passing through. Re-inserting a sequence only changes counts.

        Args:
            sequence: Tokens; a string is inserted character by character

        Returns:
            The node where the sequence ends
        """
        current = self.root
        current.count += 1
        for token in sequence:
            current = current.add_child(Concrete(token))
            current.count += 1

        current.is_terminal = True
        current.terminal_count += 1
        return current

    def insert_many(self, sequences: Iterable[Iterable[Hashable]]) -> int:
        """
        Insert several sequences.

        Returns:
            Number of sequences inserted
        """
        inserted = 0
        for sequence in sequences:
            self.insert(sequence)
            inserted += 1
        return inserted

    def update(self, other: "GeneralizationTrie") -> None:
        """
        Fold another trie into this one.

        Tries populated separately (e.g. one per worker) are combined this
        way: edges are unioned and counts summed.
        """
        self.root = union_nodes([self.root, other.root])
        logger.debug("Folded trie with {} sequences", other.total_sequences)

    def merge_with_strategy(self, strategy) -> MergeStatistics:
        """
        Collapse similar siblings using ``strategy``.

        All or nothing: if the strategy raises, the exception propagates
        unchanged and the trie keeps its previous structure.

        Args:
            strategy: AbstractionStrategy instance

        Returns:
            MergeStatistics for this call
        """
        engine = MergeEngine(strategy, self.config.merging)
        new_root, stats = engine.run(self.root)
        self.root = new_root
        self.strategy = strategy
        return stats

    def extract_patterns(self, strategy=None) -> Iterator[Any]:
        """
        Lazily yield one pattern per terminal node.

        Args:
            strategy: Strategy building the patterns; defaults to the last
                strategy merged with, else IdentityStrategy

        Returns:
            Generator of patterns
        """
        return PatternExtractor(self.root, strategy or self.strategy).extract()

    def extractor(self, strategy=None) -> PatternExtractor:
        return PatternExtractor(self.root, strategy or self.strategy)

    def visualize(self, **overrides) -> str:
        """
        Render the trie as indented text.

        Args:
            **overrides: VisualizationConfig fields to override for this call

        Returns:
            Rendered tree
        """
        config = self.config.visualization
        if overrides:
            config = config.model_copy(update=overrides)
        return TreeVisualizer(config).render(self.root)

    def matches(self, sequence: Iterable[Hashable]) -> bool:
        """
        Check whether some root-to-terminal path accepts ``sequence``.

        Generalized labels accept any token they cover.
        """
        frontier: List[TrieNode] = [self.root]
        for token in sequence:
            frontier = [
                child
                for node in frontier
                for label, child in node.edges.items()
                if label.accepts(token)
            ]
            if not frontier:
                return False
        return any(node.is_terminal for node in frontier)

    def __contains__(self, sequence) -> bool:
        return self.matches(sequence)

    def iter_nodes(self) -> Iterator[TrieNode]:
        return self.root.iter_subtree()

    def terminal_nodes(self) -> List[TrieNode]:
        return [node for node in self.iter_nodes() if node.is_terminal]

    def node_count(self) -> int:
        return self.root.subtree_size()

    def get_prefixes_dict(self) -> Tuple[PrefixDict, LengthDict]:
        """Branch-point prefix and length dictionaries."""
        return branch_prefixes(self.root)

    def get_statistics(self) -> Dict[str, Any]:
        """Get trie statistics."""
        return TrieMetrics.summarize(self)

    def __str__(self) -> str:
        return self.visualize()

    def __repr__(self) -> str:
        return (
            f"GeneralizationTrie(sequences={self.total_sequences}, "
            f"children={len(self.root.edges)})"
        )
