"""
Summary metrics for generalization tries.
"""
from typing import Any, Dict, Iterable, Hashable

import numpy as np


class TrieMetrics:
    """Calculate structural and coverage metrics for a trie."""

    @staticmethod
    def summarize(trie) -> Dict[str, Any]:
        """
        Collect structural statistics.

        Args:
            trie: GeneralizationTrie

        Returns:
            Dict with total_nodes, terminal_nodes, total_sequences,
            max_depth, mean_branching and generalized_edges
        """
        depths = []
        branching = []
        terminal = 0
        generalized = 0

        for node in trie.iter_nodes():
            depths.append(node.depth)
            if node.edges:
                branching.append(len(node.edges))
                generalized += sum(1 for label in node.edges if label.is_generalized)
            if node.is_terminal:
                terminal += 1

        depths = np.asarray(depths, dtype=int)
        branching = np.asarray(branching, dtype=float)

        return {
            "total_nodes": int(depths.size),
            "terminal_nodes": terminal,
            "total_sequences": trie.total_sequences,
            "max_depth": int(depths.max()) if depths.size else 0,
            "mean_branching": float(branching.mean()) if branching.size else 0.0,
            "generalized_edges": generalized,
        }

    @staticmethod
    def compression_ratio(num_inputs: int, num_patterns: int) -> float:
        """
        Inputs per extracted pattern.

        Args:
            num_inputs: Number of inserted sequences
            num_patterns: Number of extracted patterns

        Returns:
            Ratio, or 0.0 when there are no patterns
        """
        if num_patterns == 0:
            return 0.0
        return num_inputs / num_patterns

    @staticmethod
    def coverage(trie, sequences: Iterable[Iterable[Hashable]]) -> float:
        """
        Fraction of ``sequences`` accepted by the trie.

        Args:
            trie: GeneralizationTrie
            sequences: Sequences to test

        Returns:
            Coverage between 0 and 1
        """
        hits = np.array([trie.matches(sequence) for sequence in sequences], dtype=bool)
        if hits.size == 0:
            return 0.0
        return float(hits.mean())
