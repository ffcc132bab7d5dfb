"""
Identity Strategy

Reference strategy that never merges anything. Useful for exercising the
engine without any domain heuristics.
"""
from typing import Sequence

from abstrie.core.node import TrieNode
from abstrie.models.labels import Label
from abstrie.models.pattern import Pattern
from abstrie.strategies.base import AbstractionStrategy, StrategyConfig


class IdentityStrategy(AbstractionStrategy[StrategyConfig, Pattern]):
    """No-op strategy: every sibling stays as inserted."""

    WILDCARD = "*"

    def should_merge(self, node_a: TrieNode, node_b: TrieNode) -> bool:
        return False

    def merge_nodes(self, nodes: Sequence[TrieNode]) -> TrieNode:
        # Only reachable when called directly
        return self.combine(nodes, self.generalize(nodes, self.WILDCARD))

    def extract_pattern(self, path: Sequence[Label]) -> Pattern:
        return Pattern.from_labels(path)
