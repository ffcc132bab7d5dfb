"""Shared fixtures and helper strategies for the abstrie test suite."""

from typing import Sequence

import pytest

from abstrie import Concrete, Generalized, GeneralizationTrie, Pattern, TrieNode
from abstrie.strategies.base import AbstractionStrategy


# ---------------------------------------------------------------------------
# Helper strategies
# ---------------------------------------------------------------------------


class DigitStrategy(AbstractionStrategy):
    """Merge single-digit numeral tokens at the same position."""

    def _is_digit(self, node: TrieNode) -> bool:
        label = node.label
        if isinstance(label, Generalized):
            return label.name == "DIGIT"
        return isinstance(label.value, str) and len(label.value) == 1 and label.value.isdigit()

    def should_merge(self, node_a, node_b):
        return self._is_digit(node_a) and self._is_digit(node_b)

    def merge_nodes(self, nodes):
        return self.combine(nodes, self.generalize(nodes, "DIGIT"))

    def extract_pattern(self, path):
        return Pattern.from_labels(path)


class NearbyIntStrategy(AbstractionStrategy):
    """Merge integers differing by at most one. Not transitive."""

    def should_merge(self, node_a, node_b):
        if not isinstance(node_a.label, Concrete) or not isinstance(node_b.label, Concrete):
            return False
        return abs(node_a.label.value - node_b.label.value) <= 1

    def merge_nodes(self, nodes):
        return self.combine(nodes, self.generalize(nodes, "NEAR"))

    def extract_pattern(self, path):
        return Pattern.from_labels(path)


class RecordingStrategy(DigitStrategy):
    """DigitStrategy that records every should_merge call."""

    def __init__(self, config=None):
        super().__init__(config)
        self.calls = []

    def should_merge(self, node_a, node_b):
        self.calls.append((str(node_a.label), str(node_b.label)))
        return super().should_merge(node_a, node_b)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def char_trie() -> GeneralizationTrie:
    """Character trie over cat, car, dog, dot."""
    return GeneralizationTrie.from_words(["cat", "car", "dog", "dot"])


@pytest.fixture()
def word_trie() -> GeneralizationTrie:
    """Word trie over three short sentences."""
    return GeneralizationTrie.from_sequences([
        ["the", "cat"],
        ["the", "dog"],
        ["a", "dog"],
    ])


@pytest.fixture()
def log_sequences() -> Sequence[Sequence[str]]:
    """Word-tokenized log lines with variable fields."""
    return [
        ["Connected", "to", "10.0.0.1"],
        ["Connected", "to", "10.0.0.2"],
        ["Connected", "to", "192.168.1.7"],
        ["request", "took", "15", "ms"],
        ["request", "took", "230", "ms"],
        ["request", "failed"],
    ]


@pytest.fixture()
def digit_strategy() -> DigitStrategy:
    return DigitStrategy()
