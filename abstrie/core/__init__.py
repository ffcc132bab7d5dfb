# ============================================================================
# abstrie/core/__init__.py
# ============================================================================
"""Core trie components."""
from abstrie.core.node import TrieNode, union_nodes
from abstrie.core.trie import GeneralizationTrie
from abstrie.core.merger import MergeEngine
from abstrie.core.extractor import PatternExtractor
from abstrie.core.visualizer import TreeVisualizer

__all__ = [
    'GeneralizationTrie',
    'TrieNode',
    'union_nodes',
    'MergeEngine',
    'PatternExtractor',
    'TreeVisualizer',
]
