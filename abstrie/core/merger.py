"""
Merge engine for collapsing similar sibling branches.
"""
from typing import Dict, List, Optional, Tuple

from abstrie.config_manager import MergingConfig
from abstrie.core.node import TrieNode, union_nodes
from abstrie.exceptions import StrategyContractError
from abstrie.models.labels import Label
from abstrie.models.pattern import MergeStatistics
from abstrie.utils.logger import get_logger

logger = get_logger("merger")


class MergeEngine:
    """
    Apply a strategy to a trie, replacing groups of similar siblings with
    single generalized nodes.

    Work proceeds top-down: all children of a node are grouped and merged
    before any of them is descended into. The engine operates on a copy of
    the tree and only hands back a result when the whole pass succeeded, so
    a failing strategy leaves the caller's tree untouched.
    """

    def __init__(self, strategy, config: Optional[MergingConfig] = None):
        """
        Initialize merge engine.

        Args:
            strategy: AbstractionStrategy to apply
            config: Merging configuration
        """
        self.strategy = strategy
        self.config = config or MergingConfig()

    def run(self, root: TrieNode) -> Tuple[TrieNode, MergeStatistics]:
        """
        Merge the tree under ``root``.

        Args:
            root: Root of the tree to merge (not modified)

        Returns:
            Tuple of (new root, statistics)
        """
        stats = MergeStatistics(strategy=self.strategy.name)
        stats.nodes_before = root.subtree_size()
        stats.nodes_after = stats.nodes_before

        if not self.config.enable_auto_merge:
            logger.info("Auto merge disabled, skipping merge")
            return root, stats

        working = root
        for _ in range(self.config.max_passes):
            candidate = working.copy()
            groups, nodes = self.merge_pass(candidate)
            working = candidate
            stats.passes += 1
            stats.groups_merged += groups
            stats.nodes_merged += nodes
            if groups == 0:
                break

        stats.nodes_after = working.subtree_size()
        logger.info(
            f"Merged {stats.groups_merged} groups ({stats.nodes_merged} nodes) "
            f"with {stats.strategy}: {stats.nodes_before} -> {stats.nodes_after} nodes"
        )
        return working, stats

    def merge_pass(self, root: TrieNode) -> Tuple[int, int]:
        """
        Run one pass over the tree in place.

        Returns:
            Tuple of (groups merged, nodes consumed by those groups)
        """
        groups_merged = 0
        nodes_merged = 0

        stack = [root]
        while stack:
            node = stack.pop()
            children = node.children()

            if len(children) > 1:
                new_edges: Dict[Label, TrieNode] = {}
                for group in self.group_children(children):
                    if len(group) == 1:
                        replacement = group[0]
                    else:
                        replacement = self._merge_group(group)
                        groups_merged += 1
                        nodes_merged += len(group)

                    # A generalized label may collide with a surviving sibling
                    existing = new_edges.get(replacement.label)
                    if existing is not None:
                        replacement = union_nodes([existing, replacement], replacement.label)
                    new_edges[replacement.label] = replacement
                node.edges = new_edges

            stack.extend(reversed(node.children()))

        return groups_merged, nodes_merged

    def group_children(self, children: List[TrieNode]) -> List[List[TrieNode]]:
        """
        Partition siblings into connected components of ``should_merge``.

        Pairs are visited in the siblings' deterministic order and each
        component is rooted at its lowest index, so the result does not
        depend on insertion order.

        Args:
            children: Sibling nodes in deterministic order

        Returns:
            Groups in order of their first member
        """
        parent = list(range(len(children)))

        def find(i: int) -> int:
            while parent[i] != i:
                parent[i] = parent[parent[i]]
                i = parent[i]
            return i

        for i in range(len(children)):
            for j in range(i + 1, len(children)):
                root_i, root_j = find(i), find(j)
                if root_i == root_j:
                    continue
                if self.strategy.should_merge(children[i], children[j]):
                    parent[max(root_i, root_j)] = min(root_i, root_j)

        groups: Dict[int, List[TrieNode]] = {}
        for i, child in enumerate(children):
            groups.setdefault(find(i), []).append(child)
        return list(groups.values())

    def _merge_group(self, group: List[TrieNode]) -> TrieNode:
        merged = self.strategy.merge_nodes(group)
        if not isinstance(merged, TrieNode):
            raise StrategyContractError(
                f"{self.strategy.name}.merge_nodes returned {type(merged).__name__}, "
                f"expected TrieNode",
                strategy=self.strategy
            )
        if merged.label is None:
            raise StrategyContractError(
                f"{self.strategy.name}.merge_nodes returned a node without a label",
                strategy=self.strategy
            )
        merged.depth = group[0].depth
        logger.opt(lazy=True).debug(
            "Merged [{}] into {}",
            lambda: ", ".join(str(node.label) for node in group),
            lambda: merged.label
        )
        return merged
