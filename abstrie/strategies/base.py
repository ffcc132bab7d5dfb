"""
Base Strategy Class

This module contains the abstract base class that defines the contract
every abstraction strategy satisfies. The merge engine only calls the
three abstract operations; it never looks inside a strategy's config.
"""
from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from abstrie.core.node import TrieNode, union_nodes
from abstrie.models.labels import Generalized, Label, collect_members


class StrategyConfig(BaseModel):
    """Empty config for strategies that need no settings."""

    model_config = ConfigDict(frozen=True)


ConfigT = TypeVar("ConfigT", bound=BaseModel)
PatternT = TypeVar("PatternT")


class AbstractionStrategy(ABC, Generic[ConfigT, PatternT]):
    """Base interface for all abstraction strategies."""

    config_class: Type[BaseModel] = StrategyConfig

    def __init__(self, config: Optional[ConfigT] = None):
        """
        Initialize strategy.

        Args:
            config: Strategy configuration; defaults to ``config_class()``
        """
        self.config = config if config is not None else self.config_class()

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def should_merge(self, node_a: TrieNode, node_b: TrieNode) -> bool:
        """
        Decide whether two sibling nodes belong to the same group.

        Must be symmetric. When it is not transitive the engine groups by
        connected components, so nodes never compared directly can still
        end up together.
        """
        pass

    @abstractmethod
    def merge_nodes(self, nodes: Sequence[TrieNode]) -> TrieNode:
        """
        Produce one replacement node for a group of siblings.

        The result must carry the group's generalized label, the recursive
        union of all children, the summed count, and be terminal when any
        input was. ``combine`` does the structural part.
        """
        pass

    @abstractmethod
    def extract_pattern(self, path: Sequence[Label]) -> PatternT:
        """Turn a root-to-terminal label path into the strategy's pattern."""
        pass

    def generalize(self, nodes: Sequence[TrieNode], name: str, **metadata) -> Generalized:
        """Build a generalized label covering every token under ``nodes``."""
        return Generalized(
            name=name,
            members=collect_members(node.label for node in nodes),
            metadata=metadata,
        )

    def combine(self, nodes: Sequence[TrieNode], label: Label) -> TrieNode:
        """Union ``nodes`` into a fresh node keyed by ``label``."""
        return union_nodes(nodes, label)

    def __repr__(self) -> str:
        return f"{self.name}(config={self.config!r})"
