"""
Masking Strategy

Groups sibling tokens by regex token class, the way log parsers mask
variable fields (IPs, numbers, hex values) before template mining.
"""
import re
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from loguru import logger

from abstrie.config_manager import MaskingConfig
from abstrie.core.node import TrieNode
from abstrie.models.labels import Generalized, Label
from abstrie.models.pattern import Pattern
from abstrie.strategies.base import AbstractionStrategy


class MaskingStrategy(AbstractionStrategy[MaskingConfig, Pattern]):
    """
    Merge siblings whose tokens fall in the same configured token class.

    A concrete token belongs to the first rule whose regex fully matches
    ``str(token)``. A generalized node belongs to the rule it was named
    after. Class equality is an equivalence, so grouping is exact.
    """

    config_class = MaskingConfig

    def __init__(self, config: Optional[MaskingConfig] = None):
        super().__init__(config)
        self._rules: List[Tuple[str, re.Pattern]] = [
            (rule.name, re.compile(rule.pattern)) for rule in self.config.rules
        ]
        self._rule_names = {name for name, _ in self._rules}
        self._class_cache: Dict[Tuple[type, Hashable], Optional[str]] = {}

        logger.debug(f"MaskingStrategy initialized with {len(self._rules)} rules")

    def classify(self, label: Optional[Label]) -> Optional[str]:
        """
        Get the token class of a label.

        Args:
            label: Concrete or generalized label

        Returns:
            Rule name, or None if no rule applies
        """
        if label is None:
            return None
        if isinstance(label, Generalized):
            return label.name if label.name in self._rule_names else None

        key = (type(label.value), label.value)
        if key not in self._class_cache:
            text = str(label.value)
            self._class_cache[key] = next(
                (name for name, regex in self._rules if regex.fullmatch(text)),
                None
            )
        return self._class_cache[key]

    def should_merge(self, node_a: TrieNode, node_b: TrieNode) -> bool:
        class_a = self.classify(node_a.label)
        return class_a is not None and class_a == self.classify(node_b.label)

    def merge_nodes(self, nodes: Sequence[TrieNode]) -> TrieNode:
        name = self.classify(nodes[0].label)
        if name is None:
            raise ValueError(f"Cannot mask unclassified token {nodes[0].label}")
        label = self.generalize(nodes, name)
        logger.debug("Masked {} tokens as {}", len(nodes), label)
        return self.combine(nodes, label)

    def extract_pattern(self, path: Sequence[Label]) -> Pattern:
        return Pattern.from_labels(path)

    def format_pattern(self, pattern: Pattern, separator: Optional[str] = None) -> str:
        """
        Render a pattern as a template string.

        Args:
            pattern: Pattern produced by ``extract_pattern``
            separator: Token separator; defaults to the configured one

        Returns:
            Template such as ``"Connected to <IP>"``
        """
        return pattern.render(
            separator=self.config.separator if separator is None else separator,
            mask_prefix=self.config.mask_prefix,
            mask_suffix=self.config.mask_suffix
        )
