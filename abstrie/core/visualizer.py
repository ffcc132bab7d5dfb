"""
Text rendering of a trie for debugging.
"""
from typing import List, Optional

from abstrie.config_manager import VisualizationConfig
from abstrie.core.node import TrieNode


class TreeVisualizer:
    """Render a trie as indented box-drawing text, one line per node."""

    def __init__(self, config: Optional[VisualizationConfig] = None):
        """
        Initialize visualizer.

        Args:
            config: Visualization configuration
        """
        self.config = config or VisualizationConfig()

    def render(self, root: TrieNode) -> str:
        """
        Create a text visualization of the tree.

        With ``compress_paths`` a chain of non-terminal single-child nodes is
        printed as one line, labels joined by ``token_separator``. Terminal
        nodes end with ``sequence_ender``. The root only gets a line of its
        own when it is terminal.

        Args:
            root: Root node

        Returns:
            String representation of tree
        """
        lines: List[str] = []
        # (node, level, is_last, labels, skips)
        # skips[i] is True when the ancestor at level i+1 was a last child
        stack = [(root, 0, True, [], [])]

        while stack:
            node, level, is_last, labels, skips = stack.pop()

            if self.config.compress_paths:
                while len(node.edges) == 1 and not node.is_terminal:
                    label, node = next(iter(node.edges.items()))
                    labels.append(label)

            indent = ""
            if level > 0:
                indent = "".join("   " if skip else "│  " for skip in skips)
                indent += "└── " if is_last else "├── "

            if labels or node.is_terminal:
                text = self.config.token_separator.join(str(label) for label in labels)
                if node.is_terminal:
                    text += self.config.sequence_ender
                if self.config.show_counts:
                    text += f" ({node.count})"
                lines.append(indent + text)

            children = node.sorted_edges()
            child_skips = skips + [is_last] if level > 0 else []
            for i in reversed(range(len(children))):
                label, child = children[i]
                stack.append((child, level + 1, i == len(children) - 1, [label], child_skips))

        return "\n".join(lines)
