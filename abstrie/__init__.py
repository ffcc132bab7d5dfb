"""
abstrie: generalization tries for structural pattern extraction.

Main exports for easy access.
"""

# Version
__version__ = "0.1.0"

# Core components
from abstrie.core.trie import GeneralizationTrie
from abstrie.core.node import TrieNode
from abstrie.config_manager import (
    Config,
    VisualizationConfig,
    MergingConfig,
    MaskingConfig,
    MaskingRule,
    LoggingConfig,
    load_config,
    create_default_config,
)

# Strategies
from abstrie.strategies import (
    AbstractionStrategy,
    StrategyConfig,
    IdentityStrategy,
    MaskingStrategy,
)

# Models
from abstrie.models import (
    Concrete,
    Generalized,
    Slot,
    Pattern,
    MergeStatistics,
)

# Errors
from abstrie.exceptions import (
    AbstrieError,
    StrategyContractError,
    PatternExtractionError,
)

# Utilities
from abstrie.utils.logger import setup_logger

__all__ = [
    # Core
    "GeneralizationTrie",
    "TrieNode",

    # Config
    "Config",
    "VisualizationConfig",
    "MergingConfig",
    "MaskingConfig",
    "MaskingRule",
    "LoggingConfig",
    "load_config",
    "create_default_config",

    # Strategies
    "AbstractionStrategy",
    "StrategyConfig",
    "IdentityStrategy",
    "MaskingStrategy",

    # Models
    "Concrete",
    "Generalized",
    "Slot",
    "Pattern",
    "MergeStatistics",

    # Errors
    "AbstrieError",
    "StrategyContractError",
    "PatternExtractionError",

    # Utils
    "setup_logger",

    # Version
    "__version__",
]
