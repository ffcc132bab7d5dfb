"""
Strategy Package

Pluggable policies deciding which sibling nodes merge, how they merge,
and how paths turn into patterns:

- AbstractionStrategy: Abstract base class defining the contract
- IdentityStrategy: Never merges; reference implementation
- MaskingStrategy: Regex token-class masking
"""

from .base import AbstractionStrategy, StrategyConfig
from .identity import IdentityStrategy
from .masking import MaskingStrategy

__all__ = ['AbstractionStrategy', 'StrategyConfig', 'IdentityStrategy', 'MaskingStrategy']
