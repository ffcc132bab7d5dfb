"""
Exception hierarchy for abstrie.
"""
from typing import Any, Optional, Sequence


class AbstrieError(Exception):
    """Base exception for all abstrie errors."""


class StrategyContractError(AbstrieError):
    """Raised when a strategy returns a value that breaks the strategy contract."""

    def __init__(self, message: str, strategy: Any = None):
        super().__init__(message)
        self.strategy = strategy


class PatternExtractionError(AbstrieError):
    """Raised when a strategy fails to turn a root-to-terminal path into a pattern."""

    def __init__(self, message: str, path: Optional[Sequence[Any]] = None):
        super().__init__(message)
        self.path = list(path or [])
