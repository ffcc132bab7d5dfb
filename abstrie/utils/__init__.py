# ============================================================================
# abstrie/utils/__init__.py
# ============================================================================
"""Utility modules."""
from abstrie.utils.logger import setup_logger, setup_logger_from_config, get_logger
from abstrie.utils.metrics import TrieMetrics

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_logger',
    'TrieMetrics',
]
