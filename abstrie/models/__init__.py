# ============================================================================
# abstrie/models/__init__.py
# ============================================================================
"""Data models."""
from abstrie.models.labels import (
    Concrete,
    Generalized,
    Label,
)
from abstrie.models.pattern import (
    Slot,
    Pattern,
    MergeStatistics
)

__all__ = [
    'Concrete',
    'Generalized',
    'Label',
    'Slot',
    'Pattern',
    'MergeStatistics',
]
