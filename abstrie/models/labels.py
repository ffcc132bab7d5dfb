"""
Edge labels for the generalization trie.

A label is either a concrete token or a generalized marker produced by a
strategy. Both are frozen and hashable so they can key a node's edges.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Tuple, Union


@dataclass(frozen=True)
class Concrete:
    """A label carrying one concrete token value."""

    value: Hashable

    @property
    def is_generalized(self) -> bool:
        return False

    @property
    def members(self) -> FrozenSet[Hashable]:
        return frozenset((self.value,))

    def accepts(self, token: Hashable) -> bool:
        return token == self.value

    def sort_key(self) -> Tuple[int, str, str, str, str]:
        """
        Order by type name and text, then by qualified type and ``repr``.

        Values that agree on all four (e.g. two distinct NaN objects) still
        tie and keep their edge order.
        """
        kind = type(self.value)
        return (
            0,
            kind.__name__,
            str(self.value),
            f"{kind.__module__}.{kind.__qualname__}",
            repr(self.value),
        )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Generalized:
    """
    A strategy-produced marker standing in for a group of merged labels.

    Attributes:
        name: Class name chosen by the strategy (e.g. "NUM")
        members: Concrete token values the marker covers
        metadata: Free-form strategy data, ignored by equality and hashing
    """

    name: str
    members: FrozenSet[Hashable] = frozenset()
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_generalized(self) -> bool:
        return True

    def accepts(self, token: Hashable) -> bool:
        return token in self.members

    def sort_key(self) -> Tuple[int, str, str, str]:
        members = ",".join(sorted(str(m) for m in self.members))
        typed = ",".join(sorted(f"{type(m).__qualname__}:{m!r}" for m in self.members))
        return (1, self.name, members, typed)

    def __str__(self) -> str:
        return f"<{self.name}>"


Label = Union[Concrete, Generalized]


def collect_members(labels: Iterable[Label]) -> FrozenSet[Hashable]:
    """Flatten the concrete values covered by a group of labels."""
    members = set()
    for label in labels:
        members.update(label.members)
    return frozenset(members)
