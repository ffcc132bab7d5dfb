"""
Data models for extracted patterns and merge results.
"""
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from abstrie.models.labels import Generalized, Label


class Slot(BaseModel):
    """One position of a pattern: a fixed token or a generalized marker."""

    value: Any = Field(None, description="Fixed token value")
    name: Optional[str] = Field(None, description="Generalized class name")
    members: List[Any] = Field(default_factory=list, description="Tokens covered by the marker")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Strategy metadata")

    @property
    def is_generalized(self) -> bool:
        return self.name is not None

    @classmethod
    def from_label(cls, label: Label) -> "Slot":
        if isinstance(label, Generalized):
            return cls(
                name=label.name,
                members=sorted(label.members, key=str),
                metadata=dict(label.metadata),
            )
        return cls(value=label.value)

    def accepts(self, token: Any) -> bool:
        if self.is_generalized:
            return token in self.members
        return token == self.value

    def render(self, mask_prefix: str = "<", mask_suffix: str = ">") -> str:
        if self.is_generalized:
            return f"{mask_prefix}{self.name}{mask_suffix}"
        return str(self.value)


class Pattern(BaseModel):
    """Output representation of one root-to-terminal path."""

    slots: List[Slot] = Field(default_factory=list)

    @classmethod
    def from_labels(cls, labels: Sequence[Label]) -> "Pattern":
        return cls(slots=[Slot.from_label(label) for label in labels])

    @property
    def generalized_positions(self) -> List[int]:
        return [i for i, slot in enumerate(self.slots) if slot.is_generalized]

    @property
    def is_generalized(self) -> bool:
        return any(slot.is_generalized for slot in self.slots)

    def matches(self, sequence: Sequence[Any]) -> bool:
        """Check whether a concrete token sequence is an instance of this pattern."""
        tokens = list(sequence)
        if len(tokens) != len(self.slots):
            return False
        return all(slot.accepts(token) for slot, token in zip(self.slots, tokens))

    def render(
        self,
        separator: str = "",
        mask_prefix: str = "<",
        mask_suffix: str = ">"
    ) -> str:
        """Join the slots into a template string."""
        return separator.join(slot.render(mask_prefix, mask_suffix) for slot in self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __str__(self) -> str:
        return self.render()


class MergeStatistics(BaseModel):
    """Summary of one merge_with_strategy call."""

    strategy: str = ""
    passes: int = 0
    groups_merged: int = 0
    nodes_merged: int = 0
    nodes_before: int = 0
    nodes_after: int = 0

    @property
    def changed(self) -> bool:
        return self.groups_merged > 0

    def get_reduction_rate(self) -> float:
        """Fraction of nodes removed by merging."""
        if self.nodes_before == 0:
            return 0.0
        return (self.nodes_before - self.nodes_after) / self.nodes_before

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.model_dump(),
            "changed": self.changed,
            "reduction_rate": self.get_reduction_rate(),
        }
