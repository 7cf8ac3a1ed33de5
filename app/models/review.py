"""Review record data model."""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class AdjustmentEvent:
    """A dated point adjustment to a review's base score."""
    date: date  # Audit trail only; does not affect decay
    change: int  # Signed delta, e.g. +1 or -1


@dataclass(frozen=True)
class ReviewRecord:
    """
    A review as handed to the decay engine.

    Built once per load cycle by ReviewLoader. History is kept in authored
    order and frozen into a tuple so scoring can never mutate it.
    """
    id: str
    initial_score: float
    initial_date: date
    history: Tuple[AdjustmentEvent, ...] = ()
    title: str = ""
    tags: Tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        if not self.title:
            object.__setattr__(self, "title", self.id)

    @property
    def total_adjustment(self) -> int:
        return sum(event.change for event in self.history)
