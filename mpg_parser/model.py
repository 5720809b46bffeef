"""Core data structures for the planar graph parser."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Iterator, Optional, Protocol, Sequence, Tuple

Span = Tuple[int, int]

# Scores at or below this value mean "no usable association" for a pair.
REJECT_THRESHOLD = -1.0e15


@dataclass(frozen=True)
class Numa:
    """An item of the input sequence tagged with its position."""

    ordinal: int
    item: Any

    def __repr__(self) -> str:
        return f"Numa({self.ordinal}, {self.item!r})"


@dataclass(frozen=True)
class Wedge:
    """Weighted edge between two numas, always oriented left to right."""

    left: Numa
    right: Numa
    weight: float

    def __post_init__(self) -> None:
        if self.left.ordinal >= self.right.ordinal:
            raise ValueError(
                f"wedge endpoints must satisfy left < right (got {self.left.ordinal}-{self.right.ordinal})"
            )
        object.__setattr__(self, "weight", float(self.weight))

    @property
    def span(self) -> Span:
        return self.left.ordinal, self.right.ordinal

    @property
    def distance(self) -> int:
        return self.right.ordinal - self.left.ordinal


@dataclass(frozen=True)
class Graph:
    """Immutable collection of non-crossing wedges.

    Wedges keep their insertion order: edges of the graph a parse started from
    come first, followed by the edges added to it in the order they were accepted.
    """

    edges: Tuple[Wedge, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Wedge]:
        return iter(self.edges)

    def spans(self) -> FrozenSet[Span]:
        return frozenset(edge.span for edge in self.edges)

    def contains_span(self, span: Span) -> bool:
        return any(edge.span == span for edge in self.edges)

    @property
    def total_weight(self) -> float:
        return float(sum(edge.weight for edge in self.edges))

    def with_edges(self, extra: Iterable[Wedge]) -> "Graph":
        return Graph(self.edges + tuple(extra))


@dataclass(frozen=True)
class EdgeBudget:
    """How many edges may still be added: a bounded count or unlimited.

    ``limit`` of ``None`` means unbounded. The budget is never decremented;
    callers count what they added and ask :meth:`exhausted`.
    """

    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"bounded edge budget must be non-negative (got {self.limit})")

    @classmethod
    def bounded(cls, count: int) -> "EdgeBudget":
        return cls(limit=count)

    @classmethod
    def unbounded(cls) -> "EdgeBudget":
        return cls(limit=None)

    @classmethod
    def coerce(cls, value: "EdgeBudget | int | None") -> "EdgeBudget":
        """Normalise ``value``; any negative integer means unbounded."""

        if isinstance(value, EdgeBudget):
            return value
        if value is None:
            return cls.unbounded()
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"edge budget must be an int, None or EdgeBudget (got {value!r})")
        value = int(value)
        if value < 0:
            return cls.unbounded()
        return cls.bounded(value)

    @property
    def is_unbounded(self) -> bool:
        return self.limit is None

    def exhausted(self, used: int) -> bool:
        return self.limit is not None and used >= self.limit

    def __str__(self) -> str:
        return "unbounded" if self.limit is None else str(self.limit)


class ScoreFn(Protocol):
    """Scoring callback: ``score(left_item, right_item, distance) -> float``."""

    def __call__(self, left_item: Any, right_item: Any, distance: int) -> float:
        ...


class MstProvider(Protocol):
    """Produces the non-crossing graph a full parse starts from."""

    def __call__(self, items: Sequence[Any], score_fn: ScoreFn) -> Graph:
        ...


__all__ = [
    "EdgeBudget",
    "Graph",
    "MstProvider",
    "Numa",
    "REJECT_THRESHOLD",
    "ScoreFn",
    "Span",
    "Wedge",
]
