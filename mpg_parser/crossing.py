"""Crossing test for edges laid out over a linear sequence."""

from typing import Iterable

from .model import Span, Wedge


def spans_cross(first: Span, second: Span) -> bool:
    """Return ``True`` when exactly one endpoint of one span lies strictly inside the other.

    Both spans must already be oriented so that ``left < right``. Spans sharing
    an endpoint, nested spans and disjoint spans do not cross.
    """

    a1, b1 = first
    a2, b2 = second
    return (a1 < a2 < b1 < b2) or (a2 < a1 < b2 < b1)


def crosses(edge_a: Wedge, edge_b: Wedge) -> bool:
    return spans_cross(edge_a.span, edge_b.span)


def crosses_any(edge: Wedge, edges: Iterable[Wedge]) -> bool:
    span = edge.span
    return any(spans_cross(span, other.span) for other in edges)


def span_crosses_any(span: Span, spans: Iterable[Span]) -> bool:
    return any(spans_cross(span, other) for other in spans)
