"""Greedy insertion of ranked candidates into a planar graph."""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .crossing import span_crosses_any
from .model import EdgeBudget, Graph, Span, Wedge

logger = logging.getLogger(__name__)


def insert_edges(budget: "EdgeBudget | int | None", ranked: Iterable[Wedge], base_graph: Graph) -> Graph:
    """Add ranked candidates to ``base_graph`` until the budget runs out.

    A candidate crossing any edge of the growing result (base edges and edges
    accepted earlier in this walk) is skipped for good and costs nothing from
    the budget. The walk never backtracks. When nothing is added the input
    graph object itself is returned.
    """

    budget = EdgeBudget.coerce(budget)
    spans: List[Span] = [edge.span for edge in base_graph]
    present: Set[Span] = set(spans)
    added: List[Wedge] = []

    for candidate in ranked:
        if budget.exhausted(len(added)):
            break
        span = candidate.span
        if span in present:
            logger.debug("skip %d-%d: already present", *span)
            continue
        if span_crosses_any(span, spans):
            logger.debug("skip %d-%d (%.6g): crosses accepted edge", span[0], span[1], candidate.weight)
            continue
        logger.debug("accept %d-%d (%.6g)", span[0], span[1], candidate.weight)
        added.append(candidate)
        spans.append(span)
        present.add(span)

    if not added:
        return base_graph
    return base_graph.with_edges(added)
