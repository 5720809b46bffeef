"""Parse orchestration: extend a planar graph with the best scoring extra edges."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from .candidates import generate_candidates
from .config import ParserConfig, resolve_config
from .indexer import index_items
from .inserter import insert_edges
from .logging_utils import apply_debug_logging, debug_log_call
from .model import EdgeBudget, Graph, MstProvider, ScoreFn
from .ranking import rank_candidates
from .validate import validate_graph

logger = logging.getLogger(__name__)
score_logger = logging.getLogger(f"{__name__}.score")


def empty_mst_provider(items: Sequence[Any], score_fn: ScoreFn) -> Graph:
    """Start every parse from a graph without edges."""

    return Graph()


def add_edges(
    base_graph: Graph,
    items: Iterable[Any],
    score_fn: ScoreFn,
    num_extra_edges: "EdgeBudget | int | None",
    *,
    config: Optional[ParserConfig] = None,
) -> Graph:
    """Add up to ``num_extra_edges`` non-crossing edges to ``base_graph``.

    A negative count (or ``None``) keeps adding while any candidate still fits.
    ``base_graph`` is not modified; a new graph is returned, or ``base_graph``
    itself when nothing could be added.
    """

    budget = EdgeBudget.coerce(num_extra_edges)
    cfg = resolve_config(config)
    numas = index_items(items)

    if budget.exhausted(0) or len(numas) < 2:
        logger.info(
            "Skipping edge search: items=%d budget=%s base_edges=%d", len(numas), budget, len(base_graph)
        )
        return base_graph

    if cfg.validate_base_graph:
        validate_graph(base_graph, numas)

    scorer = score_fn
    if cfg.trace_scores:
        scorer = debug_log_call(score_logger, name="score_fn")(score_fn)

    candidates = generate_candidates(numas, base_graph, scorer, threshold=cfg.reject_threshold)
    ranked = rank_candidates(candidates)
    result = insert_edges(budget, ranked, base_graph)

    logger.info(
        "Extended graph over %d items: base_edges=%d candidates=%d added=%d budget=%s",
        len(numas),
        len(base_graph),
        len(candidates),
        len(result) - len(base_graph),
        budget,
    )
    return result


def parse_sequence(
    items: Iterable[Any],
    score_fn: ScoreFn,
    num_loops: "EdgeBudget | int | None",
    *,
    mst_provider: Optional[MstProvider] = None,
    config: Optional[ParserConfig] = None,
) -> Graph:
    """Parse ``items``: build the starting tree, then add ``num_loops`` extra edges."""

    items = list(items)
    if not items:
        logger.info("Empty sequence, nothing to parse")
        return Graph()

    provider = mst_provider if mst_provider is not None else empty_mst_provider
    base_graph = provider(items, score_fn)
    logger.info("Starting graph for %d items has %d edge(s)", len(items), len(base_graph))
    return add_edges(base_graph, items, score_fn, num_loops, config=config)


apply_debug_logging(globals(), logger=logger)
