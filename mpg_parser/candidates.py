"""Candidate edge generation over all pairs of a sequence."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .crossing import span_crosses_any
from .model import REJECT_THRESHOLD, Graph, Numa, ScoreFn, Wedge

logger = logging.getLogger(__name__)


def pair_scores(numas: Sequence[Numa], score_fn: ScoreFn) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate ``score_fn`` for every left-to-right pair.

    Returns ``(rows, cols, weights)``: positions in ``numas`` for each pair in
    row-major order (left ascending, then right ascending) and a 1-D array of
    the matching weights.
    """

    rows, cols = np.triu_indices(len(numas), k=1)
    weights = np.empty(len(rows), dtype=np.float64)
    for idx, (i, j) in enumerate(zip(rows.tolist(), cols.tolist())):
        left = numas[i]
        right = numas[j]
        weights[idx] = score_fn(left.item, right.item, right.ordinal - left.ordinal)
    return rows, cols, weights


def generate_candidates(
    numas: Sequence[Numa],
    base_graph: Graph,
    score_fn: ScoreFn,
    *,
    threshold: float = REJECT_THRESHOLD,
) -> List[Wedge]:
    """Return every scorable pair that can sit next to ``base_graph``.

    Pairs are produced in enumeration order (left ascending, then right
    ascending). A pair is dropped when its weight is not strictly above
    ``threshold``, when it is already an edge of ``base_graph``, or when it
    crosses one of the base edges. Candidates are not checked against each
    other here.

    ``threshold`` never goes below :data:`REJECT_THRESHOLD`, which scorers
    return for pairs with no association.
    """

    if len(numas) < 2:
        return []

    floor = max(threshold, REJECT_THRESHOLD)
    base_spans = [edge.span for edge in base_graph]
    present = set(base_spans)
    rows, cols, weights = pair_scores(numas, score_fn)
    keep = weights > floor

    candidates: List[Wedge] = []
    duplicates = 0
    crossing = 0
    for i, j, weight in zip(rows[keep].tolist(), cols[keep].tolist(), weights[keep].tolist()):
        left = numas[i]
        right = numas[j]
        span = (left.ordinal, right.ordinal)
        if span in present:
            duplicates += 1
            continue
        if span_crosses_any(span, base_spans):
            crossing += 1
            continue
        candidates.append(Wedge(left, right, weight))

    logger.debug(
        "candidates: pairs=%d below-threshold=%d duplicate=%d crossing-base=%d kept=%d",
        len(weights),
        int(len(weights) - np.count_nonzero(keep)),
        duplicates,
        crossing,
        len(candidates),
    )
    return candidates
