from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .model import Wedge


def rank_candidates(candidates: Sequence[Wedge]) -> List[Wedge]:
    """Order candidates by weight, highest first.

    The sort is stable, so equal weights keep their incoming order. Fed
    straight from :func:`generate_candidates` that is left ordinal ascending,
    then right ordinal ascending.
    """

    if not candidates:
        return []
    weights = np.fromiter((edge.weight for edge in candidates), dtype=np.float64, count=len(candidates))
    order = np.argsort(-weights, kind="stable")
    return [candidates[index] for index in order.tolist()]
