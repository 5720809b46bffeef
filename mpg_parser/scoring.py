"""Ready-made scoring callbacks backed by explicit pair tables."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple, Union

from .model import REJECT_THRESHOLD

logger = logging.getLogger(__name__)

PairKey = Tuple[Hashable, Hashable]


class PairScoreTable:
    """Score pairs by looking them up in a ``{(left, right): weight}`` table.

    Lookups are directional: ``(left, right)`` only matches when ``left``
    precedes ``right`` in the sequence. Unknown pairs score ``default`` and
    pairs farther apart than ``max_distance`` score the rejection threshold.
    """

    def __init__(
        self,
        scores: Mapping[PairKey, float],
        *,
        default: float = REJECT_THRESHOLD,
        max_distance: Optional[int] = None,
    ) -> None:
        if max_distance is not None and max_distance < 1:
            raise ValueError(f"max_distance must be positive (got {max_distance})")
        self.scores: Dict[PairKey, float] = {key: float(value) for key, value in scores.items()}
        self.default = float(default)
        self.max_distance = max_distance

    def __call__(self, left_item: Any, right_item: Any, distance: int) -> float:
        if self.max_distance is not None and distance > self.max_distance:
            return REJECT_THRESHOLD
        return self.scores.get((left_item, right_item), self.default)

    def __len__(self) -> int:
        return len(self.scores)

    def __repr__(self) -> str:
        return f"PairScoreTable(pairs={len(self.scores)}, default={self.default}, max_distance={self.max_distance})"


def score_table_from_dict(payload: Mapping[str, Any]) -> PairScoreTable:
    if not isinstance(payload, Mapping):
        raise ValueError("score table must be a JSON object")
    pairs = payload.get("pairs", [])
    if not isinstance(pairs, list):
        raise ValueError('"pairs" must be a list')

    scores: Dict[PairKey, float] = {}
    for idx, entry in enumerate(pairs):
        if not isinstance(entry, Mapping) or not {"left", "right", "weight"} <= set(entry):
            raise ValueError(f"[pair {idx}] expected an object with left, right and weight")
        if not all(isinstance(entry[side], str) for side in ("left", "right")):
            raise ValueError(f"[pair {idx}] left and right must be strings")
        weight = entry["weight"]
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"[pair {idx}] weight must be a number (got {weight!r})")
        key = (entry["left"], entry["right"])
        if key in scores:
            logger.warning("Duplicate score for %s-%s, keeping the last one", key[0], key[1])
        scores[key] = float(weight)

    default = payload.get("default", REJECT_THRESHOLD)
    if isinstance(default, bool) or not isinstance(default, (int, float)):
        raise ValueError(f'"default" must be a number (got {default!r})')
    max_distance = payload.get("max_distance")
    if max_distance is not None and (isinstance(max_distance, bool) or not isinstance(max_distance, int)):
        raise ValueError(f'"max_distance" must be an integer (got {max_distance!r})')
    return PairScoreTable(scores, default=default, max_distance=max_distance)


def load_score_table(path: Union[str, Path]) -> PairScoreTable:
    text = Path(path).read_text(encoding="utf-8")
    table = score_table_from_dict(json.loads(text))
    logger.info("Loaded %d pair score(s) from %s", len(table), path)
    return table
