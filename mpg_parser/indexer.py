from typing import Any, Iterable, List

from .model import Numa


def index_items(items: Iterable[Any]) -> List[Numa]:
    """Pair every item with its 0-based position in the sequence."""

    return [Numa(ordinal, item) for ordinal, item in enumerate(items)]
