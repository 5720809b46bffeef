from typing import Optional, Sequence

from .crossing import spans_cross
from .model import Graph, Numa


class GraphValidationError(Exception):
    pass


def validate_graph(graph: Graph, numas: Optional[Sequence[Numa]] = None) -> None:
    """Check that ``graph`` is planar, duplicate free and well oriented.

    When ``numas`` is given every endpoint must also be one of its ordinals.
    """

    ordinals = {numa.ordinal for numa in numas} if numas is not None else None
    seen = set()
    spans = []
    for edge in graph:
        a, b = edge.left.ordinal, edge.right.ordinal
        if a >= b:
            raise GraphValidationError(f'[edge {a}-{b}] endpoints must be ordered left < right')
        if ordinals is not None:
            for ordinal in (a, b):
                if ordinal not in ordinals:
                    raise GraphValidationError(f'[edge {a}-{b}] ordinal {ordinal} is not in the sequence')
        if (a, b) in seen:
            raise GraphValidationError(f'[edge {a}-{b}] duplicate edge')
        for other in spans:
            if spans_cross((a, b), other):
                raise GraphValidationError(f'[edge {a}-{b}] crosses edge {other[0]}-{other[1]}')
        seen.add((a, b))
        spans.append((a, b))
