from typing import Any, Dict, List

from .model import Graph, Wedge


def _item_str(item: Any) -> str:
    return item if isinstance(item, str) else repr(item)


def format_wedge(wedge: Wedge) -> str:
    return (
        f"{wedge.left.ordinal}:{_item_str(wedge.left.item)} - "
        f"{wedge.right.ordinal}:{_item_str(wedge.right.item)} ({wedge.weight:.6g})"
    )


def print_graph(graph: Graph) -> str:
    """Render ``graph`` one edge per line, ordered by span."""

    lines = [format_wedge(edge) for edge in sorted(graph, key=lambda edge: edge.span)]
    return "".join(line + "\n" for line in lines)


def graph_to_dict(graph: Graph) -> Dict[str, List[Dict[str, Any]]]:
    edges = []
    for edge in sorted(graph, key=lambda edge: edge.span):
        edges.append(
            {
                "left": edge.left.ordinal,
                "right": edge.right.ordinal,
                "weight": edge.weight,
                "left_item": _item_str(edge.left.item),
                "right_item": _item_str(edge.right.item),
            }
        )
    return {"edges": edges}
