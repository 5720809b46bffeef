import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from mpg_parser import (
    Graph,
    GraphValidationError,
    ParserConfig,
    ScoreFn,
    Wedge,
    add_edges,
    get_parser_config,
    graph_to_dict,
    index_items,
    load_score_table,
    parse_sequence,
    print_graph,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_base_edge(value: str) -> Tuple[int, int]:
    parts = [part.strip() for part in value.split("-")]
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"base edge must look like L-R with integer ordinals (got {value!r})")
    left, right = int(parts[0]), int(parts[1])
    return (left, right) if left < right else (right, left)


def _build_base_graph(words: Sequence[str], edge_texts: Sequence[str], score_fn: ScoreFn) -> Graph:
    numas = index_items(words)
    edges: List[Wedge] = []
    for text in edge_texts:
        left, right = _parse_base_edge(text)
        if left == right or right >= len(numas):
            raise ValueError(f"base edge {text!r} does not fit a sequence of {len(numas)} item(s)")
        weight = score_fn(numas[left].item, numas[right].item, right - left)
        edges.append(Wedge(numas[left], numas[right], weight))
    return Graph(tuple(edges))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Extend a sequence parse with non-crossing extra edges")
    parser.add_argument("scores", help="Path to a JSON pair score table")
    parser.add_argument("words", nargs="+", help="Items of the sequence, in order")
    parser.add_argument(
        "--extra-edges",
        type=int,
        default=-1,
        help="Number of edges to add; negative means as many as fit (default: -1)",
    )
    parser.add_argument(
        "--base-edge",
        action="append",
        default=[],
        metavar="L-R",
        help="Edge of the starting graph given as ordinals, e.g. 0-2 (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resulting graph as JSON",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the starting graph for crossing or duplicate edges",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config: ParserConfig = get_parser_config()
    config.validate_base_graph = args.validate

    try:
        score_fn = load_score_table(args.scores)
        if args.base_edge:
            base_graph = _build_base_graph(args.words, args.base_edge, score_fn)
            logger.info("Extending %d supplied base edge(s)", len(base_graph))
            graph = add_edges(base_graph, args.words, score_fn, args.extra_edges, config=config)
        else:
            graph = parse_sequence(args.words, score_fn, args.extra_edges, config=config)
    except (GraphValidationError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    if args.json:
        print(json.dumps(graph_to_dict(graph), indent=2))
    else:
        print(f"Edges: {len(graph)}")
        print(f"Total weight: {graph.total_weight:.6g}")
        sys.stdout.write(print_graph(graph))


if __name__ == "__main__":
    main(sys.argv[1:])
