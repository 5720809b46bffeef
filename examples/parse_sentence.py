"""Example pipeline: start from a hand-made tree and add the best extra edges."""

from mpg_parser import Graph, PairScoreTable, Wedge, add_edges, index_items, print_graph

WORDS = ["she", "saw", "the", "dog", "with", "a", "telescope"]

SCORES = PairScoreTable(
    {
        ("she", "saw"): 4.1,
        ("saw", "dog"): 3.7,
        ("the", "dog"): 3.2,
        ("a", "telescope"): 3.0,
        ("with", "telescope"): 2.6,
        ("saw", "with"): 1.9,
        ("dog", "with"): 1.8,
        ("saw", "the"): 0.4,
        ("she", "dog"): 0.2,
    }
)

TREE_SPANS = [(0, 1), (1, 3), (2, 3), (1, 4), (4, 6), (5, 6)]


def tree(words) -> Graph:
    numas = index_items(words)
    return Graph(
        tuple(Wedge(numas[a], numas[b], SCORES(numas[a].item, numas[b].item, b - a)) for a, b in TREE_SPANS)
    )


def main() -> None:
    base = tree(WORDS)
    graph = add_edges(base, WORDS, SCORES, 2)
    print("Base edges:", len(base))
    print("Edges:", len(graph))
    print(print_graph(graph), end="")


if __name__ == "__main__":
    main()
