import numpy as np
import pytest

from mpg_parser.candidates import generate_candidates, pair_scores
from mpg_parser.indexer import index_items
from mpg_parser.model import REJECT_THRESHOLD, Graph, Wedge


def distance_score(left, right, distance):
    return float(distance)


def test_pair_scores_stores_one_weight_per_pair():
    rows, cols, weights = pair_scores(index_items('abcd'), distance_score)

    assert weights.shape == (6,)
    assert weights.dtype == np.float64
    assert list(zip(rows.tolist(), cols.tolist())) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert weights.tolist() == [1.0, 2.0, 3.0, 1.0, 2.0, 1.0]


def test_pair_scores_empty_sequence():
    rows, cols, weights = pair_scores([], distance_score)

    assert len(rows) == len(cols) == len(weights) == 0


def test_score_fn_receives_items_and_distance():
    calls = []

    def score(left, right, distance):
        calls.append((left, right, distance))
        return 0.0

    pair_scores(index_items('xyz'), score)

    assert calls == [('x', 'y', 1), ('x', 'z', 2), ('y', 'z', 1)]


def test_candidates_follow_enumeration_order():
    candidates = generate_candidates(index_items('abcd'), Graph(), distance_score)

    assert [c.span for c in candidates] == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert [c.weight for c in candidates] == [1.0, 2.0, 3.0, 1.0, 2.0, 1.0]


@pytest.mark.parametrize('rejected', [REJECT_THRESHOLD, REJECT_THRESHOLD * 10, float('-inf'), float('nan')])
def test_candidates_at_or_below_threshold_are_dropped(rejected):
    def score(left, right, distance):
        return rejected if (left, right) == ('a', 'c') else 0.5

    candidates = generate_candidates(index_items('abc'), Graph(), score)

    assert [c.span for c in candidates] == [(0, 1), (1, 2)]


def test_custom_threshold_is_strict():
    candidates = generate_candidates(index_items('abcd'), Graph(), distance_score, threshold=2.0)

    assert [c.span for c in candidates] == [(0, 3)]


def test_candidates_crossing_base_graph_are_dropped():
    numas = index_items('abcd')
    base = Graph((Wedge(numas[1], numas[3], 5.0),))

    candidates = generate_candidates(numas, base, distance_score)

    spans = [c.span for c in candidates]
    assert (0, 2) not in spans
    assert (1, 3) not in spans  # already in the base graph
    assert spans == [(0, 1), (0, 3), (1, 2), (2, 3)]


def test_candidates_are_not_checked_against_each_other():
    candidates = generate_candidates(index_items('abcd'), Graph(), distance_score)

    spans = [c.span for c in candidates]
    assert (0, 2) in spans and (1, 3) in spans


@pytest.mark.parametrize('items', ['', 'a'])
def test_degenerate_sequences_produce_no_candidates(items):
    def score(left, right, distance):  # pragma: no cover - must not be called
        raise AssertionError('score_fn should not be called')

    assert generate_candidates(index_items(items), Graph(), score) == []


def test_threshold_below_constant_still_rejects_constant():
    def score(left, right, distance):
        return 1.0 if (left, right) == ('a', 'b') else REJECT_THRESHOLD

    candidates = generate_candidates(index_items('abc'), Graph(), score, threshold=REJECT_THRESHOLD * 10)

    assert [c.span for c in candidates] == [(0, 1)]
