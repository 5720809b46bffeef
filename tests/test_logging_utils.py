import logging

import numpy as np
import pytest

from mpg_parser.indexer import index_items
from mpg_parser.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from mpg_parser.model import Graph, Wedge

logger = logging.getLogger('tests.logging_utils')


def test_safe_repr_summarises_graphs_and_wedges():
    numas = index_items('abc')
    graph = Graph((Wedge(numas[0], numas[2], 2.0), Wedge(numas[0], numas[1], 1.0)))

    assert _safe_repr(graph) == 'Graph(edges=2, weight=3, spans=[0-1, 0-2])'
    assert _safe_repr(Graph()) == 'Graph(edges=0)'
    assert _safe_repr(graph.edges[0]) == 'Wedge(0-2, 2)'
    assert _safe_repr(numas[1]) == "Numa(1, 'b')"


def test_safe_repr_summarises_arrays_and_long_lists():
    assert _safe_repr(np.zeros((3, 3))) == 'ndarray(shape=(3, 3), dtype=float64), min=0, max=0'
    assert _safe_repr(list(range(8))) == '[0, 1, 2, 3, 4, ... (8 total)]'


def test_debug_log_call_logs_entry_and_exit(caplog):
    @debug_log_call(logger, name='double')
    def double(value, factor=1):
        return value * factor

    with caplog.at_level(logging.DEBUG, logger='tests.logging_utils'):
        assert double(4, factor=2) == 8

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ['call double(4, factor=2)', 'double -> 8']


def test_debug_log_call_reraises(caplog):
    @debug_log_call(logger)
    def broken():
        raise RuntimeError('boom')

    with caplog.at_level(logging.DEBUG, logger='tests.logging_utils'):
        with pytest.raises(RuntimeError):
            broken()

    assert caplog.records[-1].getMessage().endswith("broken raised RuntimeError('boom')")


def test_apply_debug_logging_wraps_public_functions_once():
    def public():
        return 1

    def _private():
        return 2

    public.__module__ = 'fake_module'
    _private.__module__ = 'fake_module'
    namespace = {'__name__': 'fake_module', 'public': public, '_private': _private}

    apply_debug_logging(namespace)
    wrapped = namespace['public']
    apply_debug_logging(namespace)

    assert getattr(wrapped, '_debug_logging_wrapped', False)
    assert namespace['public'] is wrapped
    assert namespace['_private'] is _private


def test_debug_log_call_is_silent_without_debug(caplog):
    @debug_log_call(logger, name='double')
    def double(value):
        return value * 2

    with caplog.at_level(logging.INFO, logger='tests.logging_utils'):
        assert double(3) == 6

    assert caplog.records == []
