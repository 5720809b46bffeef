import pytest

from mpg_parser import Graph, add_edges
from mpg_parser.config import ParserConfig, get_parser_config, set_parser_config
from mpg_parser.model import REJECT_THRESHOLD


@pytest.fixture
def restore_config():
    saved = get_parser_config()
    yield
    set_parser_config(saved)


def test_default_config():
    config = get_parser_config()

    assert config.reject_threshold == REJECT_THRESHOLD
    assert config.validate_base_graph is False
    assert config.trace_scores is False


def test_get_returns_a_copy(restore_config):
    config = get_parser_config()
    config.reject_threshold = 0.0

    assert get_parser_config().reject_threshold == REJECT_THRESHOLD


def test_process_wide_config_is_used_by_pipeline(restore_config):
    set_parser_config(ParserConfig(reject_threshold=1.5))

    result = add_edges(Graph(), 'abc', lambda left, right, distance: float(distance), -1)

    assert result.spans() == frozenset({(0, 2)})
