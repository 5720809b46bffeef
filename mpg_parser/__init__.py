from .model import REJECT_THRESHOLD, EdgeBudget, Graph, MstProvider, Numa, ScoreFn, Wedge
from .indexer import index_items
from .crossing import crosses, crosses_any, spans_cross
from .candidates import generate_candidates, pair_scores
from .ranking import rank_candidates
from .inserter import insert_edges
from .config import ParserConfig, get_parser_config, set_parser_config
from .validate import GraphValidationError, validate_graph
from .pipeline import add_edges, empty_mst_provider, parse_sequence
from .printer import format_wedge, graph_to_dict, print_graph
from .scoring import PairScoreTable, load_score_table, score_table_from_dict

__all__ = [
    'REJECT_THRESHOLD',
    'EdgeBudget',
    'Graph',
    'MstProvider',
    'Numa',
    'ScoreFn',
    'Wedge',
    'index_items',
    'crosses',
    'crosses_any',
    'spans_cross',
    'generate_candidates',
    'pair_scores',
    'rank_candidates',
    'insert_edges',
    'ParserConfig',
    'get_parser_config',
    'set_parser_config',
    'GraphValidationError',
    'validate_graph',
    'add_edges',
    'empty_mst_provider',
    'parse_sequence',
    'format_wedge',
    'graph_to_dict',
    'print_graph',
    'PairScoreTable',
    'load_score_table',
    'score_table_from_dict',
]
