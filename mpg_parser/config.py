"""Configuration helpers for the parser pipeline."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

from .model import REJECT_THRESHOLD


@dataclass
class ParserConfig:
    reject_threshold: float = REJECT_THRESHOLD
    validate_base_graph: bool = False
    trace_scores: bool = False


_PARSER_CONFIG = ParserConfig()


def get_parser_config() -> ParserConfig:
    return copy.deepcopy(_PARSER_CONFIG)


def set_parser_config(config: ParserConfig) -> None:
    global _PARSER_CONFIG
    _PARSER_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[ParserConfig]) -> ParserConfig:
    return config if config is not None else get_parser_config()
