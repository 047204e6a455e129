"""Resolve context limits and generation settings for language models."""

from modelconfig.config import DEFAULT_CONTEXT_LIMIT
from modelconfig.limits import all_entries, lookup_first_match, matching_patterns
from modelconfig.models import ModelConfig, ModelLimitConfig
from modelconfig.resolver import (
    list_all_known_limits,
    parse_context_limit,
    parse_flag,
    parse_temperature,
    resolve_context_limit,
    resolve_model_config,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CONTEXT_LIMIT",
    "ModelConfig",
    "ModelLimitConfig",
    "all_entries",
    "list_all_known_limits",
    "lookup_first_match",
    "matching_patterns",
    "parse_context_limit",
    "parse_flag",
    "parse_temperature",
    "resolve_context_limit",
    "resolve_model_config",
]
