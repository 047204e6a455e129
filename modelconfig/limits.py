"""Static table of model-name substrings and their context windows.

The table is built on first access and never mutated afterwards. Lookups scan
it in iteration order (declaration order) and return the first pattern that is
a substring of the model name. Overlapping patterns such as ``grok`` and
``grok-4`` therefore resolve to whichever is declared first; callers that care
can inspect :func:`matching_patterns`.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from types import MappingProxyType


_table: Mapping[str, int] | None = None
_table_lock = threading.Lock()


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}

    # OpenAI models, https://platform.openai.com/docs/models#models-overview
    table["gpt-4o"] = 128_000
    table["gpt-4-turbo"] = 128_000
    table["o3"] = 200_000
    table["o3-mini"] = 200_000
    table["o4-mini"] = 200_000
    table["gpt-4.1"] = 1_000_000
    table["gpt-4-1"] = 1_000_000

    # Anthropic models, https://docs.anthropic.com/en/docs/about-claude/models
    table["claude"] = 200_000

    # Google models, https://ai.google/get-started/our-models/
    table["gemini-2.5"] = 1_000_000
    table["gemini-2-5"] = 1_000_000

    # Meta Llama models
    table["llama3.2"] = 128_000
    table["llama3.3"] = 128_000

    # x.ai Grok models, https://docs.x.ai/docs/overview
    table["grok"] = 131_072

    # Groq-hosted models, https://console.groq.com/docs/models
    table["gemma2-9b"] = 8_192
    table["kimi-k2"] = 131_072
    table["qwen3-32b"] = 131_072
    table["grok-3"] = 131_072
    table["grok-4"] = 256_000
    table["qwen3-coder"] = 262_144

    return table


def pattern_table() -> Mapping[str, int]:
    """Return the read-only pattern table, building it on first use."""
    global _table
    table = _table
    if table is not None:
        return table
    with _table_lock:
        if _table is None:
            _table = MappingProxyType(_build_table())
        return _table


def lookup_first_match(model_name: str) -> int | None:
    for pattern, limit in pattern_table().items():
        if pattern in model_name:
            return limit
    return None


def matching_patterns(model_name: str) -> list[str]:
    return [pattern for pattern in pattern_table() if pattern in model_name]


def all_entries() -> list[tuple[str, int]]:
    return list(pattern_table().items())
