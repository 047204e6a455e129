"""Token estimation helpers for budgeting prompts against a model's context limit."""

from __future__ import annotations

import logging
from typing import Optional

import tiktoken

from modelconfig import config
from modelconfig.models import ModelConfig


logger = logging.getLogger(__name__)


def _encoding_for(model: Optional[str]) -> tiktoken.Encoding:
    if model:
        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            pass
    return tiktoken.get_encoding(config.DEFAULT_ENCODING)


def estimate_tokens(text: str, model: Optional[str] = None) -> int:
    if not text:
        return 0
    try:
        encoding = _encoding_for(model)
        return len(encoding.encode(text))
    except Exception as exc:
        # Encoding files are fetched on first use; approximate when they cannot be loaded.
        logger.debug("Tokenizer unavailable for %s (%s), approximating", model, exc)
        return max(1, len(text) // 4)


def remaining_context(model_config: ModelConfig, *texts: str, reserve: int = 0) -> int:
    """Tokens still available after ``texts`` and ``reserve`` are accounted for."""
    used = sum(estimate_tokens(text, model_config.model_name) for text in texts)
    return max(0, model_config.get_context_limit() - used - reserve)


def fits_context(model_config: ModelConfig, *texts: str, reserve: int = 0) -> bool:
    used = sum(estimate_tokens(text, model_config.model_name) for text in texts)
    return used + reserve <= model_config.get_context_limit()
