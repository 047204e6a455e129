"""Context-limit resolution and environment-driven ModelConfig construction.

The context limit is resolved with the following precedence:

1. The caller-named environment variable (e.g. ``LLM_LEAD_CONTEXT_LIMIT``), if given
2. ``LLM_CONTEXT_LIMIT``
3. The first matching pattern in the model limits table
4. Unset, in which case ``ModelConfig.get_context_limit`` returns the global default

An explicit limit from the caller is applied afterwards with
``ModelConfig.with_context_limit`` and always wins. Malformed values at any tier
are treated as unset so the chain falls through; nothing here raises.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, Optional

from modelconfig import config
from modelconfig.limits import all_entries, lookup_first_match
from modelconfig.models import ModelConfig, ModelLimitConfig


logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]

_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


def parse_context_limit(raw: str | None) -> int | None:
    if raw is None or not _UNSIGNED_INT_RE.fullmatch(raw):
        return None
    return int(raw)


def parse_temperature(raw: str | None) -> float | None:
    # float() tolerates surrounding whitespace and digit underscores; treat both as malformed.
    if not raw or raw != raw.strip() or "_" in raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def parse_flag(raw: str | None) -> bool:
    if raw is None:
        return False
    return raw == "1" or raw.lower() == "true"


def _env_context_limit(name: str, getenv: EnvLookup) -> int | None:
    raw = getenv(name)
    if raw is None:
        return None
    limit = parse_context_limit(raw)
    if limit is None:
        logger.debug("Ignoring malformed %s=%r", name, raw)
    return limit


def resolve_context_limit(
    model_name: str,
    context_env_var: str | None = None,
    *,
    getenv: EnvLookup | None = None,
) -> int | None:
    getenv = getenv or os.getenv

    if context_env_var:
        limit = _env_context_limit(context_env_var, getenv)
        if limit is not None:
            logger.debug("Context limit for %s from %s: %d", model_name, context_env_var, limit)
            return limit

    limit = _env_context_limit(config.CONTEXT_LIMIT_ENV, getenv)
    if limit is not None:
        logger.debug("Context limit for %s from %s: %d", model_name, config.CONTEXT_LIMIT_ENV, limit)
        return limit

    limit = lookup_first_match(model_name)
    if limit is not None:
        logger.debug("Context limit for %s from model table: %d", model_name, limit)
    else:
        logger.debug("No known context limit for %s, default applies", model_name)
    return limit


def resolve_model_config(
    model_name: str,
    context_env_var: str | None = None,
    *,
    getenv: EnvLookup | None = None,
) -> ModelConfig:
    """Create a ModelConfig for ``model_name`` from the environment.

    Args:
        model_name: Model identifier; only used for substring matching.
        context_env_var: Optional purpose-specific variable consulted before
            ``LLM_CONTEXT_LIMIT`` (lead, worker, planner models and so on).
        getenv: Lookup used instead of ``os.getenv``; tests pass ``dict.get``.

    Returns:
        A config with ``max_tokens`` unset and the remaining fields taken from
        the environment.
    """
    getenv = getenv or os.getenv

    return ModelConfig(
        model_name=model_name,
        context_limit=resolve_context_limit(model_name, context_env_var, getenv=getenv),
        temperature=parse_temperature(getenv(config.TEMPERATURE_ENV)),
        max_tokens=None,
        toolshim=parse_flag(getenv(config.TOOLSHIM_ENV)),
        toolshim_model=getenv(config.TOOLSHIM_MODEL_ENV),
    )


def list_all_known_limits() -> list[ModelLimitConfig]:
    return [ModelLimitConfig(pattern=pattern, context_limit=limit) for pattern, limit in all_entries()]
