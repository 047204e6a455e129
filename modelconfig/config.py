"""Environment variable names, defaults and runtime settings."""

from __future__ import annotations

import os


# Context limit used when no override or known pattern applies.
DEFAULT_CONTEXT_LIMIT = 128_000

# Global context-limit override, consulted after any caller-named variable.
CONTEXT_LIMIT_ENV = "LLM_CONTEXT_LIMIT"

# Purpose-specific overrides callers commonly pass as `context_env_var`.
LEAD_CONTEXT_LIMIT_ENV = "LLM_LEAD_CONTEXT_LIMIT"
WORKER_CONTEXT_LIMIT_ENV = "LLM_WORKER_CONTEXT_LIMIT"

# Tool-call shim and generation defaults.
TOOLSHIM_ENV = "LLM_TOOLSHIM"
TOOLSHIM_MODEL_ENV = "LLM_TOOLSHIM_MODEL"
TEMPERATURE_ENV = "LLM_TEMPERATURE"

# Tokenizer used when tiktoken has no mapping for a model name.
DEFAULT_ENCODING = "o200k_base"

# Service runtime settings.
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
API_TITLE: str = os.getenv("API_TITLE", "Model Config Resolver API")
