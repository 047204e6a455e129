import os
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

RESOLVER_ENV = [
    "LLM_CONTEXT_LIMIT",
    "LLM_LEAD_CONTEXT_LIMIT",
    "LLM_WORKER_CONTEXT_LIMIT",
    "LLM_TOOLSHIM",
    "LLM_TOOLSHIM_MODEL",
    "LLM_TEMPERATURE",
]

# Keep unit tests deterministic and independent from local shell configuration.
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def _clean_resolver_env(monkeypatch):
    for key in RESOLVER_ENV:
        monkeypatch.delenv(key, raising=False)
