import os

import httpx
import pytest


@pytest.mark.integration
def test_live_resolve_known_model():
    if os.getenv("RUN_INTEGRATION") != "1":
        pytest.skip("RUN_INTEGRATION is not enabled")

    base_url = os.getenv("INTEGRATION_BASE_URL", "http://localhost:8000")
    limits = httpx.get(f"{base_url}/limits", timeout=10.0)
    assert limits.status_code == 200
    assert len(limits.json()) > 0

    response = httpx.post(f"{base_url}/resolve", json={"model_name": "gpt-4o"}, timeout=10.0)
    assert response.status_code == 200
    assert response.json()["effective_context_limit"] > 0
