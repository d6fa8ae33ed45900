import json
from typing import Any, Callable, Optional

import httpx
import pytest

from legal_ai import AsyncLegalAI, Settings

BACKEND_URL = "https://backend.test"


def make_settings(tmp_path, **overrides: Any) -> Settings:
    values = {"state_dir": tmp_path, "generation_delay": 0}
    values.update(overrides)
    return Settings(**values)


def make_client(
    tmp_path,
    handler: Optional[Callable[[httpx.Request], Any]] = None,
    **overrides: Any,
) -> AsyncLegalAI:
    """Client with no backend, or with a backend answered by handler."""
    if handler is not None:
        overrides.setdefault("supabase_url", BACKEND_URL)
        overrides.setdefault("supabase_anon_key", "anon-key")
    transport = httpx.MockTransport(handler) if handler is not None else None
    return AsyncLegalAI(settings=make_settings(tmp_path, **overrides), transport=transport)


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data), headers={"Content-Type": "application/json"})


@pytest.fixture
def offline_client(tmp_path) -> AsyncLegalAI:
    return make_client(tmp_path)


@pytest.fixture
def signed_in_client(tmp_path) -> AsyncLegalAI:
    client = make_client(tmp_path)
    client.auth.login("user@example.kz")
    return client
