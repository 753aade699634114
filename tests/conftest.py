"""Shared fixtures: API key handling and a mocked YouTube Data API."""

from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest


@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def youtube_api(sent_requests) -> Callable[[Dict[str, Tuple[int, Any]]], httpx.MockTransport]:
    """
    Build a transport answering /youtube/v3/<endpoint> with canned (status, payload) pairs.

    Every request is recorded in sent_requests.
    """

    def build(routes: Dict[str, Tuple[int, Any]]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            endpoint = request.url.path.rsplit("/", 1)[-1]
            status, payload = routes[endpoint]
            if isinstance(payload, str):
                return httpx.Response(status, text=payload)
            return httpx.Response(status, json=payload)

        return httpx.MockTransport(handler)

    return build
