"""
Pytest configuration and fixtures for the Elasticsearch client tests.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import Mock

import httpx
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from elastic_client import ElasticClient, ElasticConfig  # noqa: E402
from elastic_client.utils.connection import HttpTransport, TransportResponse  # noqa: E402


class FakeElasticsearch:
    """In-process stand-in for an Elasticsearch node.

    Answers from a (method, path) route table and records every request.
    Unrouted requests get a 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.failure: Optional[Exception] = None

    def route(self, method: str, path: str, status_code: int = 200, body: Any = None) -> None:
        self.routes[(method, path)] = (status_code, body if body is not None else {})

    def fail_with(self, error: Exception) -> None:
        self.failure = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failure is not None:
            raise self.failure

        status_code, body = self.routes.get(
            (request.method, request.url.path),
            (404, {"error": "no route"}),
        )
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def test_config():
    """Configuration without an index prefix."""
    return ElasticConfig(host="es.test", port=9200, index_prefix="", timeout_ms=5000)


@pytest.fixture
def prefixed_config():
    """Configuration with an index prefix."""
    return ElasticConfig(host="es.test", port=9200, index_prefix="dev_", timeout_ms=5000)


@pytest.fixture
def fake_es():
    return FakeElasticsearch()


def _client_for(config: ElasticConfig, fake_es: FakeElasticsearch) -> ElasticClient:
    http_client = httpx.Client(transport=httpx.MockTransport(fake_es.handler))
    transport = HttpTransport(timeout_ms=config.timeout_ms, client=http_client)
    return ElasticClient(config=config, transport=transport)


@pytest.fixture
def es_client(test_config, fake_es):
    """ElasticClient wired to the fake node."""
    with _client_for(test_config, fake_es) as client:
        yield client


@pytest.fixture
def prefixed_client(prefixed_config, fake_es):
    """ElasticClient with index prefix "dev_" wired to the fake node."""
    with _client_for(prefixed_config, fake_es) as client:
        yield client


@pytest.fixture
def mock_transport():
    """Mock transport answering every request with an empty 200."""
    transport = Mock(spec=HttpTransport)
    transport.request.return_value = TransportResponse(status_code=200, body="{}")
    return transport


@pytest.fixture
def mock_client(test_config, mock_transport):
    """ElasticClient on top of the mock transport."""
    return ElasticClient(config=test_config, transport=mock_transport)


@pytest.fixture
def sample_search_response():
    """Raw _search response with aggregations."""
    return {
        "took": 4,
        "timed_out": False,
        "hits": {
            "total": 2,
            "hits": [
                {"_index": "articles", "_id": "1", "_source": {"title": "Rust"}},
                {"_index": "articles", "_id": "2", "_source": {"title": "Python"}},
            ],
        },
        "aggregations": {
            "authors": {
                "buckets": [
                    {"key": "alice", "doc_count": 1},
                    {"key": "bob", "doc_count": 1},
                ]
            }
        },
    }
