"""
Exceptions raised by the Elasticsearch client.
"""

from typing import Any


class ElasticClientError(Exception):
    """Base class for all client errors."""


class ElasticStatusError(ElasticClientError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Elasticsearch returned HTTP {status_code}")
        self.status_code = status_code


class ElasticTransportError(ElasticClientError):
    """The request never produced an HTTP response."""

    def __init__(self, reason: Any):
        super().__init__(f"Elasticsearch request failed: {reason}")
        self.reason = reason
