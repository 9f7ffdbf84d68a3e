"""
HTTP transport for talking to Elasticsearch.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from elastic_client.exceptions import ElasticTransportError


logger = logging.getLogger(__name__)

JSON_HEADERS = {"content-type": "application/json"}
NDJSON_HEADERS = {"content-type": "application/x-ndjson"}


@dataclass
class TransportResponse:
    """Status code and raw body of a completed HTTP exchange."""
    status_code: int
    body: str = ""

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


class HttpTransport:
    """Thin synchronous wrapper around an httpx client."""

    def __init__(self, timeout_ms: int = 30000, client: Optional[httpx.Client] = None):
        self.timeout = timeout_ms / 1000.0
        if client is None:
            client = httpx.Client(timeout=self.timeout)
        self._client = client

    def request(
        self,
        method: str,
        url: str,
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        """
        Perform a single HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, HEAD, DELETE)
            url: Absolute URL
            body: Request body, sent verbatim
            headers: Request headers (defaults to JSON content type)
            params: Query string parameters

        Returns:
            TransportResponse for any HTTP status

        Raises:
            ElasticTransportError: If no response was received
        """
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(
                method=method,
                url=url,
                content=body,
                headers=headers or JSON_HEADERS,
                params=params,
                timeout=self.timeout,
            )
        except httpx.TransportError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ElasticTransportError(e) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
