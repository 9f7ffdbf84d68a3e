"""
Elasticsearch REST client.

Wraps index management, document indexing, bulk submission, alias
management and search behind plain method calls. Every method that writes
returns the decoded JSON body on HTTP 200 and raises otherwise:

- ElasticStatusError for any other HTTP status
- ElasticTransportError when no response was received

Existence checks, searches and alias lookups never raise; they report
failure as False, an empty SearchResult or an empty list respectively.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from elastic_client.client_types import (
    AliasActionType,
    AliasTarget,
    BulkActionType,
    BulkTarget,
    HttpMethod,
    SearchResult,
)
from elastic_client.config import ElasticConfig, get_elasticsearch_config
from elastic_client.exceptions import ElasticStatusError, ElasticTransportError
from elastic_client.utils.action_builder import alias_action, bulk_action, to_ndjson
from elastic_client.utils.connection import (
    JSON_HEADERS,
    NDJSON_HEADERS,
    HttpTransport,
    TransportResponse,
)


logger = logging.getLogger(__name__)


def _encode(body: Any) -> Optional[str]:
    """Strings are sent verbatim, anything else is JSON encoded."""
    if body is None or isinstance(body, str):
        return body
    return json.dumps(body)


class ElasticClient:
    """Client for a single Elasticsearch cluster."""

    def __init__(
        self,
        config: Optional[ElasticConfig] = None,
        transport: Optional[HttpTransport] = None,
    ):
        self.config = config or get_elasticsearch_config()
        self.transport = transport or HttpTransport(timeout_ms=self.config.timeout_ms)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ElasticClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ========== URLS ==========

    def host_url(self) -> str:
        return self.config.host_url

    def index_url(self, index_name: str) -> str:
        return f"{self.host_url()}/{self.config.index_name(index_name)}"

    def url_for(self, index_name: str, doc_type: str, id: Optional[Any] = None) -> str:
        url = f"{self.index_url(index_name)}/{doc_type}"
        if id is not None:
            url = f"{url}/{id}"
        return url

    # ========== REQUEST HANDLING ==========

    def _request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        return self.transport.request(
            method,
            url,
            body=_encode(body),
            headers=headers or JSON_HEADERS,
            params=params,
        )

    def _send(self, method: str, url: str, body: Any = None, **kwargs: Any) -> Any:
        """
        Perform a request and decode a 200 response.

        Raises:
            ElasticStatusError: If the status is not 200
            ElasticTransportError: If no response was received
        """
        response = self._request(method, url, body, **kwargs)
        if response.status_code != 200:
            raise ElasticStatusError(response.status_code)
        return response.json()

    def _exists(self, url: str) -> bool:
        try:
            return self._request("HEAD", url).status_code == 200
        except ElasticTransportError as e:
            logger.warning("Existence check on %s failed: %s", url, e.reason)
            return False

    # ========== INDICES AND MAPPINGS ==========

    def index_exists(self, index_name: str) -> bool:
        """True iff HEAD on the index answers 200; any failure counts as False."""
        return self._exists(self.index_url(index_name))

    def mapping_exists(self, index_name: str, mapping_name: str) -> bool:
        """True iff HEAD on the mapping answers 200; any failure counts as False."""
        return self._exists(f"{self.index_url(index_name)}/_mapping/{mapping_name}")

    def add_index(self, index_name: str, mapping: Any = "") -> Any:
        """
        Create an index.

        Args:
            index_name: Logical index name
            mapping: Index body (settings and mappings) as a JSON string or
                a dict; empty creates the index with server defaults

        Returns:
            Decoded acknowledgement
        """
        return self._send("PUT", self.index_url(index_name), mapping)

    def add_mapping(self, index_name: str, label: str, mapping: Any) -> Any:
        """Put the mapping ``label`` on an existing index."""
        return self._send("PUT", f"{self.index_url(index_name)}/_mapping/{label}", mapping)

    # ========== DOCUMENTS ==========

    def index_document(self, index_name: str, document: Any, doc_type: str) -> Any:
        """Index one document, letting the server assign its id."""
        return self._send("POST", self.url_for(index_name, doc_type), document)

    def delete(self, index_name: str, doc_type: str, id: Any) -> Any:
        """Delete one document by id."""
        return self._send("DELETE", self.url_for(index_name, doc_type, id))

    def delete_by_query(
        self,
        index_name: str,
        doc_type: str,
        query: Any,
        refresh: bool = True,
    ) -> Any:
        """
        Delete every document matching ``query``.

        Args:
            index_name: Logical index name
            doc_type: Document type
            query: Search body, e.g. build_search_query(...)
            refresh: Refresh the index so the deletion is visible immediately

        Returns:
            Decoded delete-by-query report
        """
        url = f"{self.url_for(index_name, doc_type)}/_delete_by_query"
        if refresh:
            url = f"{url}?refresh"
        return self._send("POST", url, query)

    def search(
        self,
        method: Union[HttpMethod, str],
        index_name: str,
        doc_type: str,
        query: Any,
    ) -> SearchResult:
        """
        Search an index.

        With "get" the query dict is sent as query string parameters
        (e.g. {"q": "title:python"}); with "post" it is sent as the JSON body.

        Any failure (non-200 status or transport error) yields an empty
        SearchResult, which is indistinguishable from a search with no match.

        Args:
            method: "get" or "post"
            index_name: Logical index name
            doc_type: Document type
            query: Query string parameters or search body

        Returns:
            SearchResult with total, hits and aggregations

        Raises:
            ValueError: If ``method`` is neither get nor post
        """
        method = HttpMethod(method.lower())
        url = f"{self.url_for(index_name, doc_type)}/_search"

        try:
            if method is HttpMethod.GET:
                response = self._request("GET", url, params=query)
            else:
                response = self._request("POST", url, query)
        except ElasticTransportError as e:
            logger.warning("Search on %s failed: %s", url, e.reason)
            return SearchResult.empty()

        if response.status_code != 200:
            logger.warning("Search on %s returned HTTP %d", url, response.status_code)
            return SearchResult.empty()

        return SearchResult.from_dict(response.json())

    # ========== BULK ==========

    def bulk_action(
        self,
        action: Union[BulkActionType, str],
        payload: Any,
        index_name: str,
        doc_type: str,
        id: Optional[Any] = None,
    ) -> List[Dict[str, Any]]:
        """Build a bulk operation against a logical index name."""
        target = BulkTarget(index_name=index_name, doc_type=doc_type, id=id)
        return bulk_action(action, payload, target, index_prefix=self.config.index_prefix)

    def do_bulk_actions(self, actions: Union[Iterable[Any], str], refresh: bool = True) -> Any:
        """
        Submit bulk operations.

        Args:
            actions: Either a list of bulk lines (each serialized as one
                NDJSON line; see flatten_actions) or a ready NDJSON payload
            refresh: Refresh affected indices so changes are searchable
                immediately

        Returns:
            Decoded bulk response, with one item per operation
        """
        payload = actions if isinstance(actions, str) else to_ndjson(actions)

        url = f"{self.host_url()}/_bulk"
        if refresh:
            url = f"{url}?refresh"
        return self._send("POST", url, payload, headers=NDJSON_HEADERS)

    # ========== ALIASES ==========

    def do_alias_actions(self, actions: List[Dict[str, Any]]) -> Any:
        """Apply a list of alias actions in a single atomic request."""
        return self._send("POST", f"{self.host_url()}/_aliases", {"actions": list(actions)})

    def fetch_alias_indices(self, alias_name: str) -> List[str]:
        """
        List the indices currently holding ``alias_name``.

        Names are returned as the server reports them (prefix included).
        Any failure yields [], the same as an alias held by no index.
        """
        url = f"{self.host_url()}/*/_alias/{alias_name}"

        try:
            response = self._request("GET", url)
        except ElasticTransportError as e:
            logger.warning("Alias lookup for %s failed: %s", alias_name, e.reason)
            return []

        if response.status_code != 200:
            logger.warning("Alias lookup for %s returned HTTP %d", alias_name, response.status_code)
            return []

        return list(response.json().keys())

    def alias(self, alias_name: str, index_name: str, re_alias: bool = False) -> Any:
        """
        Point ``alias_name`` at ``index_name``.

        With ``re_alias`` the alias is first removed from every index that
        currently holds it, all in the same request. Removals come first,
        the addition last. The lookup and the update are separate round
        trips, so a concurrent alias change in between is not detected.

        Args:
            alias_name: Alias to point
            index_name: Logical name of the new target index
            re_alias: Move the alias instead of adding another target

        Returns:
            Decoded _aliases acknowledgement
        """
        add = alias_action(
            AliasActionType.ADD_ALIAS,
            AliasTarget(index_name=index_name, alias_name=alias_name),
            index_prefix=self.config.index_prefix,
        )

        removals = []
        if re_alias:
            removals = [
                alias_action(
                    AliasActionType.REMOVE_ALIAS,
                    AliasTarget(index_name=current, alias_name=alias_name),
                )
                for current in self.fetch_alias_indices(alias_name)
            ]

        return self.do_alias_actions(removals + [add])
