"""
Client library for Elasticsearch's REST API.
"""

from .client import ElasticClient
from .config import ElasticConfig, get_elasticsearch_config
from .exceptions import ElasticClientError, ElasticStatusError, ElasticTransportError
from .client_types import (
    AliasActionType,
    AliasTarget,
    BulkActionType,
    BulkTarget,
    HttpMethod,
    SearchResult,
)

__all__ = [
    "ElasticClient",
    "ElasticConfig",
    "get_elasticsearch_config",
    # Errors
    "ElasticClientError",
    "ElasticStatusError",
    "ElasticTransportError",
    # Types
    "AliasActionType",
    "AliasTarget",
    "BulkActionType",
    "BulkTarget",
    "HttpMethod",
    "SearchResult",
]
