"""
Type definitions for the Elasticsearch client.
"""

from .actions import (
    AliasActionType,
    AliasTarget,
    BulkActionType,
    BulkTarget,
)

from .primitives import (
    HttpMethod,
    SearchResult,
)

__all__ = [
    # Actions
    "AliasActionType",
    "AliasTarget",
    "BulkActionType",
    "BulkTarget",
    # Primitives
    "HttpMethod",
    "SearchResult",
]
