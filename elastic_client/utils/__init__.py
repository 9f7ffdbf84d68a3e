"""
Utility functions for the Elasticsearch client.
"""

from .connection import HttpTransport, TransportResponse
from .query_builder import (
    build_match_query,
    build_term_query,
    build_range_query,
    build_bool_query,
    build_nested_query,
    build_search_query,
    single_field_aggregation,
    terms_aggregation,
    cardinality_aggregation,
    bucket_selector_aggregation,
)
from .action_builder import (
    bulk_action,
    alias_action,
    flatten_actions,
    to_ndjson,
)
from .response_parser import (
    has_hits,
    parse_hits,
    parse_total,
    parse_aggregations,
    extract_source,
)

__all__ = [
    # Transport
    "HttpTransport",
    "TransportResponse",
    # Query building
    "build_match_query",
    "build_term_query",
    "build_range_query",
    "build_bool_query",
    "build_nested_query",
    "build_search_query",
    # Aggregations
    "single_field_aggregation",
    "terms_aggregation",
    "cardinality_aggregation",
    "bucket_selector_aggregation",
    # Actions
    "bulk_action",
    "alias_action",
    "flatten_actions",
    "to_ndjson",
    # Response parsing
    "has_hits",
    "parse_hits",
    "parse_total",
    "parse_aggregations",
    "extract_source",
]
