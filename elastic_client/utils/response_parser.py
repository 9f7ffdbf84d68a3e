"""
Helpers for picking apart raw Elasticsearch responses.
"""

from typing import Any, Dict, List, Optional


def has_hits(response: Dict[str, Any]) -> bool:
    """True when the response carries a hits envelope with total and hits."""
    envelope = response.get("hits")
    return isinstance(envelope, dict) and "total" in envelope and "hits" in envelope


def parse_hits(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Return the matched documents of a raw search response.

    Args:
        response: Decoded _search response

    Returns:
        hits.hits, or [] when the response has no hits envelope
    """
    if not has_hits(response):
        return []
    return response["hits"]["hits"]


def parse_total(response: Dict[str, Any]) -> Any:
    """Return hits.total as reported by the server (int or {"value": ...})."""
    if not has_hits(response):
        return 0
    return response["hits"]["total"]


def parse_aggregations(response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the aggregations section, or None when the search had none."""
    return response.get("aggregations")


def extract_source(hit: Dict[str, Any]) -> Dict[str, Any]:
    """Return the stored document of a single hit."""
    return hit["_source"]
