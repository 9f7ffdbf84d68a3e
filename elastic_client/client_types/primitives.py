"""
Primitive type definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from elastic_client.utils.response_parser import (
    extract_source,
    has_hits,
    parse_aggregations,
    parse_hits,
    parse_total,
)


class HttpMethod(str, Enum):
    """Methods a search can be sent with."""
    GET = "get"
    POST = "post"


@dataclass
class SearchResult:
    """Normalized search response."""
    total: Any = 0
    hits: List[Dict[str, Any]] = field(default_factory=list)
    aggs: Optional[Dict[str, Any]] = None

    @classmethod
    def empty(cls) -> "SearchResult":
        """Result reported when a search did not succeed."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        """Create from an Elasticsearch search response dict."""
        if not has_hits(data):
            return cls.empty()

        return cls(
            total=parse_total(data),
            hits=parse_hits(data),
            aggs=parse_aggregations(data),
        )

    def sources(self) -> List[Dict[str, Any]]:
        """Stored documents of every hit, in hit order."""
        return [extract_source(hit) for hit in self.hits]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the {"meta": ..., "hits": ...} shape."""
        meta: Dict[str, Any] = {"total": self.total}
        if self.aggs is not None:
            meta["aggs"] = self.aggs

        return {"meta": meta, "hits": self.hits}
