"""
Query and aggregation building utilities for Elasticsearch.

Builders only assemble dicts. They never validate field names, types or
values, so malformed input yields a malformed query. The one place that
raises is build_search_query, which reads the inner "bool" of a bool pair
and fails with KeyError when it is missing.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union


RANGE_OPERATORS = ("gt", "gte", "lt", "lte")
BOOL_CLAUSES = ("must", "must_not", "should")
QUERY_CLAUSES = ("bool",)

Clauses = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def build_match_query(field: str, value: Any) -> Dict[str, Any]:
    """
    Build a match query for text search.

    Args:
        field: Field name
        value: Value to match, passed through untouched

    Returns:
        Match query dict
    """
    return {"match": {field: value}}


def build_term_query(field: str, value: Any) -> Dict[str, Any]:
    """
    Build a term query for exact matching.

    Args:
        field: Field name
        value: Value to match, passed through untouched

    Returns:
        Term query dict
    """
    return {"term": {field: value}}


def build_range_query(field_name: Optional[str] = None, **options: Any) -> Dict[str, Any]:
    """
    Build a range query.

    Only gt, gte, lt and lte are kept from ``options``; anything else is
    dropped. Without ``field_name`` the bounds end up keyed by None.

    Args:
        field_name: Field to constrain
        **options: Range bounds

    Returns:
        Range query dict
    """
    operators = {op: value for op, value in options.items() if op in RANGE_OPERATORS}
    return {"range": {field_name: operators}}


def build_bool_query(**options: Any) -> Dict[str, Any]:
    """
    Build a bool query combining multiple conditions.

    Args:
        **options: must, must_not and/or should clauses; other keys are dropped

    Returns:
        Bool query dict
    """
    clauses = {key: value for key, value in options.items() if key in BOOL_CLAUSES}
    return {"bool": clauses}


def build_nested_query(path: str, query: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Wrap a query so it runs against nested objects under ``path``.

    A "path" key already present in ``query`` is overwritten.
    """
    return {"nested": {**query, "path": path}}


def build_search_query(clauses: Clauses = ()) -> Dict[str, Any]:
    """
    Build the top level search body from (kind, clause) pairs.

    Only "bool" pairs are promoted: the inner "bool" of the clause lands
    under query.bool. Pairs of any other kind are ignored. A "bool" pair
    whose clause has no "bool" key raises KeyError.

    Args:
        clauses: Mapping or iterable of (kind, clause) pairs, e.g.
            [("bool", build_bool_query(must=[...]))]

    Returns:
        Search body dict
    """
    pairs = clauses.items() if isinstance(clauses, Mapping) else clauses

    query: Dict[str, Any] = {}
    for kind, clause in pairs:
        if kind in QUERY_CLAUSES:
            query[kind] = clause["bool"]

    return {"query": query}


# Aggregations

def single_field_aggregation(
    aggs: Mapping[str, Any],
    agg_type: str,
    label: str,
    terms: Any,
    child_aggs: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Add one aggregation to an accumulator of aggregations.

    Args:
        aggs: Aggregations built so far (not modified)
        agg_type: Aggregation type, e.g. "terms" or "cardinality"
        label: Name of the aggregation in the request and the response
        terms: Parameters of the aggregation, e.g. {"field": "user_id"}
        child_aggs: Sub-aggregations to nest under this one

    Returns:
        New accumulator containing ``label``
    """
    agg: Dict[str, Any] = {agg_type: terms}
    if child_aggs is not None:
        agg["aggs"] = child_aggs

    return {**aggs, label: agg}


def terms_aggregation(
    aggs: Mapping[str, Any],
    label: str,
    terms: Any,
    child_aggs: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Add a terms (bucketing) aggregation."""
    return single_field_aggregation(aggs, "terms", label, terms, child_aggs)


def cardinality_aggregation(
    aggs: Mapping[str, Any],
    label: str,
    terms: Any,
    child_aggs: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Add a cardinality (approximate distinct count) aggregation."""
    return single_field_aggregation(aggs, "cardinality", label, terms, child_aggs)


def bucket_selector_aggregation(
    aggs: Mapping[str, Any],
    label: str,
    path: Tuple[str, str],
    operator: str,
    value: Any,
) -> Dict[str, Any]:
    """
    Add a bucket_selector pipeline aggregation.

    The script is interpolated verbatim as "params.<key> <operator> <value>"
    and executed by Elasticsearch, so ``operator`` and ``value`` must come
    from trusted code, never from user input.

    Args:
        aggs: Aggregations built so far (not modified)
        label: Name of the aggregation
        path: (variable, buckets path) pair, e.g. ("count", "_count")
        operator: Comparison operator such as ">" or "=="
        value: Right hand side of the comparison

    Returns:
        New accumulator containing ``label``
    """
    key, buckets_path = path
    script = f"params.{key} {operator} {value}"

    return {
        **aggs,
        label: {
            "bucket_selector": {
                "buckets_path": {key: buckets_path},
                "script": script,
            }
        },
    }
