"""
Builders for bulk and alias action descriptors.
"""

import json
from typing import Any, Dict, Iterable, List, Union

from elastic_client.client_types.actions import (
    AliasActionType,
    AliasTarget,
    BulkActionType,
    BulkTarget,
)


def bulk_action(
    action: Union[BulkActionType, str],
    payload: Any,
    target: BulkTarget,
    index_prefix: str = "",
) -> List[Dict[str, Any]]:
    """
    Build the lines of one bulk operation.

    Args:
        action: index, update or delete
        payload: The document for index, the partial document for update,
            the document id for delete
        target: Index, document type and (optional) id of the operation
        index_prefix: Prepended to ``target.index_name``

    Returns:
        [header, document] for index and update, [header] for delete
    """
    action = BulkActionType(action)
    header: Dict[str, Any] = {
        "_index": f"{index_prefix}{target.index_name}",
        "_type": target.doc_type,
    }

    if action is BulkActionType.DELETE:
        header["_id"] = payload
        return [{action.value: header}]

    if action is BulkActionType.UPDATE:
        header["_id"] = target.id
        return [{action.value: header}, {"doc": payload}]

    if target.id is not None:
        header["_id"] = target.id
    return [{action.value: header}, payload]


def alias_action(
    action: Union[AliasActionType, str],
    target: AliasTarget,
    index_prefix: str = "",
) -> Dict[str, Dict[str, str]]:
    """
    Build one entry of an _aliases actions list.

    Args:
        action: add_alias or remove_alias
        target: Index and alias the action applies to
        index_prefix: Prepended to ``target.index_name``

    Returns:
        {"add": {...}} or {"remove": {...}}
    """
    action = AliasActionType(action)
    return {
        action.wire_key: {
            "index": f"{index_prefix}{target.index_name}",
            "alias": target.alias_name,
        }
    }


def flatten_actions(actions: Iterable[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Concatenate bulk_action() results into the flat list of bulk lines."""
    return [line for action in actions for line in action]


def to_ndjson(actions: Iterable[Any]) -> str:
    """
    Serialize actions as newline delimited JSON.

    Each element becomes exactly one line and every line, including the
    last, ends with a newline.
    """
    return "".join(f"{json.dumps(action)}\n" for action in actions)
