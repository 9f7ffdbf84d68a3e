"""
Bulk and alias action type definitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class BulkActionType(str, Enum):
    """Operations accepted by the _bulk endpoint."""
    INDEX = "index"
    UPDATE = "update"
    DELETE = "delete"


class AliasActionType(str, Enum):
    """Operations accepted by the _aliases endpoint."""
    ADD_ALIAS = "add_alias"
    REMOVE_ALIAS = "remove_alias"

    @property
    def wire_key(self) -> str:
        return "add" if self is AliasActionType.ADD_ALIAS else "remove"


@dataclass
class BulkTarget:
    """Where a bulk operation applies."""
    index_name: str
    doc_type: str
    id: Optional[Any] = None


@dataclass
class AliasTarget:
    """Index and alias an alias action applies to."""
    index_name: str
    alias_name: str
