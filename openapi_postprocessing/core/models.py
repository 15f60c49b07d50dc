"""Visitor contracts and document node types.

Documents are the plain ``dict`` graphs produced by OpenAPI generators. The
aliases below only name the parts of that graph the traversal engine touches;
nodes are never wrapped or copied.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableMapping, Optional, Union


class HttpMethod(str, Enum):
    """HTTP methods that may hold an operation on a path entry.

    Declaration order is the order the traversal engine checks method slots.
    """
    DELETE = "delete"
    GET = "get"
    HEAD = "head"
    OPTIONS = "options"
    PATCH = "patch"
    POST = "post"
    PUT = "put"

    @classmethod
    def parse(cls, value: str) -> "HttpMethod":
        """Resolve a method name case-insensitively.

        Raises:
            ValueError: if the name is not a known method
        """
        return cls(value.strip().lower())


class VisitResult(str, Enum):
    """Outcome an operation visitor may return.

    Returning ``None`` means no action. ``DELETE`` compares equal to the
    string ``"delete"``, so visitors may return either.
    """
    DELETE = "delete"


Document = MutableMapping[str, Any]
PathEntry = MutableMapping[str, Any]
Operation = MutableMapping[str, Any]
PropertySchema = MutableMapping[str, Any]

OperationVisitor = Callable[
    [Operation, HttpMethod, str],
    Optional[Union[VisitResult, str]],
]
PropertyVisitor = Callable[[PropertySchema, str], None]


def is_reference(node: Any) -> bool:
    """Check whether a node is a ``$ref`` marker."""
    return isinstance(node, MutableMapping) and "$ref" in node


def visitor_name(visitor: Callable[..., Any]) -> str:
    """Best-effort display name for a visitor callable."""
    return getattr(visitor, "__name__", None) or visitor.__class__.__name__
