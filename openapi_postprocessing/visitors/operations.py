"""Operation visitor factories.

Each factory returns an operation visitor that requests deletion of the
operations it matches and leaves everything else untouched.
"""

from __future__ import annotations

import fnmatch
import logging

from ..core.models import HttpMethod, Operation, OperationVisitor, VisitResult
from ..errors import ValidationError

logger = logging.getLogger(__name__)


def drop_deprecated() -> OperationVisitor:
    """Delete operations flagged ``deprecated: true``."""

    def drop_deprecated_operation(operation: Operation, method: HttpMethod, path: str):
        if operation.get("deprecated") is True:
            logger.debug("Dropping deprecated operation %s %s", method.value.upper(), path)
            return VisitResult.DELETE
        return None

    return drop_deprecated_operation


def drop_tagged(*tags: str) -> OperationVisitor:
    """Delete operations carrying any of the given tags."""
    wanted = frozenset(tags)

    def drop_tagged_operation(operation: Operation, method: HttpMethod, path: str):
        operation_tags = operation.get("tags")
        if not isinstance(operation_tags, list):
            return None
        if any(isinstance(tag, str) and tag in wanted for tag in operation_tags):
            logger.debug("Dropping tagged operation %s %s", method.value.upper(), path)
            return VisitResult.DELETE
        return None

    return drop_tagged_operation


def drop_paths(*patterns: str) -> OperationVisitor:
    """Delete operations whose path matches any glob pattern.

    Patterns use ``fnmatch`` syntax, e.g. ``/internal/*``.
    """

    def drop_path_operation(operation: Operation, method: HttpMethod, path: str):
        if any(fnmatch.fnmatchcase(path, pattern) for pattern in patterns):
            logger.debug("Dropping operation on excluded path %s %s", method.value.upper(), path)
            return VisitResult.DELETE
        return None

    return drop_path_operation


def drop_methods(*methods: str) -> OperationVisitor:
    """Delete operations registered under the given HTTP methods.

    Raises:
        ValidationError: if a method name is not a known HTTP method
    """
    try:
        wanted = frozenset(HttpMethod.parse(method) for method in methods)
    except ValueError as exc:
        raise ValidationError(f"Unknown HTTP method in {list(methods)!r}") from exc

    def drop_method_operation(operation: Operation, method: HttpMethod, path: str):
        if HttpMethod(method) in wanted:
            logger.debug("Dropping %s operation on %s", method.value.upper(), path)
            return VisitResult.DELETE
        return None

    return drop_method_operation
