"""Document traversal engine.

The engine walks a generated OpenAPI document and applies ordered visitor
pipelines to its nodes, mutating the document in place:

1. Operation phase - every (path, method) operation is handed to the
   operation visitors. A visitor may request deletion; when the last
   operation of a path is deleted the path entry is removed too.
2. Property phase - every property of every component schema is handed to
   the property visitors, which rewrite it in place.

Visitor exceptions are not caught. A failing visitor aborts the traversal and
leaves earlier mutations in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Iterable, Sequence

from .models import (
    Document,
    HttpMethod,
    OperationVisitor,
    PathEntry,
    PropertyVisitor,
    VisitResult,
    is_reference,
)

logger = logging.getLogger(__name__)


def traverse_document(
    document: Document,
    *,
    operation_visitors: Sequence[OperationVisitor] = (),
    property_visitors: Sequence[PropertyVisitor] = (),
) -> None:
    """Apply visitors to a document in place.

    Visitors run in registration order. An empty visitor list skips its
    phase entirely, so calling with no visitors leaves the document untouched.

    Args:
        document: OpenAPI document to mutate
        operation_visitors: Called as ``visitor(operation, method, path)``;
            returning ``"delete"`` removes the operation
        property_visitors: Called as ``visitor(property_schema, name)`` for
            each property of each component schema
    """
    if operation_visitors:
        _visit_operations(document, operation_visitors)

    if property_visitors:
        _visit_properties(document, property_visitors)


def _visit_operations(document: Document, visitors: Sequence[OperationVisitor]) -> None:
    paths = document.get("paths")
    if not isinstance(paths, MutableMapping):
        return

    removed_paths = 0
    # Snapshot keys: path entries may be deleted while iterating.
    for path in list(paths):
        entry = paths[path]
        if not isinstance(entry, MutableMapping):
            continue

        if _visit_path_entry(entry, path, visitors) and _is_empty_path_entry(entry):
            del paths[path]
            removed_paths += 1
            logger.debug("Removed path %s: no operations left", path)

    logger.debug("Operation phase done: %d path(s) removed", removed_paths)


def _visit_path_entry(
    entry: PathEntry,
    path: str,
    visitors: Sequence[OperationVisitor],
) -> bool:
    """Run the operation visitors over one path entry.

    Returns:
        True if at least one operation was deleted
    """
    deleted = False
    for method in HttpMethod:
        operation = entry.get(method.value)
        if not isinstance(operation, MutableMapping):
            continue

        for visitor in visitors:
            if visitor(operation, method, path) == VisitResult.DELETE:
                del entry[method.value]
                deleted = True
                logger.debug("Removed operation %s %s", method.value.upper(), path)
                break

    return deleted


def _is_empty_path_entry(entry: PathEntry) -> bool:
    # Reference entries are opaque and never swept.
    if is_reference(entry):
        return False
    return all(entry.get(method.value) is None for method in HttpMethod)


def _visit_properties(document: Document, visitors: Sequence[PropertyVisitor]) -> None:
    visited = 0
    for schema in _component_schemas(document):
        properties = schema.get("properties")
        if not isinstance(properties, Mapping):
            continue

        for name, property_schema in properties.items():
            if not isinstance(property_schema, MutableMapping):
                continue
            for visitor in visitors:
                visitor(property_schema, name)
            visited += 1

    logger.debug("Property phase done: %d properties visited", visited)


def _component_schemas(document: Document) -> Iterable[MutableMapping]:
    components = document.get("components")
    if not isinstance(components, Mapping):
        return ()
    schemas = components.get("schemas")
    if not isinstance(schemas, Mapping):
        return ()
    return [schema for schema in schemas.values() if isinstance(schema, MutableMapping)]
