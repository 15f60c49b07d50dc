"""Reusable post-processing pipeline."""

from __future__ import annotations

from typing import Iterable

from .models import Document, OperationVisitor, PropertyVisitor, visitor_name
from .traversal import traverse_document


class PostProcessor:
    """Applies a fixed set of visitors to documents.

    The visitor lists are frozen at construction, so one processor can be
    shared and applied to any number of documents. Each call to ``process``
    is one independent traversal.
    """

    def __init__(
        self,
        operation_visitors: Iterable[OperationVisitor] = (),
        property_visitors: Iterable[PropertyVisitor] = (),
    ):
        self.operation_visitors = tuple(operation_visitors)
        self.property_visitors = tuple(property_visitors)

    @property
    def is_noop(self) -> bool:
        return not self.operation_visitors and not self.property_visitors

    def process(self, document: Document) -> Document:
        """Post-process a document in place.

        Args:
            document: OpenAPI document to mutate

        Returns:
            The same document object, for chaining
        """
        traverse_document(
            document,
            operation_visitors=self.operation_visitors,
            property_visitors=self.property_visitors,
        )
        return document

    def __repr__(self) -> str:
        operations = ", ".join(visitor_name(v) for v in self.operation_visitors)
        properties = ", ".join(visitor_name(v) for v in self.property_visitors)
        return f"PostProcessor(operations=[{operations}], properties=[{properties}])"
