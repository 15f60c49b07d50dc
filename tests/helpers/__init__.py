"""Test helper utilities."""

from .documents import make_document, make_operation, pet_store_document, ref

__all__ = [
    "make_document",
    "make_operation",
    "pet_store_document",
    "ref",
]
