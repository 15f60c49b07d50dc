"""Post-processing for generated OpenAPI documents."""

from .core.models import HttpMethod, OperationVisitor, PropertyVisitor, VisitResult
from .core.pipeline import PostProcessor
from .core.traversal import traverse_document

__version__ = "0.1.0"

__all__ = [
    "HttpMethod",
    "OperationVisitor",
    "PropertyVisitor",
    "PostProcessor",
    "VisitResult",
    "traverse_document",
    "__version__",
]
