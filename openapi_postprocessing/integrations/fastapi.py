"""Post-process the OpenAPI schema FastAPI generates for an application."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from fastapi import FastAPI

from ..core.models import OperationVisitor, PropertyVisitor
from ..core.pipeline import PostProcessor
from ..errors import ValidationError

logger = logging.getLogger(__name__)


def install_postprocessing(
    app: FastAPI,
    post_processor: Optional[PostProcessor] = None,
    *,
    operation_visitors: Iterable[OperationVisitor] = (),
    property_visitors: Iterable[PropertyVisitor] = (),
) -> PostProcessor:
    """Replace ``app.openapi`` with a post-processing version.

    The schema is still built by FastAPI on first request, then run through
    the visitors once and cached in ``app.openapi_schema``. Both ``/docs``
    and ``/openapi.json`` serve the processed schema.

    Args:
        app: FastAPI application
        post_processor: Ready-made processor; mutually exclusive with the
            visitor lists
        operation_visitors: Operation visitors for a new processor
        property_visitors: Property visitors for a new processor

    Returns:
        The processor that was installed
    """
    operation_visitors = tuple(operation_visitors)
    property_visitors = tuple(property_visitors)
    if post_processor is not None and (operation_visitors or property_visitors):
        raise ValidationError("Pass either a post_processor or visitor lists, not both")
    if post_processor is None:
        post_processor = PostProcessor(operation_visitors, property_visitors)

    build_schema = app.openapi

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = build_schema()
        try:
            post_processor.process(schema)
        except Exception:
            # FastAPI cached the raw schema; drop it so the next call rebuilds.
            app.openapi_schema = None
            raise
        logger.debug("Post-processed OpenAPI schema for %s with %r", app.title, post_processor)
        app.openapi_schema = schema
        return schema

    app.openapi = openapi  # type: ignore[method-assign]
    app.openapi_schema = None
    return post_processor
