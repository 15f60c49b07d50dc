"""Named built-in visitors and post-processor assembly."""

from __future__ import annotations

from typing import Iterable

from .core.models import OperationVisitor, PropertyVisitor
from .core.pipeline import PostProcessor
from .errors import ValidationError
from .settings import Settings
from .visitors import (
    drop_deprecated,
    drop_methods,
    drop_paths,
    drop_tagged,
    length1_all_of_to_one_of,
    move_nullable_to_one_of,
)

PROPERTY_VISITORS: dict[str, PropertyVisitor] = {
    "length1-all-of-to-one-of": length1_all_of_to_one_of,
    "move-nullable-to-one-of": move_nullable_to_one_of,
}


def resolve_property_visitors(names: Iterable[str]) -> list[PropertyVisitor]:
    """Look up built-in property visitors by name, keeping the given order."""
    visitors = []
    for name in names:
        visitor = PROPERTY_VISITORS.get(name)
        if visitor is None:
            known = ", ".join(sorted(PROPERTY_VISITORS))
            raise ValidationError(f"Unknown property visitor: {name!r} (known: {known})")
        visitors.append(visitor)
    return visitors


def build_operation_visitors(settings: Settings) -> list[OperationVisitor]:
    visitors = []
    if settings.drop_deprecated:
        visitors.append(drop_deprecated())
    if settings.drop_tags:
        visitors.append(drop_tagged(*settings.drop_tags))
    if settings.drop_paths:
        visitors.append(drop_paths(*settings.drop_paths))
    if settings.drop_methods:
        visitors.append(drop_methods(*settings.drop_methods))
    return visitors


def build_post_processor(settings: Settings) -> PostProcessor:
    """Assemble a post-processor from settings."""
    return PostProcessor(
        operation_visitors=build_operation_visitors(settings),
        property_visitors=resolve_property_visitors(settings.property_visitors),
    )
