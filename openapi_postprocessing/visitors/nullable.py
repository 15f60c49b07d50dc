"""Nullability rewrites for property schemas."""

from __future__ import annotations

from ..core.models import PropertySchema


def move_nullable_to_one_of(property_schema: PropertySchema, property_name: str) -> None:
    """Express ``nullable`` + ``oneOf`` as an extra ``oneOf`` branch.

    Some client generators cannot combine the two keywords. The flag is
    dropped and ``{"nullable": true}`` is appended to the branches::

        {"nullable": true, "oneOf": [{"$ref": "#/components/schemas/CatDto"}]}

    becomes::

        {"oneOf": [{"$ref": "#/components/schemas/CatDto"}, {"nullable": true}]}
    """
    one_of = property_schema.get("oneOf")
    if not isinstance(one_of, list) or not one_of:
        return
    if not property_schema.get("nullable"):
        return

    del property_schema["nullable"]
    one_of.append({"nullable": True})
