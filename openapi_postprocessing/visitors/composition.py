"""Composition keyword rewrites for property schemas."""

from __future__ import annotations

from ..core.models import PropertySchema


def length1_all_of_to_one_of(property_schema: PropertySchema, property_name: str) -> None:
    """Turn a single-entry ``allOf`` into an equivalent ``oneOf``.

    Generators often wrap a lone ``$ref`` in ``allOf`` so that siblings such
    as ``description`` survive. For exactly one schema ``oneOf`` means the
    same thing and is what many client generators expect::

        {"allOf": [{"$ref": "#/components/schemas/CatDto"}]}

    becomes::

        {"oneOf": [{"$ref": "#/components/schemas/CatDto"}]}

    Schemas that already carry a ``oneOf`` are left alone.
    """
    all_of = property_schema.get("allOf")
    if not isinstance(all_of, list) or len(all_of) != 1:
        return
    if property_schema.get("oneOf") is not None:
        return

    property_schema["oneOf"] = all_of
    del property_schema["allOf"]
