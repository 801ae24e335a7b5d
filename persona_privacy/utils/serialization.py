"""camelCase alias generation for the pydantic models."""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case field name to camelCase.

    Used as the pydantic ``alias_generator`` so persona records
    keep the ``privateData`` / ``affectedPersonas`` spelling
    the client application stores.
    """
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
