"""Pydantic models for persona records as the client application stores them."""

from __future__ import annotations

import pydantic

from persona_privacy.utils.serialization import snake_to_camel


class PrivateData(pydantic.BaseModel):
    """Attributes that belong to exactly one persona.

    ``accounts`` entries are conventionally ``"<platform>:<handle>"``
    but no schema is enforced.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    accounts: list[str] = pydantic.Field(default_factory=list)
    signed_proofs: list[str] = pydantic.Field(default_factory=list)
    notes: str = ""


class Persona(pydantic.BaseModel):
    """A self-contained identity with its own keypair and private data."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    id: str
    public_key: str = ""
    private_data: PrivateData = pydantic.Field(default_factory=PrivateData)
    created_at: str = ""
    is_public: bool = False
    name: str = ""
