"""Pydantic models for analysis output: warnings, scores, graphs, reports."""

from __future__ import annotations

from typing import Literal

import pydantic

from persona_privacy.utils.risk import RiskLevel
from persona_privacy.utils.serialization import snake_to_camel

WarningType = Literal["account_overlap", "username_reuse", "metadata_similarity"]

Severity = Literal["low", "medium", "high"]

Grade = Literal["A+", "A", "B", "C", "D", "F"]


class PrivacyWarning(pydantic.BaseModel):
    """One detected instance of cross-persona correlation risk.

    ``description`` is display prose.  The identifying values it
    mentions are also carried as structured fields (``account`` for
    overlaps, ``usernames`` for reuse) so consumers never have to
    parse the sentence.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    type: WarningType
    description: str
    severity: Severity
    affected_personas: list[str] = pydantic.Field(default_factory=list)
    account: str | None = None
    usernames: list[str] = pydantic.Field(default_factory=list)


class PrivacyScore(pydantic.BaseModel):
    """Weighted 0-100 score, letter grade and per-type sub-scores."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    score: int
    grade: Grade
    account_isolation: int
    username_uniqueness: int
    metadata_separation: int


class GraphNode(pydantic.BaseModel):
    """A persona node in the link graph."""

    id: str
    type: Literal["persona"] = "persona"
    accounts: int
    label: str


class GraphLink(pydantic.BaseModel):
    """An edge between two personas named together in one warning."""

    source: str
    target: str
    type: WarningType
    severity: Severity


class PrivacyGraph(pydantic.BaseModel):
    """Node/link structure handed to an external renderer."""

    nodes: list[GraphNode] = pydantic.Field(default_factory=list)
    links: list[GraphLink] = pydantic.Field(default_factory=list)


class PrivacyReport(pydantic.BaseModel):
    """Everything one analysis pass produces for a persona set."""

    model_config = pydantic.ConfigDict(
        alias_generator=snake_to_camel, populate_by_name=True
    )

    warnings: list[PrivacyWarning] = pydantic.Field(default_factory=list)
    score: PrivacyScore
    recommendations: list[str] = pydantic.Field(default_factory=list)
    risk_level: RiskLevel = "none"
