"""Overall risk level derived from warning severities."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

RiskLevel = Literal["none", "low", "medium", "high"]


def risk_level(severities: Iterable[str]) -> RiskLevel:
    """Map a collection of warning severities to one risk level.

    The worst severity wins; an empty collection is ``"none"``.
    """
    seen = set(severities)
    if not seen:
        return "none"
    if "high" in seen:
        return "high"
    if "medium" in seen:
        return "medium"
    return "low"
