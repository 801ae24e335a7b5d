"""Privacy analysis package.

The detectors live in :mod:`persona_privacy.analysis.detectors`;
this package re-exports the public operations.  String similarity
is in :mod:`persona_privacy.analysis.similarity`.
"""

from __future__ import annotations

from persona_privacy.analysis.analyzer import analyze_privacy
from persona_privacy.analysis.graph import generate_privacy_graph
from persona_privacy.analysis.recommendations import generate_recommendations
from persona_privacy.analysis.report import analyze_personas, privacy_risk_level
from persona_privacy.analysis.scoring import calculate_privacy_score, grade_for_score

__all__ = [
    "analyze_personas",
    "analyze_privacy",
    "calculate_privacy_score",
    "generate_privacy_graph",
    "generate_recommendations",
    "grade_for_score",
    "privacy_risk_level",
]
