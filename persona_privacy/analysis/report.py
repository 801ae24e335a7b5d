"""One-call analysis: warnings, score, recommendations and risk level."""

from __future__ import annotations

from collections.abc import Sequence

from persona_privacy.analysis import analyzer, recommendations, scoring
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import logger, risk

log = logger.create_logger("PrivacyReport")


def privacy_risk_level(warnings: Sequence[privacy.PrivacyWarning]) -> risk.RiskLevel:
    """Worst severity among *warnings*, or ``"none"`` when empty."""
    return risk.risk_level(w.severity for w in warnings)


def analyze_personas(personas: Sequence[persona_models.Persona]) -> privacy.PrivacyReport:
    """Run the full analysis pass over a persona set.

    Args:
        personas: The full persona set.

    Returns:
        A :class:`PrivacyReport` built fresh for this call.

    Raises:
        InvalidPersonaInputError: If *personas* is not a list of
            :class:`Persona`.
    """
    checked = analyzer.ensure_persona_list(personas)

    log.start_timer("analysis")
    warnings = analyzer.analyze_privacy(checked)
    score = scoring.calculate_privacy_score(warnings)
    recs = recommendations.generate_recommendations(warnings)
    level = privacy_risk_level(warnings)
    log.end_timer("analysis", "Privacy report built")

    log.success(
        "Privacy report",
        {"personas": len(checked), "warnings": len(warnings), "score": score.score, "grade": score.grade, "riskLevel": level},
    )

    return privacy.PrivacyReport(
        warnings=warnings,
        score=score,
        recommendations=recs,
        risk_level=level,
    )
