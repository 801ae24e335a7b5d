"""Actionable recommendations derived from detected warnings."""

from __future__ import annotations

import re
from collections.abc import Sequence

from persona_privacy.models import privacy

SEPARATE_ACCOUNTS = "Avoid using the same accounts across different personas to maintain separation."
DIVERSIFY_USERNAMES = "Use completely different username patterns across personas to avoid correlation."
DIVERSIFY_NOTES = "Avoid using similar language or content in notes across different personas."
WRITING_STYLE = "Consider using different writing styles for each persona to avoid stylometric analysis."
TIMING_PATTERNS = "Be mindful of timing patterns - avoid switching between personas at predictable intervals."
ALL_CLEAR = "Great job! Continue maintaining separation between your personas."

_QUOTED_RE = re.compile(r'"([^"]+)"')


def _remove_account_message(account: str) -> str:
    return f'Consider removing account "{account}" from all but one persona.'


def overlapping_account(warning: privacy.PrivacyWarning) -> str | None:
    """Return the account an overlap warning is about.

    Prefers the structured ``account`` field and falls back to the
    first double-quoted substring of the description, for warnings
    built without it.  ``None`` when neither is available.
    """
    if warning.account:
        return warning.account
    match = _QUOTED_RE.search(warning.description)
    return match.group(1) if match else None


def generate_recommendations(warnings: Sequence[privacy.PrivacyWarning]) -> list[str]:
    """Turn a warning list into user-facing advice.

    Order: the overlap block (a generic line, then one line per
    identifiable account), the username line, the metadata line,
    then two general hardening tips.  With no warnings the result
    is a single positive message.

    Args:
        warnings: Output of :func:`analyze_privacy`.

    Returns:
        Recommendation strings in display order.
    """
    if not warnings:
        return [ALL_CLEAR]

    recommendations: list[str] = []

    overlaps = [w for w in warnings if w.type == "account_overlap"]
    if overlaps:
        recommendations.append(SEPARATE_ACCOUNTS)
        for warning in overlaps:
            account = overlapping_account(warning)
            if account:
                recommendations.append(_remove_account_message(account))

    if any(w.type == "username_reuse" for w in warnings):
        recommendations.append(DIVERSIFY_USERNAMES)

    if any(w.type == "metadata_similarity" for w in warnings):
        recommendations.append(DIVERSIFY_NOTES)

    recommendations.extend([WRITING_STYLE, TIMING_PATTERNS])
    return recommendations
