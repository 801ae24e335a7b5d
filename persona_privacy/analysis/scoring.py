"""Privacy score calculation.

Each warning type has its own sub-score that starts at 100 and
loses a fixed penalty per warning of that type (floored at 0).
The overall score is a weighted blend of the three:

==================== ======= ========
Sub-score            Penalty Weight
==================== ======= ========
account isolation    50      0.5
username uniqueness  25      0.3
metadata separation  15      0.2
==================== ======= ========

Raw account overlap is the most damaging leak class; stylistic
similarity in notes is the weakest signal.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from persona_privacy.models import privacy
from persona_privacy.utils import logger

log = logger.create_logger("PrivacyScore")

_OVERLAP_PENALTY = 50
_REUSE_PENALTY = 25
_METADATA_PENALTY = 15

# Weights in tenths so the blend stays in integer arithmetic.
_ISOLATION_WEIGHT = 5
_UNIQUENESS_WEIGHT = 3
_SEPARATION_WEIGHT = 2

# (exclusive upper bound, grade), checked in order.
_GRADE_THRESHOLDS: list[tuple[int, privacy.Grade]] = [
    (60, "F"),
    (70, "D"),
    (80, "C"),
    (90, "B"),
    (95, "A"),
]


def _sub_score(count: int, penalty: int) -> int:
    return max(0, 100 - count * penalty)


def grade_for_score(score: int) -> privacy.Grade:
    """Map a 0-100 score to a letter grade.

    Boundaries belong to the higher grade: 60 is a D, 95 is an A+.
    """
    for upper, grade in _GRADE_THRESHOLDS:
        if score < upper:
            return grade
    return "A+"


def calculate_privacy_score(warnings: Iterable[privacy.PrivacyWarning]) -> privacy.PrivacyScore:
    """Derive the weighted score and grade from a warning list.

    Warnings are counted by ``type``; severity does not enter
    the calculation.  The weighted blend is rounded half up.

    Args:
        warnings: Output of :func:`analyze_privacy`.

    Returns:
        A :class:`PrivacyScore` with the overall score, grade and
        three sub-scores.
    """
    counts = Counter(w.type for w in warnings)

    account_isolation = _sub_score(counts["account_overlap"], _OVERLAP_PENALTY)
    username_uniqueness = _sub_score(counts["username_reuse"], _REUSE_PENALTY)
    metadata_separation = _sub_score(counts["metadata_similarity"], _METADATA_PENALTY)

    weighted_tenths = (
        account_isolation * _ISOLATION_WEIGHT
        + username_uniqueness * _UNIQUENESS_WEIGHT
        + metadata_separation * _SEPARATION_WEIGHT
    )
    score = (weighted_tenths + 5) // 10
    grade = grade_for_score(score)

    log.debug(
        "Privacy score calculated",
        {
            "score": score,
            "grade": grade,
            "accountIsolation": account_isolation,
            "usernameUniqueness": username_uniqueness,
            "metadataSeparation": metadata_separation,
        },
    )

    return privacy.PrivacyScore(
        score=score,
        grade=grade,
        account_isolation=account_isolation,
        username_uniqueness=username_uniqueness,
        metadata_separation=metadata_separation,
    )
