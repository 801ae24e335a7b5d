"""Metadata similarity detection.

Compares the free-text notes of every persona pair.  Near-identical
notes suggest copy-pasted boilerplate or a shared writing style.
"""

from __future__ import annotations

from persona_privacy.analysis.similarity import similarity
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import logger

log = logger.create_logger("Detect-Metadata")

SEVERITY: privacy.Severity = "low"

# A pair must score strictly above this to be reported.
SIMILARITY_THRESHOLD = 0.5

DESCRIPTION = "Similar notes detected between personas"


def detect(personas: list[persona_models.Persona]) -> list[privacy.PrivacyWarning]:
    """Flag each persona pair whose notes are more than 50% similar.

    Pairs where either side has empty notes are skipped.

    Args:
        personas: The full persona set.

    Returns:
        At most one low-severity warning per ``(i, j)`` pair with
        ``i < j`` in input order.
    """
    notes = [p.private_data.notes.lower() for p in personas]
    warnings: list[privacy.PrivacyWarning] = []

    for i, persona_a in enumerate(personas):
        for j in range(i + 1, len(personas)):
            if not notes[i] or not notes[j]:
                continue
            if similarity(notes[i], notes[j]) <= SIMILARITY_THRESHOLD:
                continue
            warnings.append(
                privacy.PrivacyWarning(
                    type="metadata_similarity",
                    description=DESCRIPTION,
                    severity=SEVERITY,
                    affected_personas=[persona_a.id, personas[j].id],
                )
            )

    log.debug("Metadata scan", {"personas": len(personas), "matches": len(warnings)})
    return warnings
