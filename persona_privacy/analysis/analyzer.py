"""Privacy analyzer orchestrator.

Runs the three detectors over the full persona set and
concatenates their warnings in a fixed order: account overlap,
username reuse, metadata similarity.  There is no deduplication
across detector types.
"""

from __future__ import annotations

from collections.abc import Sequence

from persona_privacy.analysis.detectors import account_overlap, metadata_similarity, username_reuse
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import errors, logger

log = logger.create_logger("PrivacyAnalyzer")


def ensure_persona_list(personas: object) -> list[persona_models.Persona]:
    """Reject anything that is not a list or tuple of :class:`Persona`.

    Raises:
        InvalidPersonaInputError: On a non-sequence argument or a
            non-persona element.
    """
    if not isinstance(personas, (list, tuple)):
        raise errors.InvalidPersonaInputError(
            f"Expected a list of personas, got {type(personas).__name__}"
        )
    for index, item in enumerate(personas):
        if not isinstance(item, persona_models.Persona):
            raise errors.InvalidPersonaInputError(
                f"Element {index} is {type(item).__name__}, not a Persona"
            )
    return list(personas)


def analyze_privacy(personas: Sequence[persona_models.Persona]) -> list[privacy.PrivacyWarning]:
    """Detect cross-persona privacy leaks.

    A set of zero or one personas cannot leak against itself and
    returns no warnings.  The personas are only read.

    Args:
        personas: The full persona set, in a stable order.

    Returns:
        Overlap warnings, then username warnings, then metadata
        warnings.

    Raises:
        InvalidPersonaInputError: If *personas* is not a list of
            :class:`Persona`.
    """
    checked = ensure_persona_list(personas)
    if len(checked) <= 1:
        return []

    overlaps = account_overlap.detect(checked)
    reuse = username_reuse.detect(checked)
    metadata = metadata_similarity.detect(checked)

    log.info(
        "Privacy analysis complete",
        {
            "personas": len(checked),
            "accountOverlaps": len(overlaps),
            "usernameReuse": len(reuse),
            "metadataSimilarity": len(metadata),
        },
    )
    return [*overlaps, *reuse, *metadata]
