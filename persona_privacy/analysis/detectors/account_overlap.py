"""Account overlap detection.

Flags any connected account string that appears verbatim in more
than one persona.  Comparison is exact: no case folding, no
whitespace trimming.
"""

from __future__ import annotations

from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import logger

log = logger.create_logger("Detect-AccountOverlap")

SEVERITY: privacy.Severity = "high"


def describe(account: str) -> str:
    """Render the display sentence for an overlapping *account*."""
    return f'Account "{account}" is used in multiple personas'


def detect(personas: list[persona_models.Persona]) -> list[privacy.PrivacyWarning]:
    """Find accounts shared by two or more distinct personas.

    Personas are visited in input order, so ``affected_personas``
    lists ids in the order they were first seen.  A persona that
    lists the same account twice is counted once.

    Args:
        personas: The full persona set.

    Returns:
        One high-severity warning per shared account, in the
        order each account was first encountered.
    """
    owners: dict[str, list[str]] = {}
    for persona in personas:
        for account in persona.private_data.accounts:
            ids = owners.setdefault(account, [])
            if persona.id not in ids:
                ids.append(persona.id)

    warnings = [
        privacy.PrivacyWarning(
            type="account_overlap",
            description=describe(account),
            severity=SEVERITY,
            affected_personas=list(ids),
            account=account,
        )
        for account, ids in owners.items()
        if len(ids) > 1
    ]

    log.debug(
        "Account overlap scan",
        {"distinctAccounts": len(owners), "overlaps": len(warnings)},
    )
    return warnings
