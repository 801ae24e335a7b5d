"""Username pattern detection.

Extracts the handle from every ``platform:handle`` account,
lowercases it, and flags pairs of distinct handles that are close
in edit distance, such as ``alice123`` and ``alice124``.  Identical
handles are not compared against each other here; a verbatim
shared account is the overlap detector's job.
"""

from __future__ import annotations

from persona_privacy.analysis.similarity import similarity
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import logger

log = logger.create_logger("Detect-UsernameReuse")

SEVERITY: privacy.Severity = "medium"

# A pair must score strictly above this to be reported.
SIMILARITY_THRESHOLD = 0.7


def extract_username(account: str) -> str | None:
    """Return the lowercased handle of a ``platform:handle`` account.

    Accounts with no colon, or with more than one, yield ``None``.
    """
    parts = account.split(":")
    if len(parts) != 2:
        return None
    return parts[1].lower()


def describe(username_a: str, username_b: str) -> str:
    """Render the display sentence for two similar usernames."""
    return f'Similar usernames detected: "{username_a}" and "{username_b}"'


def detect(personas: list[persona_models.Persona]) -> list[privacy.PrivacyWarning]:
    """Find pairs of distinct, similar usernames across the persona set.

    Args:
        personas: The full persona set.

    Returns:
        One medium-severity warning per similar username pair,
        ordered by first appearance of the usernames.
    """
    owners: dict[str, list[str]] = {}
    skipped = 0
    for persona in personas:
        for account in persona.private_data.accounts:
            username = extract_username(account)
            if username is None:
                skipped += 1
                continue
            owners.setdefault(username, []).append(persona.id)

    usernames = list(owners)
    warnings: list[privacy.PrivacyWarning] = []
    for i, username_a in enumerate(usernames):
        for username_b in usernames[i + 1 :]:
            score = similarity(username_a, username_b)
            if score <= SIMILARITY_THRESHOLD:
                continue
            affected = list(dict.fromkeys(owners[username_a] + owners[username_b]))
            warnings.append(
                privacy.PrivacyWarning(
                    type="username_reuse",
                    description=describe(username_a, username_b),
                    severity=SEVERITY,
                    affected_personas=affected,
                    usernames=[username_a, username_b],
                )
            )

    log.debug(
        "Username pattern scan",
        {"usernames": len(usernames), "skippedAccounts": skipped, "matches": len(warnings)},
    )
    return warnings
