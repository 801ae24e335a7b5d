"""Edit-distance string similarity.

Both the username and the notes detectors compare strings with
:func:`similarity`.  Comparison is case-sensitive; callers lowercase
first.  Cost is O(len(a) * len(b)), so callers keep the comparison
set small.
"""

from __future__ import annotations


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character insertions,
    deletions and substitutions that turn *a* into *b*.

    Uses the two-row dynamic programming formulation.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalised similarity of two strings in ``[0, 1]``.

    Identical strings (including two empty strings) score ``1.0``;
    an empty string against a non-empty one scores ``0.0``.
    Otherwise ``1 - distance / max(len(a), len(b))``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Similarity where ``1.0`` means identical.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1 - levenshtein_distance(a, b) / max(len(a), len(b))
