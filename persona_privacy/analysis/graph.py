"""Persona link graph for external visualisation.

Pure data transform: one node per persona, one link per persona
pair named together in a warning.  Styling and layout belong to
the renderer.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from persona_privacy.analysis import analyzer
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy

_LABEL_LENGTH = 8


def generate_privacy_graph(
    personas: Sequence[persona_models.Persona],
    warnings: Sequence[privacy.PrivacyWarning],
) -> privacy.PrivacyGraph:
    """Build the node/link graph for *personas* and *warnings*.

    A warning naming n personas contributes n*(n-1)/2 links, one
    per ``(i, j)`` pair with ``i < j`` in ``affected_personas``
    order.  Parallel links from different warnings are kept.

    Raises:
        InvalidPersonaInputError: If *personas* is not a list of
            :class:`Persona`.
    """
    checked = analyzer.ensure_persona_list(personas)

    nodes = [
        privacy.GraphNode(
            id=p.id,
            accounts=len(p.private_data.accounts),
            label=p.id[:_LABEL_LENGTH],
        )
        for p in checked
    ]

    links = [
        privacy.GraphLink(
            source=source,
            target=target,
            type=warning.type,
            severity=warning.severity,
        )
        for warning in warnings
        for source, target in combinations(warning.affected_personas, 2)
    ]

    return privacy.PrivacyGraph(nodes=nodes, links=links)
