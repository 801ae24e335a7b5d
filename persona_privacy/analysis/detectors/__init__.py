"""Leak detectors, one module per warning type.

Each module exposes ``detect(personas) -> list[PrivacyWarning]``
and never mutates the personas it reads.
"""

from __future__ import annotations

from persona_privacy.analysis.detectors import account_overlap, metadata_similarity, username_reuse

__all__ = ["account_overlap", "metadata_similarity", "username_reuse"]
