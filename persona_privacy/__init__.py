"""Cross-persona privacy leak analysis.

The public API lives in :mod:`persona_privacy.analysis`.
"""
