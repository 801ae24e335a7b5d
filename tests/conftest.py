"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from persona_privacy import config
from persona_privacy.models import persona, privacy

PersonaFactory = Callable[..., persona.Persona]


def build_persona(
    persona_id: str,
    *,
    accounts: list[str] | None = None,
    notes: str = "",
    signed_proofs: list[str] | None = None,
    is_public: bool = False,
) -> persona.Persona:
    return persona.Persona(
        id=persona_id,
        public_key=f"-----BEGIN PGP PUBLIC KEY BLOCK----- {persona_id}",
        private_data=persona.PrivateData(
            accounts=list(accounts or []),
            notes=notes,
            signed_proofs=list(signed_proofs or []),
        ),
        created_at="2026-01-01T00:00:00Z",
        is_public=is_public,
        name=f"Persona {persona_id}",
    )


def build_warning(
    warning_type: privacy.WarningType = "account_overlap",
    affected: list[str] | None = None,
    *,
    severity: privacy.Severity | None = None,
    description: str = "",
) -> privacy.PrivacyWarning:
    default_severity: dict[str, privacy.Severity] = {
        "account_overlap": "high",
        "username_reuse": "medium",
        "metadata_similarity": "low",
    }
    return privacy.PrivacyWarning(
        type=warning_type,
        description=description,
        severity=severity or default_severity[warning_type],
        affected_personas=list(affected or []),
    )


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so env patches take effect per test."""
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture()
def make_persona() -> PersonaFactory:
    """Factory for personas with sensible defaults."""
    return build_persona


# ── Persona sets ────────────────────────────────────────────────


@pytest.fixture()
def overlap_personas() -> list[persona.Persona]:
    """Three personas where the first two share one account."""
    return [
        build_persona("P1", accounts=["x:@a"]),
        build_persona("P2", accounts=["x:@a"]),
        build_persona("P3"),
    ]


@pytest.fixture()
def isolated_personas() -> list[persona.Persona]:
    """Personas with nothing in common."""
    return [
        build_persona("work-persona", accounts=["twitter:@dana_writes", "github:dwrites"], notes="work stuff"),
        build_persona("art-persona", accounts=["instagram:@pixelmoth"], notes="Night photography and zines"),
        build_persona("game-persona", accounts=["twitch:qq_vortex"], notes=""),
    ]
