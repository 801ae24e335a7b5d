"""Tests for the three leak detectors."""

from __future__ import annotations

from persona_privacy.analysis.detectors import account_overlap, metadata_similarity, username_reuse
from tests.conftest import PersonaFactory

# ── Account overlap ─────────────────────────────────────────────


class TestAccountOverlap:
    """Tests for account_overlap.detect()."""

    def test_shared_account_flagged(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:@alice"]),
            make_persona("p2", accounts=["twitter:@alice"]),
        ]
        warnings = account_overlap.detect(personas)
        assert len(warnings) == 1
        warning = warnings[0]
        assert warning.type == "account_overlap"
        assert warning.severity == "high"
        assert warning.affected_personas == ["p1", "p2"]
        assert warning.account == "twitter:@alice"
        assert '"twitter:@alice"' in warning.description

    def test_distinct_accounts_not_flagged(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:@alice"]),
            make_persona("p2", accounts=["github:alice"]),
        ]
        assert account_overlap.detect(personas) == []

    def test_same_persona_listing_account_twice(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:@alice", "twitter:@alice"]),
            make_persona("p2", accounts=["github:bob"]),
        ]
        assert account_overlap.detect(personas) == []

    def test_duplicate_within_persona_counted_once(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:@alice", "twitter:@alice"]),
            make_persona("p2", accounts=["twitter:@alice"]),
        ]
        warnings = account_overlap.detect(personas)
        assert len(warnings) == 1
        assert warnings[0].affected_personas == ["p1", "p2"]

    def test_three_way_overlap_single_warning(self, make_persona: PersonaFactory) -> None:
        personas = [make_persona(pid, accounts=["mastodon:@x"]) for pid in ("a", "b", "c")]
        warnings = account_overlap.detect(personas)
        assert len(warnings) == 1
        assert warnings[0].affected_personas == ["a", "b", "c"]

    def test_exact_match_only(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:@Alice"]),
            make_persona("p2", accounts=["twitter:@alice "]),
        ]
        assert account_overlap.detect(personas) == []

    def test_accounts_without_colon_still_compared(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["alice@example.com"]),
            make_persona("p2", accounts=["alice@example.com"]),
        ]
        warnings = account_overlap.detect(personas)
        assert [w.account for w in warnings] == ["alice@example.com"]

    def test_order_follows_first_encounter(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["b:1", "a:1"]),
            make_persona("p2", accounts=["a:1", "b:1"]),
        ]
        assert [w.account for w in account_overlap.detect(personas)] == ["b:1", "a:1"]


# ── Username reuse ──────────────────────────────────────────────


class TestExtractUsername:
    """Tests for username_reuse.extract_username()."""

    def test_platform_handle(self) -> None:
        assert username_reuse.extract_username("Twitter:@Alice") == "@alice"

    def test_no_colon(self) -> None:
        assert username_reuse.extract_username("alice") is None

    def test_too_many_colons(self) -> None:
        assert username_reuse.extract_username("matrix:@alice:example.org") is None

    def test_empty_handle(self) -> None:
        assert username_reuse.extract_username("twitter:") == ""


class TestUsernameReuse:
    """Tests for username_reuse.detect()."""

    def test_similar_usernames_flagged(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:alice123"]),
            make_persona("p2", accounts=["github:alice124"]),
        ]
        warnings = username_reuse.detect(personas)
        assert len(warnings) == 1
        warning = warnings[0]
        assert warning.type == "username_reuse"
        assert warning.severity == "medium"
        assert warning.affected_personas == ["p1", "p2"]
        assert warning.usernames == ["alice123", "alice124"]
        assert '"alice123"' in warning.description
        assert '"alice124"' in warning.description

    def test_dissimilar_usernames_ignored(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:alice"]),
            make_persona("p2", accounts=["github:bob"]),
        ]
        assert username_reuse.detect(personas) == []

    def test_threshold_is_strict(self, make_persona: PersonaFactory) -> None:
        # 3 edits over 10 characters is exactly 0.7.
        personas = [
            make_persona("p1", accounts=["x:abcdefghij"]),
            make_persona("p2", accounts=["y:abcdefgxyz"]),
        ]
        assert username_reuse.detect(personas) == []

    def test_lowercased_before_comparison(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:ALICE123"]),
            make_persona("p2", accounts=["github:alice124"]),
        ]
        warnings = username_reuse.detect(personas)
        assert warnings[0].usernames == ["alice123", "alice124"]

    def test_identical_usernames_are_one_value(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:alice"]),
            make_persona("p2", accounts=["github:alice"]),
        ]
        assert username_reuse.detect(personas) == []

    def test_same_persona_similar_usernames(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:alice123", "github:alice124"]),
            make_persona("p2", accounts=["reddit:zzz"]),
        ]
        warnings = username_reuse.detect(personas)
        assert len(warnings) == 1
        assert warnings[0].affected_personas == ["p1"]

    def test_affected_personas_deduplicated(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["twitter:alice123", "github:alice123"]),
            make_persona("p2", accounts=["reddit:alice124"]),
        ]
        warnings = username_reuse.detect(personas)
        assert len(warnings) == 1
        assert warnings[0].affected_personas == ["p1", "p2"]

    def test_malformed_accounts_skipped(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", accounts=["alice123", "matrix:alice123:example.org"]),
            make_persona("p2", accounts=["alice124"]),
        ]
        assert username_reuse.detect(personas) == []


# ── Metadata similarity ─────────────────────────────────────────


class TestMetadataSimilarity:
    """Tests for metadata_similarity.detect()."""

    def test_identical_notes_flagged(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", notes="Hidden email: me@example.com"),
            make_persona("p2", notes="Hidden email: me@example.com"),
        ]
        warnings = metadata_similarity.detect(personas)
        assert len(warnings) == 1
        warning = warnings[0]
        assert warning.type == "metadata_similarity"
        assert warning.severity == "low"
        assert warning.affected_personas == ["p1", "p2"]

    def test_case_insensitive(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("p1", notes="My Secret Notes"),
            make_persona("p2", notes="my secret notes"),
        ]
        assert len(metadata_similarity.detect(personas)) == 1

    def test_empty_notes_skipped(self, make_persona: PersonaFactory) -> None:
        personas = [make_persona("p1", notes=""), make_persona("p2", notes="")]
        assert metadata_similarity.detect(personas) == []

    def test_one_side_empty_skipped(self, make_persona: PersonaFactory) -> None:
        personas = [make_persona("p1", notes="notes"), make_persona("p2", notes="")]
        assert metadata_similarity.detect(personas) == []

    def test_threshold_is_strict(self, make_persona: PersonaFactory) -> None:
        # 2 edits over 4 characters is exactly 0.5.
        personas = [make_persona("p1", notes="abcd"), make_persona("p2", notes="abxy")]
        assert metadata_similarity.detect(personas) == []

    def test_pairwise_per_persona(self, make_persona: PersonaFactory) -> None:
        personas = [make_persona(pid, notes="same boilerplate") for pid in ("a", "b", "c")]
        warnings = metadata_similarity.detect(personas)
        assert [w.affected_personas for w in warnings] == [["a", "b"], ["a", "c"], ["b", "c"]]

    def test_unrelated_persona_does_not_change_pair(self, make_persona: PersonaFactory) -> None:
        personas = [
            make_persona("a", notes="travel diary entries"),
            make_persona("z", notes="1234567890"),
            make_persona("b", notes="travel diary entry"),
        ]
        warnings = metadata_similarity.detect(personas)
        assert len(warnings) == 1
        assert warnings[0].affected_personas == ["a", "b"]
