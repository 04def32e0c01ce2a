"""
Tests for guide tone selection.

Tests cover:
- Note roles and importance
- Overlap relation
- Greedy non-overlapping selection
- The three guide tone policies
"""

import pytest

from chuk_mcp_dyads.constants import DEFAULT_FRET_PROXIMITY, GuideTonePolicy
from chuk_mcp_dyads.core import PitchClass, chord_tones
from chuk_mcp_dyads.dyads import (
    Dyad,
    NoteRole,
    dyad_score,
    dyads_overlap,
    filter_guide_tones,
    find_dyads,
    note_importance,
    note_role,
    select_non_overlapping,
)
from chuk_mcp_dyads.fretboard import Tuning

P = PitchClass


@pytest.fixture
def cmaj7_dyads(lap_steel: Tuning) -> list[Dyad]:
    """All dyads of Cmaj7 on the default tuning."""
    return find_dyads(chord_tones("Cmaj7"), tuning=lap_steel)


@pytest.fixture
def g7_dyads(lap_steel: Tuning) -> list[Dyad]:
    """All dyads of G7 on the default tuning."""
    return find_dyads(chord_tones("G7"), tuning=lap_steel)


class TestNoteScoring:
    """Tests for note roles and importance."""

    def test_roles(self) -> None:
        """Thirds and sevenths are classified relative to the root."""
        assert note_role(P.E, P.C) == NoteRole.THIRD
        assert note_role(P.Ds, P.C) == NoteRole.THIRD
        assert note_role(P.B, P.C) == NoteRole.SEVENTH
        assert note_role(P.As, P.C) == NoteRole.SEVENTH
        assert note_role(P.G, P.C) == NoteRole.NONE

    def test_importance(self) -> None:
        """3rds outrank 7ths, which outrank the root, which outranks the 5th."""
        assert note_importance(P.E, P.C) == 10
        assert note_importance(P.B, P.C) == 9
        assert note_importance(P.C, P.C) == 6
        assert note_importance(P.D, P.C) == 4
        assert note_importance(P.G, P.C) == 2

    def test_dyad_score(self, make_dyad) -> None:
        """A dyad scores the sum of its notes."""
        dyad = make_dyad(1, 5, 3, 5, P.E, P.B)
        assert dyad_score(dyad, P.C) == 19


class TestOverlap:
    """Tests for the overlap relation."""

    def test_shared_coordinate(self, make_dyad) -> None:
        """Sharing a string/fret always overlaps, whatever the proximity."""
        a = make_dyad(0, 5, 1, 5)
        b = make_dyad(0, 5, 2, 5)
        assert dyads_overlap(a, b, fret_proximity=0)

    def test_shared_string_nearby(self, make_dyad) -> None:
        """Nearby dyads sharing a string overlap."""
        a = make_dyad(0, 5, 1, 5)
        b = make_dyad(1, 7, 2, 7)
        assert dyads_overlap(a, b, fret_proximity=2)
        assert not dyads_overlap(a, b, fret_proximity=1)

    def test_disjoint_strings(self, make_dyad) -> None:
        """Dyads on disjoint strings only overlap through a shared coordinate."""
        a = make_dyad(0, 5, 1, 5)
        b = make_dyad(2, 5, 3, 5)
        assert not dyads_overlap(a, b, fret_proximity=5)

    def test_symmetric(self, make_dyad) -> None:
        """Overlap does not depend on argument order."""
        a = make_dyad(0, 5, 1, 6)
        b = make_dyad(1, 7, 3, 7)
        assert dyads_overlap(a, b, 2) == dyads_overlap(b, a, 2)

    def test_not_transitive(self, make_dyad) -> None:
        """A~B and B~C does not imply A~C."""
        a = make_dyad(0, 0, 1, 0)
        b = make_dyad(1, 2, 2, 2)
        c = make_dyad(2, 4, 3, 4)
        assert dyads_overlap(a, b, 2)
        assert dyads_overlap(b, c, 2)
        assert not dyads_overlap(a, c, 2)


class TestGreedySelection:
    """Tests for select_non_overlapping."""

    def test_score_order_decides(self, make_dyad) -> None:
        """The best-scoring dyad blocks both neighbours."""
        a = make_dyad(0, 0, 1, 0)
        b = make_dyad(1, 2, 2, 2)
        c = make_dyad(2, 4, 3, 4)
        scores = {a: 1, b: 5, c: 1}
        assert select_non_overlapping([a, b, c], scores.__getitem__, 2) == [b]

    def test_ties_by_fret(self, make_dyad) -> None:
        """With equal scores the lowest fret goes first."""
        a = make_dyad(0, 0, 1, 0)
        b = make_dyad(1, 2, 2, 2)
        c = make_dyad(2, 4, 3, 4)
        assert select_non_overlapping([c, b, a], lambda d: 1, 2) == [a, c]

    def test_result_sorted_by_fret(self, make_dyad) -> None:
        """Kept dyads come back in fret order, not score order."""
        low = make_dyad(0, 1, 1, 1)
        high = make_dyad(4, 9, 5, 9)
        scores = {low: 1, high: 9}
        assert select_non_overlapping([high, low], scores.__getitem__, 2) == [low, high]

    def test_empty(self) -> None:
        """Nothing in, nothing out."""
        assert select_non_overlapping([], lambda d: 0, 2) == []


class TestPolicies:
    """Tests for the guide tone policies."""

    def test_weighted_keeps_third_and_seventh(self, cmaj7_dyads: list[Dyad]) -> None:
        """Cmaj7 keeps at least one E+B dyad."""
        kept = filter_guide_tones(cmaj7_dyads, root=P.C)
        assert any(set(d.pitches) == {P.E, P.B} for d in kept)

    def test_weighted_thresholds(self, cmaj7_dyads: list[Dyad]) -> None:
        """Weighted keeps only scores >= 8 with two different roles."""
        kept = filter_guide_tones(cmaj7_dyads, root=P.C, policy=GuideTonePolicy.WEIGHTED)
        assert kept
        for dyad in kept:
            assert dyad_score(dyad, P.C) >= 8
            assert dyad.lower.pitch != dyad.upper.pitch

    def test_weighted_drops_low_scores(self, lap_steel: Tuning) -> None:
        """Fifth plus ninth (2 + 4) falls below the threshold."""
        dyads = find_dyads([P.G, P.D], tuning=lap_steel)
        assert dyads
        assert filter_guide_tones(dyads, root=P.C) == []

    def test_role_pair_exact(self, g7_dyads: list[Dyad]) -> None:
        """Role pair keeps only B+F dyads for G7."""
        kept = filter_guide_tones(g7_dyads, root=P.G, policy=GuideTonePolicy.ROLE_PAIR)
        assert kept
        for dyad in kept:
            assert set(dyad.pitches) == {P.B, P.F}

    def test_interval_priority_needs_no_root(self, cmaj7_dyads: list[Dyad]) -> None:
        """Interval priority works without a root and keeps 3rds, tritones and 7ths."""
        kept = filter_guide_tones(cmaj7_dyads, policy=GuideTonePolicy.INTERVAL_PRIORITY)
        assert kept
        assert {d.interval for d in kept} <= {3, 4, 6, 10, 11}

    @pytest.mark.parametrize("policy", [GuideTonePolicy.ROLE_PAIR, GuideTonePolicy.WEIGHTED])
    def test_root_required(self, cmaj7_dyads: list[Dyad], policy: GuideTonePolicy) -> None:
        """Root-relative policies return nothing without a root."""
        assert filter_guide_tones(cmaj7_dyads, root=None, policy=policy) == []

    @pytest.mark.parametrize("policy", list(GuideTonePolicy))
    def test_no_overlap_in_result(self, cmaj7_dyads: list[Dyad], policy: GuideTonePolicy) -> None:
        """No two kept dyads overlap at the policy's proximity."""
        kept = filter_guide_tones(cmaj7_dyads, root=P.C, policy=policy)
        proximity = DEFAULT_FRET_PROXIMITY[policy]
        for i, a in enumerate(kept):
            for b in kept[i + 1 :]:
                assert not dyads_overlap(a, b, proximity)

    @pytest.mark.parametrize("policy", list(GuideTonePolicy))
    def test_result_is_subset_in_fret_order(
        self, cmaj7_dyads: list[Dyad], policy: GuideTonePolicy
    ) -> None:
        """Selection only removes dyads and returns them by fret."""
        kept = filter_guide_tones(cmaj7_dyads, root=P.C, policy=policy)
        assert all(d in cmaj7_dyads for d in kept)
        frets = [d.min_fret for d in kept]
        assert frets == sorted(frets)

    def test_proximity_override(self, cmaj7_dyads: list[Dyad]) -> None:
        """An explicit proximity replaces the policy default."""
        kept = filter_guide_tones(cmaj7_dyads, root=P.C, fret_proximity=6)
        assert kept
        for i, a in enumerate(kept):
            for b in kept[i + 1 :]:
                assert not dyads_overlap(a, b, 6)
