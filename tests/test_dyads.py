"""
Tests for dyad search.

Tests cover:
- find_dyads geometry rules (same string, slant limit)
- Ordering, deduplication and determinism
- Lever (altered) dyads
- Dyad helpers and filters
"""

import pytest

from chuk_mcp_dyads.constants import DyadSource, DyadType
from chuk_mcp_dyads.core import Degree, PitchClass, chord_tones
from chuk_mcp_dyads.dyads import (
    Dyad,
    SubstituteDyad,
    filter_by_interval,
    filter_by_type,
    find_dyads,
    group_by_fret,
    pair_positions,
)
from chuk_mcp_dyads.fretboard import AlteringMechanism, FretPosition, Tuning, parse_tuning
from chuk_mcp_dyads.harmony import substitutes_for

P = PitchClass


@pytest.fixture
def c_major_dyads(lap_steel: Tuning) -> list[Dyad]:
    """All dyads of a C major triad on G B D F# A D."""
    return find_dyads([P.C, P.E, P.G], max_slant=1, tuning=lap_steel)


class TestGeometry:
    """Tests for bar geometry rules."""

    def test_no_same_string(self, c_major_dyads: list[Dyad]) -> None:
        """No dyad uses one string twice."""
        assert c_major_dyads
        for dyad in c_major_dyads:
            assert dyad.lower.string < dyad.upper.string

    def test_slant_limit(self, c_major_dyads: list[Dyad]) -> None:
        """No dyad exceeds the slant limit."""
        for dyad in c_major_dyads:
            assert dyad.fret_diff <= 1
            expected = DyadType.STRAIGHT if dyad.fret_diff == 0 else DyadType.SLANT
            assert dyad.type == expected

    def test_zero_slant_only_straight(self, lap_steel: Tuning) -> None:
        """max_slant=0 yields only straight dyads."""
        dyads = find_dyads([P.C, P.E, P.G], max_slant=0, tuning=lap_steel)
        assert dyads
        assert all(d.type == DyadType.STRAIGHT for d in dyads)

    def test_wider_slant_is_superset(self, lap_steel: Tuning) -> None:
        """Allowing more slant never loses dyads."""
        narrow = find_dyads([P.C, P.E, P.G], max_slant=1, tuning=lap_steel)
        wide = find_dyads([P.C, P.E, P.G], max_slant=2, tuning=lap_steel)
        assert {d.coordinates for d in narrow} <= {d.coordinates for d in wide}
        assert len(wide) > len(narrow)

    def test_same_string_pair_rejected(self) -> None:
        """Two positions on one string cannot form a dyad."""
        positions = [FretPosition(0, 5, P.C), FretPosition(0, 6, P.Cs)]
        assert pair_positions(positions, max_slant=1) == []

    def test_every_note_is_a_chord_tone(self, c_major_dyads: list[Dyad]) -> None:
        """Both notes of every dyad belong to the chord."""
        tones = {P.C, P.E, P.G}
        for dyad in c_major_dyads:
            assert set(dyad.pitches) <= tones


class TestOrdering:
    """Tests for ordering, dedupe and determinism."""

    def test_sorted_by_fret_then_string(self, c_major_dyads: list[Dyad]) -> None:
        """Dyads are ordered by lowest fret, then lower string."""
        keys = [(d.min_fret, d.lower.string) for d in c_major_dyads]
        assert keys == sorted(keys)

    def test_lowest_dyads_use_open_g(self, c_major_dyads: list[Dyad]) -> None:
        """The only open chord tone is the G string, paired with a slant to fret 1."""
        at_zero = [d for d in c_major_dyads if d.min_fret == 0]
        assert len(at_zero) == 2
        for dyad in at_zero:
            assert dyad.lower == FretPosition(0, 0, P.G)
            assert dyad.upper.fret == 1
            assert dyad.type == DyadType.SLANT
        assert {d.upper.pitch for d in at_zero} == {P.C, P.G}

    def test_straight_major_third_at_fret_five(self, c_major_dyads: list[Dyad]) -> None:
        """C on the G string and E on the B string share fret 5."""
        matches = [d for d in c_major_dyads if d.coordinates == ((0, 5), (1, 5))]
        assert len(matches) == 1
        dyad = matches[0]
        assert dyad.pitches == (P.C, P.E)
        assert dyad.interval == 4
        assert dyad.interval_name == "M3"
        assert dyad.priority == 10
        assert dyad.source == DyadSource.DIRECT
        assert dyad.describe() == "C-E M3 straight fret 5"

    def test_no_duplicates(self, c_major_dyads: list[Dyad]) -> None:
        """Each coordinate pair appears once."""
        keys = [
            (d.lower.string, d.lower.fret, d.upper.string, d.upper.fret) for d in c_major_dyads
        ]
        assert len(keys) == len(set(keys))

    def test_duplicate_positions_collapse(self) -> None:
        """Repeated input positions produce one dyad."""
        a = FretPosition(0, 5, P.C)
        b = FretPosition(1, 5, P.E)
        assert len(pair_positions([a, b, a, b], max_slant=1)) == 1

    def test_deterministic(self, lap_steel: Tuning) -> None:
        """Same input, same ordered output."""
        tones = chord_tones("Cmaj7")
        assert find_dyads(tones, tuning=lap_steel) == find_dyads(tones, tuning=lap_steel)

    def test_interval_measured_from_lower_string(self) -> None:
        """Input order does not change the interval direction."""
        c = FretPosition(0, 5, P.C)
        e = FretPosition(1, 5, P.E)
        forward = pair_positions([c, e])[0]
        backward = pair_positions([e, c])[0]
        assert forward == backward
        assert forward.interval == 4

    def test_unison(self) -> None:
        """Same pitch on two strings is a unison with priority 0."""
        dyad = pair_positions([FretPosition(0, 0, P.G), FretPosition(3, 1, P.G)])[0]
        assert dyad.interval == 0
        assert dyad.interval_name == "unison"
        assert dyad.priority == 0
        assert dyad.describe() == "G-G unison slant fret 0-1"

    def test_slant_frets_described_low_to_high(self) -> None:
        """A bar slanting back toward the nut still reads lowest fret first."""
        dyad = pair_positions([FretPosition(0, 10, P.F), FretPosition(1, 9, P.Gs)])[0]
        assert dyad.type == DyadType.SLANT
        assert dyad.interval_name == "m3"
        assert dyad.describe() == "F-G# m3 slant fret 9-10"


class TestAlteredDyads:
    """Tests for lever dyads."""

    def test_engaged_open_string_dyad(
        self, lap_steel: Tuning, b_to_c_lever: AlteringMechanism
    ) -> None:
        """Open G plus the lever C on the B string is a straight dyad at fret 0."""
        dyads = find_dyads([P.C, P.E, P.G], tuning=lap_steel, mechanisms=[b_to_c_lever])
        altered = [d for d in dyads if d.source == DyadSource.ALTERED]
        assert altered

        target = [d for d in altered if d.coordinates == ((0, 0), (1, 0))]
        assert len(target) == 1
        dyad = target[0]
        assert dyad.type == DyadType.STRAIGHT
        assert dyad.pitches == (P.G, P.C)
        assert dyad.lever_positions == [2]
        assert dyad.describe().endswith("lever")
        assert dyad.to_dict()["lever_positions"] == [2]

    def test_altered_iff_engaged(self, lap_steel: Tuning, b_to_c_lever: AlteringMechanism) -> None:
        """Source is ALTERED exactly when a note uses the lever."""
        dyads = find_dyads([P.C, P.E, P.G], tuning=lap_steel, mechanisms=[b_to_c_lever])
        for dyad in dyads:
            engaged = dyad.lower.engaged or dyad.upper.engaged
            assert (dyad.source == DyadSource.ALTERED) == engaged

    def test_use_mechanisms_off(self, lap_steel: Tuning, b_to_c_lever: AlteringMechanism) -> None:
        """Disabling levers gives the plain search."""
        tones = [P.C, P.E, P.G]
        off = find_dyads(tones, tuning=lap_steel, mechanisms=[b_to_c_lever], use_mechanisms=False)
        assert off == find_dyads(tones, tuning=lap_steel)

    def test_no_engaged_open_string_duplicate(
        self, lap_steel: Tuning, b_to_c_lever: AlteringMechanism
    ) -> None:
        """An engaged string has no unaltered fret-0 note."""
        dyads = find_dyads(chord_tones("Cmaj7"), tuning=lap_steel, mechanisms=[b_to_c_lever])
        for dyad in dyads:
            for pos in (dyad.lower, dyad.upper):
                if pos.string == 1 and pos.fret == 0:
                    assert pos.engaged


class TestHelpers:
    """Tests for dyad helpers and filters."""

    def test_to_dict(self, c_major_dyads: list[Dyad]) -> None:
        """Serialized dyads carry both positions and labels."""
        data = c_major_dyads[0].to_dict()
        assert set(data) == {
            "pos1",
            "pos2",
            "interval",
            "interval_name",
            "type",
            "priority",
            "source",
            "lever_positions",
            "label",
        }
        assert data["pos1"] == {"string": 0, "fret": 0, "note": "G", "lever": False}
        assert data["lever_positions"] is None

    def test_filter_by_type(self, c_major_dyads: list[Dyad]) -> None:
        """Straight and slant filters partition the list."""
        straight = filter_by_type(c_major_dyads, DyadType.STRAIGHT)
        slant = filter_by_type(c_major_dyads, DyadType.SLANT)
        assert len(straight) + len(slant) == len(c_major_dyads)

    def test_filter_by_interval(self, c_major_dyads: list[Dyad]) -> None:
        """Interval filter reduces mod 12."""
        thirds = filter_by_interval(c_major_dyads, [3, 16])
        assert thirds
        assert {d.interval for d in thirds} <= {3, 4}

    def test_group_by_fret(self, c_major_dyads: list[Dyad]) -> None:
        """Grouping keeps every dyad under its lowest fret."""
        groups = group_by_fret(c_major_dyads)
        assert sum(len(g) for g in groups.values()) == len(c_major_dyads)
        assert all(d.min_fret == fret for fret, g in groups.items() for d in g)

    def test_as_substitute(self, c_major_dyads: list[Dyad]) -> None:
        """Annotating a dyad returns a new SubstituteDyad."""
        candidate = substitutes_for(P.G, Degree.V)[-1]
        original = c_major_dyads[0]
        sub = original.as_substitute(candidate)

        assert isinstance(sub, SubstituteDyad)
        assert original.source == DyadSource.DIRECT
        assert sub.source == DyadSource.TRITONE_SUBSTITUTE
        assert sub.coordinates == original.coordinates
        assert sub.describe().endswith("C#7 (bII7)")
        assert sub.to_dict()["substitution"] == {"chord": "C#7", "degree": "bII7"}

    def test_custom_tuning(self) -> None:
        """Search works on any tuning."""
        tuning = parse_tuning("C E G A C E")
        dyads = find_dyads([P.C, P.E, P.G], tuning=tuning, max_fret=12)
        assert any(d.coordinates == ((0, 0), (1, 0)) for d in dyads)
