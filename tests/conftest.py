"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_dyads.core import PitchClass
from chuk_mcp_dyads.dyads import Dyad
from chuk_mcp_dyads.fretboard import LAP_STEEL_TUNING, AlteringMechanism, FretPosition, Tuning


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def lap_steel() -> Tuning:
    """The default G B D F# A D tuning."""
    return LAP_STEEL_TUNING


@pytest.fixture
def b_to_c_lever() -> AlteringMechanism:
    """A lever raising the B string (string 1) to C."""
    return AlteringMechanism(1, PitchClass.C, "LKL")


@pytest.fixture
def make_dyad():
    """Factory for hand-built dyads at arbitrary coordinates."""
    from chuk_mcp_dyads.dyads.search import pair_positions

    def _make(
        s1: int,
        f1: int,
        s2: int,
        f2: int,
        p1: PitchClass = PitchClass.C,
        p2: PitchClass = PitchClass.E,
    ) -> Dyad:
        dyads = pair_positions([FretPosition(s1, f1, p1), FretPosition(s2, f2, p2)], max_slant=24)
        assert len(dyads) == 1
        return dyads[0]

    return _make
