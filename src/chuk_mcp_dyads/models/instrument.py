"""
Instrument models - tuning presets with optional levers.

An instrument bundles everything the fretboard search needs that is not
a chord: open-string tuning, fret count, levers, and the octave table
used for playback.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_dyads.constants import (
    DEFAULT_BASE_OCTAVES,
    DEFAULT_MAX_FRET,
    FALLBACK_OCTAVE,
    SchemaVersion,
)
from chuk_mcp_dyads.core.pitch import PitchClass
from chuk_mcp_dyads.fretboard import AlteringMechanism, Tuning, validate_mechanisms


class LeverSpec(BaseModel):
    """A lever bound to one string (knee or foot lever)."""

    string: int = Field(..., ge=0, description="String index (0 = lowest)")
    engaged: str = Field(..., description="Note the open string sounds while engaged")
    name: str = Field("", description="Display name, e.g. 'LKL'")

    model_config = {"frozen": True}

    @field_validator("engaged")
    @classmethod
    def validate_engaged(cls, v: str) -> str:
        """Normalize the engaged note to its sharp spelling."""
        return PitchClass.parse(v).spell()

    def to_mechanism(self) -> AlteringMechanism:
        """Convert to the fretboard primitive."""
        return AlteringMechanism(self.string, PitchClass.parse(self.engaged), self.name)


class Instrument(BaseModel):
    """
    A fretted instrument configuration.

    Tuning notes are listed lowest string first.
    """

    schema_version: SchemaVersion = Field("instrument/v1", alias="schema")
    name: str = Field(..., description="Instrument name")
    description: str = Field("", description="Instrument description")
    tuning: list[str] = Field(..., description="Open-string notes, lowest first")
    max_fret: int = Field(DEFAULT_MAX_FRET, ge=1, le=36, description="Highest fret")
    base_octaves: list[int] | None = Field(
        None, description="Octave of each open string, for playback"
    )
    levers: list[LeverSpec] = Field(default_factory=list, description="Altering levers")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: list[str]) -> list[str]:
        """Validate notes and string count; store sharp spellings."""
        return Tuning.of(v).names()

    @model_validator(mode="after")
    def validate_levers(self) -> Instrument:
        """Each lever must target an existing string, at most one per string."""
        validate_mechanisms(self.get_tuning(), self.get_mechanisms())
        if self.base_octaves is not None and len(self.base_octaves) != len(self.tuning):
            raise ValueError(
                f"base_octaves has {len(self.base_octaves)} entries "
                f"for {len(self.tuning)} strings"
            )
        return self

    @property
    def string_count(self) -> int:
        """Number of strings."""
        return len(self.tuning)

    def get_tuning(self) -> Tuning:
        """Get the parsed Tuning."""
        return Tuning.of(self.tuning)

    def get_mechanisms(self) -> list[AlteringMechanism]:
        """Get the levers as fretboard primitives."""
        return [lever.to_mechanism() for lever in self.levers]

    def get_base_octaves(self) -> tuple[int, ...]:
        """Octave table for playback, padded for tunings without one."""
        if self.base_octaves is not None:
            return tuple(self.base_octaves)
        if self.string_count == len(DEFAULT_BASE_OCTAVES):
            return DEFAULT_BASE_OCTAVES
        return tuple(FALLBACK_OCTAVE for _ in self.tuning)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "tuning": list(self.tuning),
            "max_fret": self.max_fret,
        }
        if self.base_octaves is not None:
            data["base_octaves"] = list(self.base_octaves)
        if self.levers:
            data["levers"] = [
                {"string": lever.string, "engaged": lever.engaged, "name": lever.name}
                for lever in self.levers
            ]
        return data


class InstrumentMetadata(BaseModel):
    """Lightweight metadata for listing instruments."""

    name: str
    description: str
    tuning: str
    lever_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_instrument(cls, instrument: Instrument) -> InstrumentMetadata:
        """Create metadata from an instrument."""
        return cls(
            name=instrument.name,
            description=instrument.description,
            tuning=" ".join(instrument.tuning),
            lever_count=len(instrument.levers),
        )
