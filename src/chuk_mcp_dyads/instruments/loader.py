"""
Instrument loader - discovers and loads tuning presets.

Presets are YAML files named after the instrument. They come from:
1. The built-in library shipped with the package
2. The project's instruments directory, which shadows the library
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_dyads.models.instrument import Instrument, InstrumentMetadata

logger = logging.getLogger(__name__)

PRESET_SUFFIX = ".yaml"


class InstrumentLoader:
    """
    Finds instrument presets and parses them into Instrument models.

    Lookups check the project directory before the library; parsed
    presets are cached by name until `clear_cache`.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Instrument] = {}

    def list_instruments(self) -> list[InstrumentMetadata]:
        """
        Summaries of every loadable preset.

        Library presets are listed first (by file name); a project preset
        with the same name replaces the library entry in place.
        """
        found: dict[str, InstrumentMetadata] = {}
        for directory in (self.library_path, self.project_path):
            for path in self._iter_presets(directory):
                instrument = self._load_instrument_file(path)
                if instrument is not None:
                    found[instrument.name] = InstrumentMetadata.from_instrument(instrument)
        return list(found.values())

    def get_instrument(self, name: str) -> Instrument | None:
        """Load a preset by name, project first. None if no valid preset exists."""
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        for directory in (self.project_path, self.library_path):
            path = self._preset_file(directory, name)
            if path is None or not path.exists():
                continue
            instrument = self._load_instrument_file(path)
            if instrument is not None:
                self._cache[name] = instrument
                return instrument

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library preset into the project so it can be edited.

        Returns:
            The new project file, or None if the library has no such preset

        Raises:
            ValueError: Without a project path, or if the project already has it
        """
        project = self._require_project()
        source = self.library_path / f"{name}{PRESET_SUFFIX}"
        if not source.exists():
            return None

        target = project / source.name
        if target.exists():
            raise ValueError(f"Instrument already exists in project: {name}")

        project.mkdir(parents=True, exist_ok=True)
        target.write_text(source.read_text())
        self._cache.pop(name, None)
        logger.debug(f"Copied instrument {name} to {target}")
        return target

    def save_instrument(self, instrument: Instrument) -> Path:
        """Write an instrument to the project, replacing a project preset of that name."""
        project = self._require_project()
        project.mkdir(parents=True, exist_ok=True)

        target = project / f"{instrument.name}{PRESET_SUFFIX}"
        with open(target, "w") as f:
            yaml.safe_dump(instrument.to_yaml_dict(), f, sort_keys=False, allow_unicode=True)

        self._cache[instrument.name] = instrument
        return target

    def clear_cache(self) -> None:
        self._cache.clear()

    def _require_project(self) -> Path:
        if self.project_path is None:
            raise ValueError("No project path configured")
        return self.project_path

    @staticmethod
    def _preset_file(directory: Path | None, name: str) -> Path | None:
        return None if directory is None else directory / f"{name}{PRESET_SUFFIX}"

    @staticmethod
    def _iter_presets(directory: Path | None) -> Iterator[Path]:
        if directory is None or not directory.is_dir():
            return
        yield from sorted(directory.glob(f"*{PRESET_SUFFIX}"))

    def _load_instrument_file(self, path: Path) -> Instrument | None:
        """Parse one preset file; invalid files are logged and skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_instrument(data)
        except Exception:
            logger.warning(f"Skipping invalid instrument file: {path}", exc_info=True)
            return None

    def _parse_instrument(self, data: dict[str, Any]) -> Instrument:
        return Instrument.model_validate(data)
