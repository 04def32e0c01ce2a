"""
Instrument tools - MCP tools for tuning presets.

Tools for listing, describing, creating and copying instruments.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dyads.constants import ErrorMessages, SuccessMessages
from chuk_mcp_dyads.fretboard import parse_tuning
from chuk_mcp_dyads.instruments import InstrumentLoader
from chuk_mcp_dyads.models import Instrument, LeverSpec

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_instrument_tools(
    mcp: ChukMCPServer,
    loader: InstrumentLoader,
) -> dict[str, Any]:
    """
    Register instrument management tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The instrument loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_list_instruments() -> str:
        """
        List available instruments.

        Returns all instruments from the library and project with
        basic metadata.

        Returns:
            JSON string with list of instrument summaries

        Example:
            dyads_list_instruments()
        """
        try:
            instruments = loader.list_instruments()

            return json.dumps(
                {
                    "status": "success",
                    "instruments": [
                        {
                            "name": i.name,
                            "description": i.description,
                            "tuning": i.tuning,
                            "levers": i.lever_count,
                        }
                        for i in instruments
                    ],
                    "count": len(instruments),
                }
            )
        except Exception as e:
            logger.exception("Failed to list instruments")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_list_instruments"] = dyads_list_instruments

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_describe_instrument(name: str) -> str:
        """
        Get detailed information about an instrument.

        Args:
            name: Instrument name

        Returns:
            JSON string with tuning, fret count, levers and octave table

        Example:
            dyads_describe_instrument(name="c6-gbdfad-levers")
        """
        try:
            instrument = loader.get_instrument(name)
            if instrument is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "instrument": {
                        "name": instrument.name,
                        "description": instrument.description,
                        "tuning": list(instrument.tuning),
                        "max_fret": instrument.max_fret,
                        "base_octaves": list(instrument.get_base_octaves()),
                        "levers": [
                            {"string": lever.string, "engaged": lever.engaged, "name": lever.name}
                            for lever in instrument.levers
                        ],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe instrument")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_describe_instrument"] = dyads_describe_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_create_instrument(
        name: str,
        tuning: str,
        description: str = "",
        max_fret: int = 24,
        levers: list[dict[str, Any]] | None = None,
    ) -> str:
        """
        Create a custom instrument in the project directory.

        Args:
            name: Instrument name (also the file name)
            tuning: Tuning string, lowest string first (e.g., 'E B E G# B E')
            description: Optional description
            max_fret: Highest fret
            levers: Optional levers, each {"string": 1, "engaged": "C", "name": "LKL"}

        Returns:
            JSON string with the saved instrument path

        Example:
            dyads_create_instrument(name="my-c6", tuning="C E G A C E")
        """
        try:
            instrument = Instrument(
                name=name,
                description=description,
                tuning=parse_tuning(tuning).names(),
                max_fret=max_fret,
                levers=[LeverSpec.model_validate(lever) for lever in levers or []],
            )
            path = loader.save_instrument(instrument)

            return json.dumps(
                {
                    "status": "success",
                    "name": instrument.name,
                    "tuning": list(instrument.tuning),
                    "path": str(path),
                }
            )
        except Exception as e:
            logger.exception("Failed to create instrument")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_create_instrument"] = dyads_create_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_copy_instrument_to_project(name: str) -> str:
        """
        Copy a library instrument to the project for customization.

        Args:
            name: Instrument name

        Returns:
            JSON string with the copied file path

        Example:
            dyads_copy_instrument_to_project(name="e9")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.INSTRUMENT_COPIED.format(name=name, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to copy instrument")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_copy_instrument_to_project"] = dyads_copy_instrument_to_project

    return tools
