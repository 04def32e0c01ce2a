"""
Tests for the command line entry point.
"""

from chuk_mcp_dyads.server import build_parser


class TestCommandLine:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """stdio on port 8000, no directory overrides."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.instruments_dir is None
        assert args.output_dir is None
        assert not args.debug

    def test_http_with_directories(self) -> None:
        """All options parse."""
        args = build_parser().parse_args(
            [
                "--transport",
                "http",
                "--port",
                "9000",
                "--instruments-dir",
                "presets",
                "--output-dir",
                "midi",
                "--debug",
            ]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.instruments_dir == "presets"
        assert args.output_dir == "midi"
        assert args.debug
