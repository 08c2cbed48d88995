"""Tests for logging setup and the headless CLI."""

from __future__ import annotations

import io
import logging

import pytest

from starfield.__main__ import _build_parser, _run_cli
from starfield.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_single_handler(self):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_format_and_level(self):
        buf = io.StringIO()
        setup_logging("WARNING", stream=buf)
        log = logging.getLogger("starfield.test")
        log.info("hidden")
        log.warning("shown %d", 3)
        out = buf.getvalue()
        assert "hidden" not in out
        assert "[WARNING] starfield.test" in out
        assert out.rstrip().endswith("| shown 3")


class TestCli:
    def test_defaults_to_serve(self):
        args = _build_parser().parse_args([])
        assert args.command is None

    def test_cli_prints_view_and_market(self, capsys):
        args = _build_parser().parse_args([
            "cli", "--seed", "5", "--x", "-400", "--y", "-300",
            "--station", "station_0_0_fixC", "--visit", "1",
        ])
        _run_cli(args)
        out = capsys.readouterr().out
        assert "View (-400, -300, 1280x720)" in out
        assert "Point Alpha (Pirate Hub)" in out
        assert "Market at station_0_0_fixC" in out
        assert "Food" in out

    def test_cli_unknown_station(self, capsys):
        args = _build_parser().parse_args(["cli", "--station", "station_nowhere"])
        _run_cli(args)
        assert "station_nowhere not found" in capsys.readouterr().out
