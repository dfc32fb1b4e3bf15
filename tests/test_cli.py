"""Tests for CLI argument parsing, panel options and the demo panel."""

import logging
from unittest.mock import patch

import pytest

from cli import DemoParams, Quality, build_demo, main, parse_args
from config import PanelOptions
from controller import (
    GUI,
    ColorController,
    FunctionController,
    Header,
    NumberController,
    OptionController,
)


class TestPanelOptions:
    """Test PanelOptions validation."""

    def test_defaults(self):
        """Defaults match a standard docked panel."""
        options = PanelOptions()
        assert options.name == "Controls"
        assert options.auto_place is True
        assert options.width == 48
        assert options.logging_level == logging.DEBUG

    def test_log_level_case_insensitive(self):
        """Log levels are normalized to upper case."""
        assert PanelOptions(log_level="info").logging_level == logging.INFO

    def test_unknown_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log level"):
            PanelOptions(log_level="chatty")

    def test_non_positive_width(self):
        """Widths must be positive; None means automatic."""
        with pytest.raises(ValueError, match="width"):
            PanelOptions(width=0)
        assert PanelOptions(width=None).width is None


class TestParseArgs:
    """Test parse_args() function."""

    def test_no_args(self):
        """No arguments gives the default options."""
        assert parse_args([]) == PanelOptions()

    def test_all_flags(self):
        """Every flag maps onto an option."""
        options = parse_args(["--name", "Tweaks", "--width", "30", "--no-auto-place", "--log-level", "warning"])
        assert options == PanelOptions(name="Tweaks", auto_place=False, width=30, log_level="WARNING")

    def test_zero_width_means_auto(self):
        """--width 0 sizes the panel to its content."""
        assert parse_args(["--width", "0"]).width is None

    def test_negative_width_exits(self, capsys):
        """Invalid widths print an error and exit."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--width", "-5"])
        assert exc_info.value.code == 2
        assert "width" in capsys.readouterr().err

    def test_bad_log_level_exits(self):
        """argparse rejects unknown log levels."""
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "chatty"])

    def test_version(self, capsys):
        """--version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "knobs" in capsys.readouterr().out


class TestDemo:
    """Test the demo panel."""

    def test_build_demo_covers_every_type(self):
        """The demo uses every controller type, a header and a folder."""
        gui = GUI()
        build_demo(gui, DemoParams())
        kinds = {type(ctrl) for ctrl in gui.controllers()}
        assert {NumberController, OptionController, ColorController, FunctionController} <= kinds
        assert any(isinstance(child, Header) for child in gui.children)
        assert len(gui.folders()) == 1

    def test_randomize_refreshes_panel(self):
        """The Randomize button updates the displayed values."""
        gui = GUI()
        params = DemoParams()
        build_demo(gui, params)
        button = next(c for c in gui.controllers() if isinstance(c, FunctionController))
        button.fire()
        count = next(c for c in gui.controllers() if c.property == "count")
        assert params.fired == 1
        assert count.input_value == str(params.count)

    def test_snapshot_uses_enum_names(self):
        """Snapshots are printable."""
        snapshot = DemoParams().snapshot()
        assert snapshot["quality"] == Quality.MEDIUM.name
        assert "randomize" not in snapshot

    def test_main_prints_values(self, capsys, tmp_path, monkeypatch):
        """main() runs the app, then prints the final values."""
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
        with patch("cli.PanelApp.run") as run:
            main(["--name", "Demo"])
        run.assert_called_once()
        out = capsys.readouterr().out
        assert "speed = 2.5" in out
        assert "quality = 'MEDIUM'" in out
