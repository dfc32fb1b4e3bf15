"""Command-line interface for knobs."""

import argparse
import logging
import random
import sys
from enum import Enum
from typing import Any

from app import PanelApp, configure_logging
from config import LOG_LEVELS, PanelOptions
from constants import DEFAULT_PANEL_NAME, DEFAULT_PANEL_WIDTH, KNOBS_VERSION
from controller import GUI

log = logging.getLogger(__name__)


class Quality(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DemoParams:
    """Sample values covering every controller type."""

    def __init__(self) -> None:
        self.visible = True
        self.title = "Hello knobs"
        self.speed = 2.5
        self.count = 12
        self.offset = 0.0
        self.quality = Quality.MEDIUM
        self.shape = "circle"
        self.background = "#1e1e2e"
        self.accent = 0x89B4FA
        self.tint = {"r": 0.9, "g": 0.55, "b": 0.2}
        self.fired = 0

    def randomize(self) -> None:
        self.speed = round(random.uniform(0, 10), 2)
        self.count = random.randint(0, 100)
        self.fired += 1

    def snapshot(self) -> dict[str, Any]:
        return {
            name: value.name if isinstance(value, Enum) else value
            for name, value in vars(self).items()
        }


def build_demo(gui: GUI, params: DemoParams) -> None:
    """Populate a panel with controllers for params."""
    gui.add(params, "visible")
    gui.add(params, "title")

    gui.add_header("Motion")
    gui.add(params, "speed", 0, 10)
    gui.add(params, "count", 0, 100, 1)
    gui.add(params, "offset").step(0.1)

    gui.add_header("Look")
    gui.add(params, "quality", Quality)
    gui.add(params, "shape", ["circle", "square", "triangle"])

    colors = gui.add_folder("Colors")
    colors.add_color(params, "background")
    colors.add_color(params, "accent")
    colors.add_color(params, "tint")

    def randomize() -> None:
        params.randomize()
        # Values changed behind the panel's back
        gui.update_display()

    gui.add({"randomize": randomize}, "randomize").name("Randomize")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for knobs CLI."""
    parser = argparse.ArgumentParser(
        prog="knobs",
        description="A terminal control panel bound to live Python values.",
    )
    parser.add_argument("--name", default=DEFAULT_PANEL_NAME, help="Panel title")
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_PANEL_WIDTH,
        help="Panel width in columns (0 sizes to content)",
    )
    parser.add_argument(
        "--no-auto-place",
        action="store_true",
        help="Don't dock the panel to the right edge",
    )
    parser.add_argument(
        "--log-level",
        default="DEBUG",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log file verbosity",
    )
    parser.add_argument("--version", action="version", version=f"knobs {KNOBS_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> PanelOptions:
    """Parse command-line arguments into panel options."""
    args = create_parser().parse_args(argv)
    try:
        return PanelOptions(
            name=args.name,
            auto_place=not args.no_auto_place,
            width=args.width or None,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


def main(argv: list[str] | None = None) -> None:
    """Entry point: run the demo panel, then print the final values."""
    options = parse_args(argv)
    log_path = configure_logging(options.logging_level)
    log.info(f"knobs {KNOBS_VERSION} starting, logging to {log_path}")

    params = DemoParams()
    app = PanelApp(options)
    build_demo(app.gui, params)
    app.run()

    for name, value in params.snapshot().items():
        print(f"{name} = {value!r}")


if __name__ == "__main__":
    main()
