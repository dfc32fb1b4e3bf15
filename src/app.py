"""Main TUI application for knobs."""

import logging
import os
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding

from config import PanelOptions
from controller import GUI
from ui import TextualSurface, load_styles

log = logging.getLogger(__name__)


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "knobs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "knobs.log"


def configure_logging(level: int = logging.DEBUG) -> Path:
    """Send log records to the XDG state log file.

    The terminal belongs to the TUI, so nothing is logged to stderr.
    """
    log_path = _get_log_path()
    logging.basicConfig(
        filename=str(log_path),
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    return log_path


class PanelApp(App):
    """Hosts one root control panel.

    Build the panel through ``app.gui`` before calling run(); controllers
    added while the app is running are mounted live.
    """

    TITLE = "knobs"
    ENABLE_COMMAND_PALETTE = False
    CSS = load_styles()

    BINDINGS = [
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(self, options: PanelOptions | None = None) -> None:
        super().__init__()
        self.options = options or PanelOptions()
        self.surface = TextualSurface(self)
        self.gui = GUI(
            name=self.options.name,
            auto_place=self.options.auto_place,
            width=self.options.width,
            surface=self.surface,
        )

    def compose(self) -> ComposeResult:
        yield self.surface.view_for(self.gui)

    def on_resize(self, event: events.Resize) -> None:
        self.surface.notify_resize(event.size.height)

    def on_unmount(self) -> None:
        log.info(f"Panel {self.gui.label!r} closed")
