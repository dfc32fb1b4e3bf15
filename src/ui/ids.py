"""Widget class/ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, PANEL_ROOT
        self.query_one(css(PANEL_ROOT))
    """
    return f"#{widget_id}"


def cls(class_name: str) -> str:
    """Return a CSS selector for a class name."""
    return f".{class_name}"


# Root panel ID
PANEL_ROOT = "panel-root"

# Panel parts
PANEL = "gui"
TITLE = "title"
CHILDREN = "children"
HEADER = "header"

# Controller row parts
CONTROLLER = "controller"
NAME = "name"
WIDGET = "widget"
DISPLAY = "display"
SWATCH = "swatch"
SLIDER = "slider"

# State classes
ROOT = "root"
AUTO_PLACE = "auto-place"
CLOSED = "closed"
DISABLED = "disabled"
ACTIVE = "active"
HAS_SLIDER = "has-slider"
UNLISTED = "unlisted"
