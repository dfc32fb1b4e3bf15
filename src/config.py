"""Configuration dataclasses for knobs."""

import logging
from dataclasses import dataclass

from constants import DEFAULT_PANEL_NAME, DEFAULT_PANEL_WIDTH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class PanelOptions:
    """Options for the root control panel.

    width=None lets the panel size itself to its content.
    """

    name: str = DEFAULT_PANEL_NAME
    auto_place: bool = True
    width: int | None = DEFAULT_PANEL_WIDTH
    log_level: str = "DEBUG"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.width is not None and self.width <= 0:
            raise ValueError(f"Panel width must be positive, got {self.width}")

    @property
    def logging_level(self) -> int:
        """The numeric logging level for log_level."""
        return getattr(logging, self.log_level)
