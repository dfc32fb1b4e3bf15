"""Shared constants for knobs."""

KNOBS_VERSION = "0.3.0"

# Root panel defaults
DEFAULT_PANEL_NAME = "Controls"
DEFAULT_PANEL_WIDTH = 48

# Number of slider steps across the full min..max range. Used for the
# implicit step and for slider wheel increments.
SLIDER_RESOLUTION = 1000

# Step used by numbers that have no bounds and no explicit step
DEFAULT_STEP = 1

# Shift + arrow key multiplies the step by this much
COARSE_STEP_MULTIPLIER = 10

# Label shown on function controller buttons
FIRE_LABEL = "Fire"

# Color channel range for packed integer colors
CHANNEL_MAX = 255
