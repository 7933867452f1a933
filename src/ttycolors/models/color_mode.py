"""Color mode model for ttycolors."""

from enum import Enum


class ColorMode(str, Enum):
    """How a caller's --color flag selects a code table."""

    ON = "on"
    OFF = "off"
    AUTO = "auto"
