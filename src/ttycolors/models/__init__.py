"""Model package for ttycolors."""

from ttycolors.models.codes import Attributes, Codes, Colors
from ttycolors.models.color import Color
from ttycolors.models.color_mode import ColorMode

__all__ = [
    "Attributes",
    "Codes",
    "Color",
    "ColorMode",
    "Colors",
]
