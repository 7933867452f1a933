"""ANSI style and color codes that switch off outside interactive terminals."""

from ttycolors.codes import init, init_auto, init_off, init_on
from ttycolors.models import Attributes, Codes, Color, ColorMode, Colors

__version__ = "0.2.0"

__all__ = [
    "Attributes",
    "Codes",
    "Color",
    "ColorMode",
    "Colors",
    "__version__",
    "init",
    "init_auto",
    "init_off",
    "init_on",
]
