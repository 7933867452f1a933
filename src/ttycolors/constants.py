"""Escape sequence building blocks."""

ESC = "\x1b"
CSI = f"{ESC}["

NO_COLOR_ENV = "NO_COLOR"

# SGR parameters
RESET = 0
BOLD = 1
ITALIC = 3
UNDERLINE = 4
BLINK = 5
REVERSE = 7

FG_BASE = 30
FG_BRIGHT_BASE = 90
BG_BASE = 40
BG_BRIGHT_BASE = 100


def sgr(code: int) -> str:
    """Return the Select Graphic Rendition sequence for a single parameter."""
    return f"{CSI}{code}m"
