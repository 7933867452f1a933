"""Constructors for code tables."""

import logging
from collections.abc import Mapping
from typing import TextIO

from ttycolors.constants import (
    BG_BASE,
    BG_BRIGHT_BASE,
    BLINK,
    BOLD,
    FG_BASE,
    FG_BRIGHT_BASE,
    ITALIC,
    RESET,
    REVERSE,
    UNDERLINE,
    sgr,
)
from ttycolors.detection import is_tty, no_color_requested
from ttycolors.models import Attributes, Codes, ColorMode, Colors

log = logging.getLogger("ttycolors")


def init_auto(
    stream: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> Codes:
    """Return ``init_on()`` on an interactive terminal without NO_COLOR, else ``init_off()``."""
    tty = is_tty(stream)
    no_color = no_color_requested(environ)
    log.debug("tty=%s no_color=%s", tty, no_color)
    if tty and not no_color:
        return init_on()
    return init_off()


def init_on() -> Codes:
    """Return a table populated with attribute and color escape sequences."""
    return Codes(
        attr=Attributes(
            reset=sgr(RESET),
            bold=sgr(BOLD),
            italic=sgr(ITALIC),
            underline=sgr(UNDERLINE),
            blink=sgr(BLINK),
            reverse=sgr(REVERSE),
        ),
        bg=Colors.from_sgr(BG_BASE, BG_BRIGHT_BASE),
        fg=Colors.from_sgr(FG_BASE, FG_BRIGHT_BASE),
    )


def init_off() -> Codes:
    """Return a table where every attribute and color is the empty string."""
    return Codes()


def init(mode: ColorMode | str) -> Codes:
    """Select a table from a ``--color=on/off/auto`` style setting."""
    if not isinstance(mode, ColorMode):
        try:
            mode = ColorMode(mode.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in ColorMode)
            raise ValueError(f"Unknown color mode {mode!r}. Expected one of: {choices}.") from None
    if mode is ColorMode.ON:
        return init_on()
    if mode is ColorMode.OFF:
        return init_off()
    return init_auto()
