"""Terminal and environment checks behind automatic color selection."""

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from ttycolors.constants import NO_COLOR_ENV

log = logging.getLogger("ttycolors")


def is_tty(stream: TextIO | None = None) -> bool:
    """Return whether the stream (stdout by default) is an interactive terminal.

    A missing stream or a failing ``isatty()`` call, for example on a closed
    descriptor, counts as not a terminal.
    """
    if stream is None:
        stream = sys.stdout
    if stream is None or not hasattr(stream, "isatty"):
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError) as e:
        log.debug("isatty failed on %r: %s", stream, e)
        return False


def no_color_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether NO_COLOR is present, whatever its value."""
    env = os.environ if environ is None else environ
    return NO_COLOR_ENV in env
