"""Code table models.

A ``Codes`` value bundles style attributes with foreground and background
colors. Every field is either an escape sequence or the empty string, so the
fields can be dropped straight into f-strings whether color is on or off.
"""

from pydantic import BaseModel, ConfigDict

from ttycolors.constants import sgr
from ttycolors.models.color import Color


class Attributes(BaseModel):
    """Terminal style attributes."""

    model_config = ConfigDict(frozen=True)

    blink: str = ""
    bold: str = ""
    italic: str = ""
    reset: str = ""
    reverse: str = ""
    underline: str = ""


class Colors(BaseModel):
    """Terminal colors, used for both foreground and background."""

    model_config = ConfigDict(frozen=True)

    black: str = ""
    red: str = ""
    green: str = ""
    yellow: str = ""
    blue: str = ""
    magenta: str = ""
    cyan: str = ""
    white: str = ""

    bright_black: str = ""
    bright_red: str = ""
    bright_green: str = ""
    bright_yellow: str = ""
    bright_blue: str = ""
    bright_magenta: str = ""
    bright_cyan: str = ""
    bright_white: str = ""

    @classmethod
    def from_sgr(cls, base: int, bright_base: int) -> "Colors":
        """Build a color set whose codes are ``base + index`` and ``bright_base + index``."""
        fields: dict[str, str] = {}
        for color in Color:
            fields[color.field_name()] = sgr(base + color.value)
            fields[color.field_name(bright=True)] = sgr(bright_base + color.value)
        return cls(**fields)

    def get(self, color: Color, bright: bool = False) -> str:
        return getattr(self, color.field_name(bright))


class Codes(BaseModel):
    """All attributes and colors for one output stream."""

    model_config = ConfigDict(frozen=True)

    attr: Attributes = Attributes()
    bg: Colors = Colors()
    fg: Colors = Colors()

    @property
    def enabled(self) -> bool:
        return self.attr.reset != ""

    def wrap(self, text: str, *sequences: str) -> str:
        """Return text preceded by the given sequences and followed by reset."""
        return f"{''.join(sequences)}{text}{self.attr.reset}"
