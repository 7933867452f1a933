"""Palette preview rendering."""

from ttycolors.models import Codes, Color

ATTRIBUTE_NAMES = ("reset", "bold", "italic", "underline", "blink", "reverse")


def _color_line(label: str, codes: Codes, background: bool, bright: bool) -> str:
    colors = codes.bg if background else codes.fg
    cells = [
        codes.wrap(color.field_name(bright), colors.get(color, bright=bright)) for color in Color
    ]
    return f"{label:<10}" + " ".join(cells)


def render_preview(codes: Codes) -> list[str]:
    """Return one line per attribute/color group, each name drawn in its own style."""
    attrs = [codes.wrap(name, getattr(codes.attr, name)) for name in ATTRIBUTE_NAMES]
    return [
        f"{'attr':<10}" + " ".join(attrs),
        _color_line("fg", codes, background=False, bright=False),
        _color_line("fg bright", codes, background=False, bright=True),
        _color_line("bg", codes, background=True, bright=False),
        _color_line("bg bright", codes, background=True, bright=True),
    ]
