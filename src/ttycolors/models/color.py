"""The eight base terminal colors."""

from enum import Enum


class Color(Enum):
    """Base color, valued by its SGR offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    def field_name(self, bright: bool = False) -> str:
        """Return the matching attribute name on Colors."""
        name = self.name.lower()
        return f"bright_{name}" if bright else name
