# colorlevel/level.py
"""Color capability levels.

See https://en.wikipedia.org/wiki/ANSI_escape_code#Colors
"""

from enum import IntEnum
from typing import Optional


class Level(IntEnum):
    """Number of colors a stream can render, ordered from none to true color."""

    NONE = 0
    BASIC = 1
    ANSI256 = 2
    TRUECOLOR = 3

    def __str__(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_force_color(cls, value: Optional[str]) -> "Level":
        """Parse a FORCE_COLOR value.

        "true" is BASIC, "false" is NONE and the integers 0-3 map onto the
        levels by value. Anything else, including an empty string or an out
        of range integer, is BASIC.
        """
        if value == "true":
            return cls.BASIC
        if value == "false":
            return cls.NONE
        try:
            number = int(value)
        except (TypeError, ValueError):
            return cls.BASIC
        if 0 <= number <= 3:
            return cls(number)
        return cls.BASIC


_LABELS = {
    Level.NONE: "none",
    Level.BASIC: "basic",
    Level.ANSI256: "256",
    Level.TRUECOLOR: "truecolor",
}
