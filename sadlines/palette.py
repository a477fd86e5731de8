from dataclasses import dataclass
from typing import Tuple

from sadlines.config import PALETTES as PALETTE_DEFS, BACKGROUND_FADE_ALPHA

Color = Tuple[int, int, int, int]


def hex_to_rgba(h: str) -> Color:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` into an RGBA tuple."""
    h = h.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) == 6:
        h += "FF"
    if len(h) != 8:
        raise ValueError(f"Bad colour string: #{h}")
    try:
        return tuple(int(h[i:i + 2], 16) for i in range(0, 8, 2))
    except ValueError:
        raise ValueError(f"Bad colour string: #{h}") from None


@dataclass(frozen=True)
class Palette:
    name: str
    bg: Color
    main: Color
    subtle: Color
    accumulated: Color
    puddle_overlay: Color

    @classmethod
    def from_hex(cls, definition):
        return cls(
            name=definition["name"],
            bg=hex_to_rgba(definition["bg"]),
            main=hex_to_rgba(definition["main"]),
            subtle=hex_to_rgba(definition["subtle"]),
            accumulated=hex_to_rgba(definition["accumulated"]),
            puddle_overlay=hex_to_rgba(definition["puddle_overlay"]),
        )

    def role(self, name):
        # Lines keep a role ("main" / "subtle"), not a concrete colour
        return getattr(self, name)


def fade_color(palette, alpha=BACKGROUND_FADE_ALPHA):
    r, g, b, _ = palette.bg
    return (r, g, b, alpha)


def toggle_index(index):
    return (index + 1) % len(PALETTES)


PALETTES = tuple(Palette.from_hex(p) for p in PALETTE_DEFS)
