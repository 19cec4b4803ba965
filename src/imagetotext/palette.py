from dataclasses import dataclass

from imagetotext.charsets import SHADES


@dataclass(frozen=True)
class Palette:
    """Glyphs used for each brightness level, darkest first.

    ``inverted`` swaps the order so bright pixels get the dense glyphs, which
    suits light text on a dark background.
    """

    glyphs: str = SHADES
    inverted: bool = False

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError("Palette needs at least one glyph")

    def __len__(self) -> int:
        return len(self.glyphs)

    @property
    def shades(self) -> str:
        return self.glyphs[::-1] if self.inverted else self.glyphs

    def invert(self) -> "Palette":
        return Palette(glyphs=self.glyphs, inverted=not self.inverted)
