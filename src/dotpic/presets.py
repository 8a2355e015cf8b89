from dotpic.charsets import BLOCKS as BLOCK_GLYPHS
from dotpic.charsets import BRAILLE as BRAILLE_GLYPHS
from dotpic.model import CellTemplate, GlyphAlphabet, Preset

# Row-major dot order, one entry per dot: value is the bit the dot sets
BLOCKS_TEMPLATE = CellTemplate(
    cell_width=2,
    cell_height=2,
    bit_positions=(
        0, 1,
        2, 3,
    ),
)

# Standard braille numbering: left column dots 1,2,3,7 and right column dots 4,5,6,8
BRAILLE_TEMPLATE = CellTemplate(
    cell_width=2,
    cell_height=4,
    bit_positions=(
        0, 3,
        1, 4,
        2, 5,
        6, 7,
    ),
)

BLOCKS = Preset("blocks", BLOCKS_TEMPLATE, GlyphAlphabet(BLOCK_GLYPHS))
BRAILLE = Preset("braille", BRAILLE_TEMPLATE, GlyphAlphabet(BRAILLE_GLYPHS))

PRESETS = {p.name: p for p in (BLOCKS, BRAILLE)}


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}, expected one of: {', '.join(sorted(PRESETS))}") from None
