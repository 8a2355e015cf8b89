from dataclasses import dataclass, field

import numpy as np

from dotpic.bitmap import BinaryImage
from dotpic.model import CellTemplate, GlyphAlphabet, Preset, check_pair


@dataclass
class CellGrid:
    lines: list[str] = field(default_factory=list)  # one string per cell row

    @property
    def rows(self) -> int:
        return len(self.lines)

    @property
    def cols(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    def __str__(self) -> str:
        return "\n".join(self.lines)


def _ceil_div(n: int, m: int) -> int:
    return (n + m - 1) // m


def cell_counts(width: int, height: int, template: CellTemplate) -> tuple[int, int]:
    """Return (cols, rows) of cells needed to cover a width x height bitmap."""
    return _ceil_div(width, template.cell_width), _ceil_div(height, template.cell_height)


def _bit_weights(template: CellTemplate) -> np.ndarray:
    """Per-dot value added to the glyph index when the dot is on, shape (cell_h, cell_w)."""
    bits = np.array(template.bit_positions, dtype=np.int64).reshape(template.cell_height, template.cell_width)
    return np.left_shift(1, bits)


def render_grid(image: BinaryImage, template: CellTemplate, alphabet: GlyphAlphabet) -> CellGrid:
    """Map every cell of the bitmap to the glyph indexed by its packed dots.

    Cells hanging off the right or bottom edge are padded with off dots.
    """
    check_pair(template, alphabet)

    cw = template.cell_width
    ch = template.cell_height
    cols, rows = cell_counts(image.width, image.height, template)

    if rows == 0 or cols == 0:
        return CellGrid()

    padded = np.zeros((rows * ch, cols * cw), dtype=np.int64)
    padded[: image.height, : image.width] = image.pixels

    # (rows, cell_h, cols, cell_w) -> (rows, cols, cell_h, cell_w)
    cells = padded.reshape(rows, ch, cols, cw).transpose(0, 2, 1, 3)
    indices = (cells * _bit_weights(template)).sum(axis=(2, 3))

    glyphs = np.array(list(alphabet.glyphs))
    return CellGrid(lines=["".join(glyphs[row]) for row in indices])


def render(image: BinaryImage, template: CellTemplate, alphabet: GlyphAlphabet) -> str:
    return str(render_grid(image, template, alphabet))


def render_preset(image: BinaryImage, preset: Preset) -> str:
    return render(image, preset.template, preset.alphabet)
