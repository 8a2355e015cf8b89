from dataclasses import dataclass


class ConfigurationMismatch(ValueError):
    """A template and alphabet that cannot be used together."""


@dataclass(frozen=True)
class CellTemplate:
    """Cell geometry plus the bit each dot sets in the glyph index.

    ``bit_positions`` is indexed by ``dot_y * cell_width + dot_x``.
    """

    cell_width: int
    cell_height: int
    bit_positions: tuple[int, ...]

    def __post_init__(self):
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ConfigurationMismatch(f"Cell size must be positive: {self.cell_width}x{self.cell_height}")
        object.__setattr__(self, "bit_positions", tuple(self.bit_positions))
        if len(self.bit_positions) != self.dot_count:
            raise ConfigurationMismatch(
                f"Expected {self.dot_count} bit positions for a "
                f"{self.cell_width}x{self.cell_height} cell, got {len(self.bit_positions)}"
            )
        if sorted(self.bit_positions) != list(range(self.dot_count)):
            raise ConfigurationMismatch(
                f"Bit positions must be a permutation of 0..{self.dot_count - 1}: {self.bit_positions}"
            )

    @property
    def dot_count(self) -> int:
        return self.cell_width * self.cell_height

    def bit_for(self, dot_x: int, dot_y: int) -> int:
        return self.bit_positions[dot_y * self.cell_width + dot_x]


@dataclass(frozen=True)
class GlyphAlphabet:
    glyphs: str

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]


def check_pair(template: CellTemplate, alphabet: GlyphAlphabet) -> None:
    expected = 1 << template.dot_count
    if len(alphabet) != expected:
        raise ConfigurationMismatch(
            f"Alphabet has {len(alphabet)} glyphs but a "
            f"{template.cell_width}x{template.cell_height} cell needs {expected}"
        )


@dataclass(frozen=True)
class Preset:
    name: str
    template: CellTemplate
    alphabet: GlyphAlphabet

    def __post_init__(self):
        check_pair(self.template, self.alphabet)
