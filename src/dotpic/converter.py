import logging
from pathlib import Path

from PIL import Image

from dotpic.bitmap import BinaryImage
from dotpic.model import Preset
from dotpic.presets import get_preset
from dotpic.renderer import render_grid

logger = logging.getLogger(__name__)


def select_presets(braille: bool = False, rect: bool = False) -> list[Preset]:
    """Pick presets from the CLI flags.

    Braille is drawn unless only ``rect`` was asked for; blocks come first when both are.
    """
    presets = []
    if rect:
        presets.append(get_preset("blocks"))
    if braille or not rect:
        presets.append(get_preset("braille"))
    return presets


def image_to_glyphs(
    image: Image.Image | str | Path,
    presets: list[Preset],
    dither: bool = True,
) -> list[str]:
    """Render an image once per preset, returning the texts in preset order."""
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    logger.debug("Loaded %dx%d image in mode %s", image.width, image.height, image.mode)

    bitmap = BinaryImage.from_pil(image, dither=dither)
    logger.debug("Binarized with %s", "Floyd-Steinberg dithering" if dither else "a fixed threshold")

    outputs = []
    for preset in presets:
        grid = render_grid(bitmap, preset.template, preset.alphabet)
        logger.debug("Rendered %s as %dx%d cells", preset.name, grid.cols, grid.rows)
        outputs.append(str(grid))
    return outputs
