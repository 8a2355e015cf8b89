import numpy as np
import pytest
from PIL import Image

from dotpic.bitmap import BinaryImage


def make_bitmap(width, height, on=()):
    """Build a BinaryImage with only the given (x, y) pixels set."""
    pixels = np.zeros((height, width), dtype=np.uint8)
    for x, y in on:
        pixels[y, x] = 1
    return BinaryImage(pixels)


def filled_bitmap(width, height):
    return BinaryImage(np.ones((height, width), dtype=np.uint8))


@pytest.fixture
def image_file(tmp_path):
    """A small white PNG on disk."""
    path = tmp_path / "white.png"
    Image.new("L", (4, 8), 255).save(path)
    return path
