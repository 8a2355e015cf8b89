import numpy as np
import pytest
from PIL import Image

from dotpic.bitmap import BinaryImage


def test_dimensions_and_pixel_access():
    image = BinaryImage.from_array([[0, 1, 0], [1, 1, 0]])
    assert image.width == 3
    assert image.height == 2
    assert image.pixel(1, 0) == 1
    assert image.pixel(0, 1) == 1
    assert image.pixel(2, 1) == 0


def test_from_bool_array():
    image = BinaryImage.from_array(np.array([[True, False]]))
    assert image.pixels.dtype == np.uint8
    assert image.pixel(0, 0) == 1


def test_pixels_are_read_only():
    source = np.zeros((2, 2), dtype=np.uint8)
    image = BinaryImage(source)
    with pytest.raises(ValueError):
        image.pixels[0, 0] = 1
    source[0, 0] = 1
    assert image.pixel(0, 0) == 0


def test_rejects_non_binary_values():
    with pytest.raises(ValueError, match="0 or 1"):
        BinaryImage.from_array([[0, 255]])


def test_rejects_wrong_rank():
    with pytest.raises(ValueError, match="2-D"):
        BinaryImage.from_array([0, 1, 1])


def test_from_pil_white_is_on():
    image = BinaryImage.from_pil(Image.new("L", (6, 4), 255))
    assert (image.width, image.height) == (6, 4)
    assert image.pixels.min() == 1


def test_from_pil_black_is_off():
    image = BinaryImage.from_pil(Image.new("L", (6, 4), 0))
    assert image.pixels.max() == 0


def test_from_pil_accepts_rgb():
    image = BinaryImage.from_pil(Image.new("RGB", (3, 3), (255, 255, 255)))
    assert image.pixels.min() == 1


def test_from_pil_threshold_without_dither():
    img = Image.new("L", (4, 1))
    img.putdata([0, 127, 128, 255])
    image = BinaryImage.from_pil(img, dither=False)
    assert image.pixels.tolist() == [[0, 0, 1, 1]]


def test_from_pil_dither_mixes_mid_grey():
    image = BinaryImage.from_pil(Image.new("L", (8, 8), 128), dither=True)
    assert 0 < image.pixels.sum() < 64


def test_rejects_fractional_values():
    with pytest.raises(ValueError, match="0 or 1"):
        BinaryImage.from_array([[0.0, 0.5]])


def test_accepts_whole_floats():
    image = BinaryImage.from_array([[0.0, 1.0]])
    assert image.pixels.dtype == np.uint8
    assert image.pixels.tolist() == [[0, 1]]
