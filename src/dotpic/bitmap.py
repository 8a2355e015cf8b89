from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass(frozen=True, eq=False)
class BinaryImage:
    """Read-only one-bit raster. ``pixels`` has shape (height, width), values 0 or 1."""

    pixels: np.ndarray

    def __post_init__(self):
        raw = np.asarray(self.pixels)
        if raw.ndim != 2:
            raise ValueError(f"Expected a 2-D bitmap, got shape {raw.shape}")
        if not np.isin(raw, (0, 1)).all():
            raise ValueError("Bitmap values must be 0 or 1")
        arr = raw.astype(np.uint8)
        arr.flags.writeable = False
        object.__setattr__(self, "pixels", arr)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])

    @classmethod
    def from_array(cls, values) -> "BinaryImage":
        arr = np.asarray(values)
        if arr.dtype == np.bool_:
            arr = arr.astype(np.uint8)
        return cls(arr)

    @classmethod
    def from_pil(cls, image: Image.Image, dither: bool = True) -> "BinaryImage":
        """Binarize a decoded image. Bright pixels become 1, dark pixels 0.

        With ``dither`` the grey levels are diffused with Floyd-Steinberg,
        otherwise each pixel is thresholded at 128.
        """
        gray = image.convert("L")
        mode = Image.Dither.FLOYDSTEINBERG if dither else Image.Dither.NONE
        mono = gray.convert("1", dither=mode)
        return cls(np.asarray(mono, dtype=np.uint8))
