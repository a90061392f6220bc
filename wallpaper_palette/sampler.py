"""
Downsample an image and pull a filtered list of sample colors out of it.
"""

import logging
from typing import List, Protocol, Tuple

import numpy as np
from PIL import Image

from .color import Color

logger = logging.getLogger(__name__)

MAX_DIMENSION = 200
SAMPLE_STEP = 4

# Pixels with alpha below this are treated as transparent padding
MIN_ALPHA = 200

# Average brightness must fall strictly inside this band
MIN_BRIGHTNESS = 0.08
MAX_BRIGHTNESS = 0.92

# Below this many filtered samples the unfiltered grid is used instead
MIN_SAMPLES = 100


class Bitmap(Protocol):
    """Anything that can hand out 8-bit RGBA pixels."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def pixel_at(self, x: int, y: int) -> Tuple[int, int, int, int]: ...


def bitmap_to_image(bitmap: Bitmap) -> Image.Image:
    """Copy a Bitmap into a Pillow RGBA image."""
    width, height = bitmap.width(), bitmap.height()
    image = Image.new("RGBA", (width, height))
    image.putdata(
        [tuple(bitmap.pixel_at(x, y)) for y in range(height) for x in range(width)]
    )
    return image


def as_image(source) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    return bitmap_to_image(source)


def resize_image(image: Image.Image, max_dimension: int = MAX_DIMENSION) -> Image.Image:
    """Shrink so the longer edge equals max_dimension, keeping aspect ratio.

    Images already within bounds are returned untouched.
    """
    width, height = image.size
    if width <= max_dimension and height <= max_dimension:
        return image

    # Palette and bilevel modes silently fall back to nearest-neighbour
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")

    scale = max_dimension / max(width, height)
    new_size = (max(1, round(width * scale)), max(1, round(height * scale)))
    logger.debug("Resizing %dx%d -> %dx%d", width, height, *new_size)
    return image.resize(new_size, Image.Resampling.BILINEAR)


def _stride_grid(image: Image.Image, step: int) -> np.ndarray:
    """RGBA pixels on a fixed stride grid, row-major, shape (n, 4)."""
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    return rgba[::step, ::step].reshape(-1, 4)


def sample_pixels(image: Image.Image, step: int = SAMPLE_STEP) -> List[Color]:
    """
    Sample every `step`-th pixel, skipping transparent and near-black/white ones.

    If fewer than MIN_SAMPLES pixels survive the filter (flat or heavily
    bordered images), the same grid is returned unfiltered instead.

    Returns:
        List of Color in row-major order; empty only for an empty image.
    """
    grid = _stride_grid(image, step)
    rgb = grid[:, :3].astype(np.float64) / 255.0

    brightness = rgb.sum(axis=1) / 3.0
    mask = (
        (grid[:, 3] >= MIN_ALPHA)
        & (brightness > MIN_BRIGHTNESS)
        & (brightness < MAX_BRIGHTNESS)
    )
    samples = rgb[mask]

    if len(samples) < MIN_SAMPLES:
        logger.debug(
            "Only %d of %d pixels passed filtering, sampling unfiltered",
            len(samples),
            len(rgb),
        )
        samples = rgb
    else:
        logger.debug("Sampled %d of %d pixels", len(samples), len(rgb))

    return [Color(*row) for row in samples.tolist()]
