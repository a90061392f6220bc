"""
Image -> ColorScheme pipeline: sample, cluster, synthesize.
"""

import logging
import os

from PIL import Image, UnidentifiedImageError

from .errors import InputError
from .kmeans import MAX_ITERATIONS, kmeans
from .options import ExtractionOptions
from .palette.generator import generate_scheme
from .sampler import MAX_DIMENSION, SAMPLE_STEP, as_image, resize_image, sample_pixels

logger = logging.getLogger(__name__)


def load_image(image_path):
    """Open and decode an image file, raising InputError if that fails."""
    try:
        with Image.open(image_path) as img:
            img.load()
            return img.copy()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise InputError(f"Failed to open image {image_path}: {exc}") from exc


class ColorExtractor:
    """Extracts dominant colors from images using k-means clustering.

    Randomness for k-means++ seeding comes from `random_state`: None draws
    fresh entropy per call, an int seed makes every call reproducible. A
    shared numpy RandomState must not be used from several threads at once.
    """

    def __init__(
        self,
        max_dimension=MAX_DIMENSION,
        sample_step=SAMPLE_STEP,
        max_iterations=MAX_ITERATIONS,
        random_state=None,
    ):
        self.max_dimension = max_dimension
        self.sample_step = sample_step
        self.max_iterations = max_iterations
        self.random_state = random_state

    def extract(self, image_path, options=None):
        """Extract a color scheme from an image file."""
        image = load_image(image_path)
        return self.extract_from_image(image, os.fspath(image_path), options)

    def extract_from_image(self, image, wallpaper, options=None):
        """
        Extract a color scheme from an already decoded image.

        Args:
            image: Pillow image, or any object with width(), height() and
                pixel_at(x, y) returning 8-bit (r, g, b, a)
            wallpaper: Identifier stored on the scheme as-is
            options: ExtractionOptions (defaults if None)

        Returns:
            ColorScheme

        Raises:
            InputError: the image produced no samples at all
        """
        options = options or ExtractionOptions()

        resized = resize_image(as_image(image), self.max_dimension)
        samples = sample_pixels(resized, self.sample_step)
        if not samples:
            raise InputError("No valid pixels found in image")

        centroids = kmeans(
            samples,
            options.color_count,
            max_iterations=self.max_iterations,
            random_state=self.random_state,
        )
        # Darkest first; palette synthesis relies on this order
        centroids.sort(key=lambda c: c.luminance)

        return generate_scheme(wallpaper, centroids, options)
