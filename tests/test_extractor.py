import pytest
from PIL import Image

from wallpaper_palette.color import Color
from wallpaper_palette.errors import InputError
from wallpaper_palette.extractor import ColorExtractor, load_image
from wallpaper_palette.options import ExtractionOptions

from .images import gradient_image, two_block_image


class BlockBitmap:
    """20x20 bitmap: orange on the left, teal on the right."""

    def width(self):
        return 20

    def height(self):
        return 20

    def pixel_at(self, x, y):
        return (230, 120, 30, 255) if x < 10 else (20, 140, 150, 255)


def test_two_color_image():
    # Every pixel is sampled; the default stride of 4 would see one pixel of a 4x4 image
    extractor = ColorExtractor(sample_step=1, random_state=0)
    scheme = extractor.extract_from_image(
        two_block_image(4, 4), "blocks.png", ExtractionOptions(color_count=3)
    )

    assert scheme.wallpaper == "blocks.png"
    # Mean luminance of red and blue is well under 0.5
    assert scheme.is_dark
    assert len(scheme.colors) == 16

    blue = Color(0.0, 0.0, 1.0)
    assert scheme.background == pytest.approx(blue.darkened(0.6))
    assert scheme.colors[0] == scheme.background
    # Darkest saturated centroid
    assert scheme.cursor == pytest.approx(blue)


def test_extract_from_file(image_file):
    scheme = ColorExtractor(random_state=0).extract(image_file)
    assert scheme.wallpaper == str(image_file)
    assert len(scheme.colors) == 16
    assert scheme.alpha == 100


def test_extract_is_reproducible_with_seed(image_file):
    first = ColorExtractor(random_state=5).extract(image_file)
    second = ColorExtractor(random_state=5).extract(image_file)
    assert first == second


def test_large_image_is_downsampled():
    scheme = ColorExtractor(random_state=1).extract_from_image(
        gradient_image(800, 400), "big.png", ExtractionOptions(prefers_dark=False)
    )
    assert not scheme.is_dark
    assert len(scheme.colors) == 16


def test_monochrome_image_still_yields_scheme():
    scheme = ColorExtractor(random_state=0).extract_from_image(
        Image.new("RGB", (64, 64), (0, 0, 0)), "black.png"
    )
    assert scheme.is_dark
    assert len(scheme.colors) == 16
    assert scheme.cursor == scheme.foreground


def test_bitmap_interface():
    scheme = ColorExtractor(sample_step=2, random_state=0).extract_from_image(
        BlockBitmap(), "bitmap", ExtractionOptions(color_count=4)
    )
    assert len(scheme.colors) == 16
    assert scheme.wallpaper == "bitmap"


def test_no_samples_is_an_input_error(monkeypatch):
    monkeypatch.setattr("wallpaper_palette.extractor.sample_pixels", lambda *args: [])
    with pytest.raises(InputError, match="No valid pixels"):
        ColorExtractor().extract_from_image(Image.new("RGB", (8, 8)), "empty")


def test_missing_file(tmp_path):
    with pytest.raises(InputError):
        ColorExtractor().extract(tmp_path / "nope.png")


def test_undecodable_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(InputError, match="Failed to open image"):
        load_image(path)


def test_empty_image_is_an_input_error():
    with pytest.raises(InputError, match="No valid pixels"):
        ColorExtractor().extract_from_image(Image.new("RGB", (0, 0)), "empty")
