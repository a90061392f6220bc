import pytest

from wallpaper_palette.errors import OptionsError, PaletteError
from wallpaper_palette.options import ExtractionOptions


def test_defaults():
    opts = ExtractionOptions()
    assert opts.color_count == 16
    assert opts.prefers_dark is None
    assert opts.contrast_ratio == pytest.approx(3.0)
    assert opts.background_intensity == pytest.approx(0.6)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"color_count": 0},
        {"contrast_ratio": 1.0},
        {"contrast_ratio": 5.0},
        {"background_intensity": 0.1},
        {"background_intensity": 0.95},
    ],
)
def test_out_of_range_values_are_rejected(kwargs):
    with pytest.raises(OptionsError):
        ExtractionOptions(**kwargs)


def test_options_error_is_value_error():
    assert issubclass(OptionsError, ValueError)
    assert issubclass(OptionsError, PaletteError)


def test_range_ends_are_accepted():
    ExtractionOptions(contrast_ratio=1.5, background_intensity=0.3)
    ExtractionOptions(contrast_ratio=4.5, background_intensity=0.9)


def test_from_mapping():
    opts = ExtractionOptions.from_mapping(
        {"prefer_dark": False, "contrast_ratio": 4.0, "engine": "native"}
    )
    assert opts.prefers_dark is False
    assert opts.contrast_ratio == 4.0
    assert opts.color_count == 16


def test_from_mapping_validates():
    with pytest.raises(OptionsError):
        ExtractionOptions.from_mapping({"background_intensity": 2.0})
