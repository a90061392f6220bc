import pytest

from wallpaper_palette.color import Color
from wallpaper_palette.scheme import ColorScheme

from .images import gradient_image


@pytest.fixture
def scheme():
    return ColorScheme(
        wallpaper="/path/to/wallpaper.jpg",
        is_dark=True,
        background=Color(0.1, 0.1, 0.1),
        foreground=Color(0.9, 0.9, 0.9),
        cursor=Color(0.8, 0.8, 0.8),
        colors=[Color(i / 15, 0.5, 1 - i / 15) for i in range(16)],
    )


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "wallpaper.png"
    gradient_image(320, 180).save(path)
    return path
