from dataclasses import dataclass
from typing import Optional

from .errors import OptionsError

CONTRAST_RATIO_RANGE = (1.5, 4.5)
BACKGROUND_INTENSITY_RANGE = (0.3, 0.9)

# Config-file key -> option field
_CONFIG_KEYS = {
    "color_count": "color_count",
    "prefer_dark": "prefers_dark",
    "prefers_dark": "prefers_dark",
    "contrast_ratio": "contrast_ratio",
    "background_intensity": "background_intensity",
}


@dataclass(frozen=True)
class ExtractionOptions:
    """Knobs for turning an image into a color scheme.

    Attributes:
        color_count: Number of k-means clusters to extract
        prefers_dark: Force dark (True), light (False), or auto-detect (None)
        contrast_ratio: Accent correction strength, 1.5 (subtle) to 4.5 (strong)
        background_intensity: How far the background is pushed toward
            black or white, 0.3 (subtle) to 0.9 (intense)
    """

    color_count: int = 16
    prefers_dark: Optional[bool] = None
    contrast_ratio: float = 3.0
    background_intensity: float = 0.6

    def __post_init__(self):
        if self.color_count < 1:
            raise OptionsError(f"color_count must be at least 1, got {self.color_count}")
        _check_range("contrast_ratio", self.contrast_ratio, CONTRAST_RATIO_RANGE)
        _check_range(
            "background_intensity", self.background_intensity, BACKGROUND_INTENSITY_RANGE
        )

    @classmethod
    def from_mapping(cls, mapping):
        """Build options from a config section such as ``[colors]``.

        Unknown keys are ignored and missing ones keep their defaults.
        """
        kwargs = {}
        for key, value in mapping.items():
            name = _CONFIG_KEYS.get(key)
            if name is not None:
                kwargs[name] = value
        return cls(**kwargs)


def _check_range(name, value, bounds):
    low, high = bounds
    if not low <= value <= high:
        raise OptionsError(f"{name} must be between {low} and {high}, got {value}")
