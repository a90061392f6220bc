import logging
from collections import namedtuple

from ..color import Color
from ..options import CONTRAST_RATIO_RANGE, ExtractionOptions
from ..scheme import ColorScheme

logger = logging.getLogger(__name__)

ACCENT_COUNT = 6

DARK_FALLBACK_BACKGROUND = Color(0.1, 0.1, 0.1)
DARK_FOREGROUND = Color(0.9, 0.9, 0.9)
LIGHT_FALLBACK_BACKGROUND = Color(0.95, 0.95, 0.95)
LIGHT_FOREGROUND = Color(0.1, 0.1, 0.1)

# Accent selection
MIN_ACCENT_SATURATION = 0.2
WASHED_OUT_SATURATION = 0.4
WASHED_OUT_BOOST = 1.5

# Bright row (colors 8-15)
BRIGHT_BACKGROUND_LIFT = 0.15
DARK_BRIGHT_SATURATION = 1.2
DARK_BRIGHT_LIFT = 0.15
LIGHT_BRIGHT_SATURATION = 1.1

MIN_CURSOR_SATURATION = 0.3

# red, green, yellow, blue, magenta, cyan
DEFAULT_ACCENTS = (
    Color(0.8, 0.2, 0.2),
    Color(0.2, 0.8, 0.2),
    Color(0.8, 0.8, 0.2),
    Color(0.2, 0.4, 0.8),
    Color(0.8, 0.2, 0.8),
    Color(0.2, 0.8, 0.8),
)

ContrastAdjustments = namedtuple(
    "ContrastAdjustments",
    ["dark_threshold", "dark_adjustment", "light_threshold", "light_adjustment"],
)


def contrast_adjustments(contrast_ratio):
    """Map a contrast ratio (1.5-4.5) onto accent luminance corrections."""
    low, high = CONTRAST_RATIO_RANGE
    t = (contrast_ratio - low) / (high - low)
    return ContrastAdjustments(
        dark_threshold=0.15 + t * 0.30,
        dark_adjustment=0.10 + t * 0.25,
        light_threshold=0.85 - t * 0.30,
        light_adjustment=0.20 + t * 0.30,
    )


def detect_dark(colors):
    """Dark when the mean luminance of the colors is below 0.5."""
    if not colors:
        return False
    return sum(c.luminance for c in colors) / len(colors) < 0.5


def select_terminal_colors(colors, count, is_dark, contrast_ratio):
    """Pick `count` accent colors spread across the hue wheel.

    Saturated colors are preferred; if there are not enough of them the whole
    list is used. Picks are contrast-corrected against the background and
    padded from DEFAULT_ACCENTS when the image has too little variety.
    """
    candidates = [c for c in colors if c.saturation > MIN_ACCENT_SATURATION]
    if len(candidates) < count:
        candidates = list(colors)
    candidates.sort(key=lambda c: c.hue)

    adjust = contrast_adjustments(contrast_ratio)
    step = max(len(candidates) // count, 1)

    selected = []
    for color in candidates[: count * step : step]:
        if color.saturation < WASHED_OUT_SATURATION:
            color = color.saturated(WASHED_OUT_BOOST)

        if is_dark and color.luminance < adjust.dark_threshold:
            color = color.lightened(adjust.dark_adjustment)
        elif not is_dark and color.luminance > adjust.light_threshold:
            color = color.darkened(adjust.light_adjustment)

        selected.append(color)

    while len(selected) < count:
        selected.append(DEFAULT_ACCENTS[len(selected) % len(DEFAULT_ACCENTS)])

    return selected[:count]


def pick_cursor(colors, foreground):
    """First color with noticeable saturation, else the foreground."""
    for color in colors:
        if color.saturation > MIN_CURSOR_SATURATION:
            return color
    return foreground


def generate_scheme(wallpaper, dominant_colors, options=None):
    """
    Build a 16-color terminal scheme from luminance-sorted dominant colors.

    Args:
        wallpaper: Source image identifier, carried through unchanged
        dominant_colors: Colors sorted by luminance, darkest first
        options: ExtractionOptions (defaults if None)

    Returns:
        ColorScheme with pywal layout: 0 background, 1-6 accents,
        7 foreground, 8 lifted background, 9-14 bright accents, 15 foreground
    """
    options = options or ExtractionOptions()

    if options.prefers_dark is None:
        is_dark = detect_dark(dominant_colors)
    else:
        is_dark = options.prefers_dark
    logger.debug(
        "Using %s mode (%s)",
        "dark" if is_dark else "light",
        "auto" if options.prefers_dark is None else "forced",
    )

    if is_dark:
        background = (
            dominant_colors[0].darkened(options.background_intensity)
            if dominant_colors
            else DARK_FALLBACK_BACKGROUND
        )
        foreground = DARK_FOREGROUND
    else:
        background = (
            dominant_colors[-1].lightened(options.background_intensity)
            if dominant_colors
            else LIGHT_FALLBACK_BACKGROUND
        )
        foreground = LIGHT_FOREGROUND

    accents = select_terminal_colors(
        dominant_colors, ACCENT_COUNT, is_dark, options.contrast_ratio
    )

    if is_dark:
        bright = [
            c.saturated(DARK_BRIGHT_SATURATION).lightened(DARK_BRIGHT_LIFT) for c in accents
        ]
    else:
        bright = [c.saturated(LIGHT_BRIGHT_SATURATION) for c in accents]

    colors = (
        [background]
        + accents
        + [foreground, background.lightened(BRIGHT_BACKGROUND_LIFT)]
        + bright
        + [foreground]
    )

    return ColorScheme(
        wallpaper=wallpaper,
        is_dark=is_dark,
        background=background,
        foreground=foreground,
        cursor=pick_cursor(dominant_colors, foreground),
        colors=colors,
    )
