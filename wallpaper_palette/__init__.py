from .color import Color
from .errors import ExportError, InputError, OptionsError, PaletteError
from .extractor import ColorExtractor, load_image
from .kmeans import kmeans
from .options import ExtractionOptions
from .palette import generate_scheme, load_scheme_from_json
from .scheme import ColorScheme

__all__ = [
    "Color",
    "ColorExtractor",
    "ColorScheme",
    "ExportError",
    "ExtractionOptions",
    "InputError",
    "OptionsError",
    "PaletteError",
    "generate_scheme",
    "kmeans",
    "load_image",
    "load_scheme_from_json",
]
