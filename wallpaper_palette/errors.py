class PaletteError(Exception):
    """Base class for everything this package raises on purpose."""


class InputError(PaletteError):
    """The source image or a persisted scheme could not be used."""


class OptionsError(PaletteError, ValueError):
    """Extraction options fall outside their accepted ranges."""


class ExportError(PaletteError):
    """A scheme could not be written to disk."""
