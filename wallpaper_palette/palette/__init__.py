from .generator import generate_scheme, select_terminal_colors
from .loader import load_scheme_from_json

__all__ = ["generate_scheme", "select_terminal_colors", "load_scheme_from_json"]
