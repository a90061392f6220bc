from ..errors import InputError
from ..scheme import ColorScheme


def load_scheme_from_json(json_path):
    """Load a color scheme previously saved with export_json.

    Args:
        json_path: Path to a scheme JSON file

    Returns:
        ColorScheme

    Raises:
        InputError: the file is missing, unreadable or not a scheme
    """
    try:
        with open(json_path) as f:
            return ColorScheme.from_json(f.read())
    except OSError as exc:
        raise InputError(f"Failed to read scheme file {json_path}: {exc}") from exc
    except (ValueError, KeyError, TypeError) as exc:
        raise InputError(f"Failed to parse color scheme {json_path}: {exc}") from exc
