import os

from ..errors import ExportError

FORMATS = ("json", "shell", "css")


def format_scheme(scheme, fmt="json"):
    """Render a scheme as json, shell variables, or CSS custom properties."""
    if fmt == "json":
        return scheme.to_json()
    if fmt == "shell":
        return scheme.to_shell_format()
    if fmt == "css":
        return scheme.to_css_format()
    raise ValueError(f"Unknown format '{fmt}'. Use json, shell, or css.")


def export_scheme(scheme, filepath, fmt="json"):
    """Write a scheme to `filepath`, creating parent directories.

    Args:
        scheme: The ColorScheme
        filepath: Output file path
        fmt: One of FORMATS
    """
    text = format_scheme(scheme, fmt)

    try:
        parent = os.path.dirname(filepath)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with open(filepath, "w") as f:
            f.write(text + "\n")
    except OSError as exc:
        raise ExportError(f"Failed to write scheme to {filepath}: {exc}") from exc


def export_json(scheme, filepath):
    """Save a scheme as JSON, readable again with load_scheme_from_json."""
    export_scheme(scheme, filepath, "json")
