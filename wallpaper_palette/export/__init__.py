from .json_export import FORMATS, export_json, export_scheme, format_scheme

__all__ = ["FORMATS", "export_json", "export_scheme", "format_scheme"]
