"""
Exporters package initialization.
"""

from .json_writer import generate_export_json, write_json

__all__ = [
    "generate_export_json",
    "write_json",
]
