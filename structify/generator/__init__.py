"""
Code generation layer: struct rendering, imports and Go file export.
"""

from .exporter import export_go_file, generate_filename, render_go_file
from .formatter import add_line_numbers, cleanup_code
from .imports import get_required_imports
from .struct_generator import StructGenerator, build_tag, generate_struct, resolve_struct_name

__all__ = [
    "StructGenerator",
    "generate_struct",
    "build_tag",
    "resolve_struct_name",
    "get_required_imports",
    "render_go_file",
    "generate_filename",
    "export_go_file",
    "add_line_numbers",
    "cleanup_code",
]
