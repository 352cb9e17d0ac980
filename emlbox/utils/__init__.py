"""Utility functions"""

from .filename_utils import extract_subject, sanitize_filename
from .header_utils import get_header_value, iter_header_lines
from .path_utils import ensure_file_path, find_eml_files

__all__ = [
    "extract_subject",
    "sanitize_filename",
    "get_header_value",
    "iter_header_lines",
    "ensure_file_path",
    "find_eml_files",
]
