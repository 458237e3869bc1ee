"""File input/output utilities.

This package handles document reading and file processing:
- readers: XML and other markup text reading
- file_processor: Single file processing for the CLI
"""

from .readers import MockTextReader, TextReader, read_text
from .file_processor import process_file

__all__ = [
    "MockTextReader",
    "TextReader",
    "read_text",
    "process_file",
]
