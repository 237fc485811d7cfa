"""Local markdown file access (read with encoding detection, save, list)."""

from .errors import FileAccessError, ReadError, WriteError, ListError  # noqa: F401
from .service import MarkdownFileService, is_markdown_name  # noqa: F401

__all__ = [
    'FileAccessError',
    'ReadError',
    'WriteError',
    'ListError',
    'MarkdownFileService',
    'is_markdown_name'
]
