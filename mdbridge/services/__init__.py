"""Service layer public exports."""

from .files import MarkdownFileService, FileAccessError, ReadError, WriteError, ListError  # noqa: F401

__all__ = [
    'MarkdownFileService',
    'FileAccessError',
    'ReadError',
    'WriteError',
    'ListError'
]
