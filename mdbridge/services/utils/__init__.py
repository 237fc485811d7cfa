"""Utility subpackage (encoding detection, shared helpers)."""

from .encoding import DecodeResult, decode_bytes, resolve_encoding  # noqa: F401

__all__ = [
    'DecodeResult',
    'decode_bytes',
    'resolve_encoding'
]
