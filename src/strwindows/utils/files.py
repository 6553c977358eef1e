"""Utility helpers for loading text sources from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Union

BufferSource = Union[bytes, bytearray, memoryview]


class SourceDecodeError(ValueError):
    """Raised when a source buffer is not valid UTF-8."""


def validate_utf8(data: BufferSource, *, name: str = "<buffer>") -> None:
    """Check that ``data`` decodes as UTF-8 before it is windowed."""
    try:
        str(data, "utf-8")
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(
            f"{name} is not valid UTF-8: {exc.reason} at byte {exc.start}"
        ) from exc


def read_utf8(path: Path) -> bytes:
    """Read a file as raw bytes, verified to be UTF-8."""
    data = path.read_bytes()
    validate_utf8(data, name=str(path))
    return data
