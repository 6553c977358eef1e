"""Overlapping windows of Unicode scalar values over text buffers."""

from strwindows.models import WindowSpan
from strwindows.windows import (
    InvalidWindowSizeError,
    StrWindows,
    count_windows,
    iter_spans,
    str_windows,
    windows,
)

__all__ = [
    "InvalidWindowSizeError",
    "StrWindows",
    "WindowSpan",
    "count_windows",
    "iter_spans",
    "str_windows",
    "windows",
]

__version__ = "0.1.0"
