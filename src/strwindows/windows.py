"""Overlapping windows of Unicode scalar values over a text buffer."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, Tuple, Union

from strwindows.models import WindowSpan

LOGGER = logging.getLogger(__name__)

TextSource = Union[str, bytes, bytearray, memoryview]
TextView = Union[str, memoryview]


class InvalidWindowSizeError(ValueError):
    """Raised when a window size is negative."""


def scalar_width(lead: int) -> int:
    """Return the byte length of the UTF-8 sequence starting with ``lead``."""
    if lead < 0x80:
        return 1
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    return 2


def check_window_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"window size must be an int, got {type(size).__name__}")
    if size < 0:
        raise InvalidWindowSizeError(f"window size must be >= 0, got {size}")
    return size


def as_byte_view(source: TextSource) -> memoryview:
    """Return a flat, read-only byte view over a buffer source."""
    if not isinstance(source, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"source must be str or a bytes-like object, got {type(source).__name__}"
        )
    view = memoryview(source)
    if not view.c_contiguous:
        raise TypeError("buffer sources must be C-contiguous")
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


class StrWindows:
    """Iterator over overlapping windows of ``size`` scalar values.

    Windows advance by one scalar value per step and the last window ends at
    the end of the source; no short trailing window is produced. A ``size`` of
    zero gives an iterator that is exhausted from the start.

    ``str`` sources yield ``str`` slices. Bytes-like sources must hold valid
    UTF-8 and yield read-only ``memoryview`` slices whose ``obj`` is the
    original source, so no text is copied. Those views are only meaningful
    while the source is alive and unchanged.
    """

    __slots__ = ("size", "yielded", "_source", "_is_text", "_length", "_starts", "_end", "_exhausted")

    def __init__(self, source: TextSource, size: int) -> None:
        self.size = check_window_size(size)
        if isinstance(source, str):
            self._source: TextView = source
            self._is_text = True
        else:
            self._source = as_byte_view(source)
            self._is_text = False
        self._length = len(self._source)
        # start offsets of the scalar values inside the current window
        self._starts: deque[int] = deque()
        self._end = 0
        self.yielded = 0
        self._exhausted = self.size == 0
        LOGGER.debug(
            "Windowing %d %s with size %d",
            self._length,
            "code points" if self._is_text else "bytes",
            self.size,
        )

    def __iter__(self) -> StrWindows:
        return self

    def __next__(self) -> TextView:
        if self._exhausted:
            raise StopIteration

        starts = self._starts
        if starts:
            starts.popleft()
        while len(starts) < self.size:
            if self._end >= self._length:
                self._exhaust()
                raise StopIteration
            starts.append(self._end)
            self._end += 1 if self._is_text else scalar_width(self._source[self._end])

        self.yielded += 1
        return self._source[starts[0] : self._end]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, yielded={self.yielded})"

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def bounds(self) -> Tuple[int, int] | None:
        """Offsets of the most recently yielded window, or ``None``."""
        if not self._starts:
            return None
        return self._starts[0], self._end

    def _exhaust(self) -> None:
        self._exhausted = True
        self._starts.clear()
        LOGGER.debug("Exhausted after %d windows", self.yielded)


def str_windows(source: TextSource, size: int) -> StrWindows:
    """Return substrings spanning ``size`` scalar values, like ``slice::windows``.

    >>> list(str_windows("s 😀😁", 3))
    ['s 😀', ' 😀😁']
    """
    return StrWindows(source, size)


windows = str_windows


def count_scalars(source: TextSource) -> int:
    if isinstance(source, str):
        return len(source)
    view = as_byte_view(source)
    return sum(1 for byte in view if byte & 0xC0 != 0x80)


def count_windows(source: TextSource, size: int) -> int:
    """Number of windows ``str_windows(source, size)`` would produce."""
    if check_window_size(size) == 0:
        return 0
    return max(count_scalars(source) - size + 1, 0)


def iter_spans(source: TextSource, size: int) -> Iterator[WindowSpan]:
    """Yield each window decoded to ``str`` together with its offsets.

    The size is validated immediately, before the first window is requested.
    """
    iterator = StrWindows(source, size)

    def _spans() -> Iterator[WindowSpan]:
        for index, view in enumerate(iterator):
            start, end = iterator.bounds  # type: ignore[misc]
            text = view if isinstance(view, str) else str(view, "utf-8")
            yield WindowSpan(index=index, start=start, end=end, text=text)

    return _spans()
