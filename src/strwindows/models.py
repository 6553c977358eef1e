"""Core strwindows data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class WindowSpan:
    """One yielded window, decoded, with its offsets into the source.

    Offsets are in the source's own units: code points for ``str`` sources,
    bytes for buffer sources.
    """

    index: int
    start: int
    end: int
    text: str
