"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

from strwindows.windows import check_window_size


@dataclass(slots=True)
class AppConfig:
    window_size: int = 3
    display_limit: int = 50
    max_request_chars: int = 100_000

    def __post_init__(self) -> None:
        check_window_size(self.window_size)
        if self.display_limit < 1:
            raise ValueError(f"display_limit must be >= 1, got {self.display_limit}")
        if self.max_request_chars < 1:
            raise ValueError(f"max_request_chars must be >= 1, got {self.max_request_chars}")
