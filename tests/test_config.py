"""Tests for application configuration."""

from __future__ import annotations

import pytest

from strwindows.config import AppConfig
from strwindows.windows import InvalidWindowSizeError


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.window_size == 3
        assert config.display_limit == 50
        assert config.max_request_chars == 100_000

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(window_size=8, display_limit=5, max_request_chars=10)

        assert config.window_size == 8
        assert config.display_limit == 5
        assert config.max_request_chars == 10

    def test_zero_window_size_allowed(self) -> None:
        """Should accept the degenerate window size."""
        assert AppConfig(window_size=0).window_size == 0

    def test_negative_window_size(self) -> None:
        """Should reject negative window sizes."""
        with pytest.raises(InvalidWindowSizeError):
            AppConfig(window_size=-2)

    def test_invalid_display_limit(self) -> None:
        """Should reject a display limit below one."""
        with pytest.raises(ValueError, match="display_limit"):
            AppConfig(display_limit=0)

    def test_invalid_request_limit(self) -> None:
        """Should reject a request limit below one."""
        with pytest.raises(ValueError, match="max_request_chars"):
            AppConfig(max_request_chars=0)
