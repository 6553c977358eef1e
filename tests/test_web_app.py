"""Tests for the FastAPI web application."""

from __future__ import annotations

from fastapi.testclient import TestClient

from strwindows.web.app import app


client = TestClient(app)


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health(self) -> None:
        """Reports ok."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestWindowsEndpoint:
    """Tests for POST /windows endpoint."""

    def test_windows_success(self) -> None:
        """Returns every window with offsets."""
        response = client.post("/windows", json={"text": "abcd", "size": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["size"] == 2
        assert body["count"] == 3
        assert body["windows"][0] == {"index": 0, "start": 0, "end": 2, "text": "ab"}
        assert [w["text"] for w in body["windows"]] == ["ab", "bc", "cd"]

    def test_windows_emoji(self) -> None:
        """Windows over scalar values."""
        response = client.post("/windows", json={"text": "s 😀😁", "size": 3})

        assert response.status_code == 200
        assert [w["text"] for w in response.json()["windows"]] == ["s 😀", " 😀😁"]

    def test_windows_default_size(self) -> None:
        """Uses the configured default size."""
        response = client.post("/windows", json={"text": "abcd"})

        assert response.status_code == 200
        assert response.json()["size"] == 3
        assert response.json()["count"] == 2

    def test_windows_zero_size(self) -> None:
        """Returns no windows for the degenerate size."""
        response = client.post("/windows", json={"text": "abc", "size": 0})

        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["windows"] == []

    def test_windows_short_text(self) -> None:
        """Returns no windows when the text is too short."""
        response = client.post("/windows", json={"text": "ab", "size": 5})

        assert response.status_code == 200
        assert response.json()["windows"] == []

    def test_windows_negative_size(self) -> None:
        """Returns 400 for negative sizes."""
        response = client.post("/windows", json={"text": "abc", "size": -1})

        assert response.status_code == 400
        assert "window size" in response.json()["detail"]

    def test_windows_limit(self) -> None:
        """Limits the returned windows but still reports the total."""
        response = client.post("/windows", json={"text": "abcdef", "size": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 6
        assert len(body["windows"]) == 2

    def test_windows_text_too_long(self) -> None:
        """Returns 413 for oversized text."""
        response = client.post("/windows", json={"text": "a" * 100_001, "size": 2})

        assert response.status_code == 413

    def test_windows_missing_text(self) -> None:
        """Returns 422 when text is missing."""
        response = client.post("/windows", json={"size": 2})

        assert response.status_code == 422
