"""FastAPI application exposing text windowing over HTTP."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from strwindows.config import AppConfig
from strwindows.windows import count_windows, iter_spans

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="strwindows", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class WindowsPayload(BaseModel):
    text: str
    size: int = AppConfig().window_size
    limit: int | None = None


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/windows")
async def compute_windows(payload: WindowsPayload) -> dict[str, Any]:
    config = AppConfig()
    if len(payload.text) > config.max_request_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Text too long: {len(payload.text)} characters "
            f"(limit {config.max_request_chars})",
        )

    try:
        spans = iter_spans(payload.text, payload.size)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    limit = None if payload.limit is None else max(0, payload.limit)
    count = count_windows(payload.text, payload.size)
    LOGGER.info("Windowing %d characters with size %d", len(payload.text), payload.size)
    return {
        "size": payload.size,
        "count": count,
        "windows": list(islice(spans, limit)),
    }
