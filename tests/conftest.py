"""Shared pytest fixtures for the EduAdvisor test suite."""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any, AsyncIterator, Callable, Iterator, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Ensure test environment variables are set BEFORE importing app modules
os.environ.setdefault("GEMINI_API_KEY", "test-key-not-real")
os.environ.setdefault("GEMINI_MODEL", "gemini-test")
os.environ.setdefault("STATIC_DIR", "tests/_no_static_dir")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

TEST_BASE_URL = "https://upstream.test/v1beta"


SAMPLE_RECOMMENDATIONS: dict[str, Any] = {
    "careers": [
        {
            "career": "Software Engineer",
            "studies": ["Computer Science", "Data Structures and Algorithms", "Software Engineering"],
            "icon": "fas fa-code",
        },
        {
            "career": "Music Technologist",
            "studies": ["Audio Engineering", "Digital Signal Processing", "Music Theory"],
            "icon": "fas fa-sliders",
        },
        {
            "career": "Game Designer",
            "studies": ["Game Design", "Interactive Storytelling", "Computer Graphics"],
            "icon": "fas fa-gamepad",
        },
    ],
    "hobbies": [
        {
            "hobby": "Guitar",
            "description": "Keep practising and try writing your own songs.",
            "icon": "fas fa-guitar",
        },
        {
            "hobby": "Puzzle Solving",
            "description": "Crosswords and logic puzzles keep your mind sharp.",
            "icon": "fas fa-puzzle-piece",
        },
    ],
}


def make_gemini_body(text: Optional[str]) -> dict[str, Any]:
    """Build a generateContent response body whose first candidate says ``text``."""
    if text is None:
        return {"candidates": []}
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


class StubUpstream:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=make_gemini_body("Hello!")
        )
        self.transport = httpx.MockTransport(self._dispatch)

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    def respond_text(self, text: Optional[str], status_code: int = 200) -> None:
        self.respond_with(lambda request: httpx.Response(status_code, json=make_gemini_body(text)))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def recommendations() -> dict[str, Any]:
    """Return a valid recommendation payload."""
    return json.loads(json.dumps(SAMPLE_RECOMMENDATIONS))


@pytest.fixture
def upstream() -> StubUpstream:
    """Stub Gemini endpoint backed by httpx.MockTransport."""
    return StubUpstream()


@pytest.fixture
def gemini_client(upstream: StubUpstream):
    """A configured GeminiClient wired to the stub upstream."""
    from app.clients.gemini_client import GeminiClient

    return GeminiClient(
        api_key="test-key",
        model="gemini-test",
        base_url=TEST_BASE_URL,
        transport=upstream.transport,
    )


@pytest.fixture
def unconfigured_client(upstream: StubUpstream):
    """A GeminiClient with no API key."""
    from app.clients.gemini_client import GeminiClient

    return GeminiClient(
        api_key="",
        model="gemini-test",
        base_url=TEST_BASE_URL,
        transport=upstream.transport,
    )


@pytest.fixture
def api(gemini_client) -> Iterator[TestClient]:
    """FastAPI test client whose Gemini dependency points at the stub upstream."""
    from app.clients.gemini_client import get_gemini_client
    from app.main import app

    app.dependency_overrides[get_gemini_client] = lambda: gemini_client
    yield TestClient(app)
    app.dependency_overrides.clear()


class TricklingUpstream:
    """Local HTTP server that sends 200 headers at once, then the body in slow chunks."""

    def __init__(self, chunk_interval: float = 0.3, max_chunks: int = 30) -> None:
        self.chunk_interval = chunk_interval
        self.max_chunks = max_chunks
        self.base_url = ""
        self._server: Optional[asyncio.AbstractServer] = None

    async def start(self) -> None:
        self._server = await asyncio.start_server(self._handle, "127.0.0.1", 0)
        port = self._server.sockets[0].getsockname()[1]
        self.base_url = f"http://127.0.0.1:{port}/v1beta"

    async def stop(self) -> None:
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()

    async def _handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        chunk = b" " * 200
        try:
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                + f"Content-Length: {len(chunk) * self.max_chunks}\r\n\r\n".encode()
            )
            await writer.drain()
            for _ in range(self.max_chunks):
                await asyncio.sleep(self.chunk_interval)
                if writer.is_closing():
                    break
                writer.write(chunk)
                await writer.drain()
        except (ConnectionError, asyncio.IncompleteReadError):
            pass
        finally:
            writer.close()


@pytest_asyncio.fixture
async def slow_upstream() -> AsyncIterator[TricklingUpstream]:
    """An upstream that keeps the connection busy for ~9 s without finishing."""
    server = TricklingUpstream()
    await server.start()
    yield server
    await server.stop()


@pytest.fixture
def slow_gemini_client(slow_upstream: TricklingUpstream):
    """A configured GeminiClient talking to the trickling server over real sockets."""
    from app.clients.gemini_client import GeminiClient

    # An explicit transport keeps environment proxies out of the way.
    return GeminiClient(
        api_key="test-key",
        model="gemini-test",
        base_url=slow_upstream.base_url,
        transport=httpx.AsyncHTTPTransport(),
    )
