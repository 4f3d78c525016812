"""Shared test fixtures.

Fakes for the game client seam plus helpers for writing credentials files.
"""

import asyncio
import random
from collections.abc import Callable
from pathlib import Path

import pytest

from botswarm.models import Credential, ServerTarget


class FakeSession:
    """Session that records handlers and lets tests emit events."""

    def __init__(self, credential: Credential) -> None:
        self.credential = credential
        self.handlers: dict[str, list[Callable[..., object]]] = {}

    def on(self, event: str, callback: Callable[..., object]) -> None:
        self.handlers.setdefault(event, []).append(callback)

    def emit(self, event: str, *args: object) -> None:
        for callback in self.handlers.get(event, []):
            callback(*args)


class FakeClient:
    """GameClient that records every connect call and its loop time."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.calls: list[tuple[Credential, ServerTarget]] = []
        self.times: list[float] = []
        self.sessions: list[FakeSession] = []

    def connect(self, credential: Credential, target: ServerTarget) -> FakeSession:
        try:
            self.times.append(asyncio.get_running_loop().time())
        except RuntimeError:
            self.times.append(0.0)
        self.calls.append((credential, target))
        if credential.identity in self.fail_for:
            raise ConnectionRefusedError(f"{target.host}:{target.port}")
        session = FakeSession(credential)
        self.sessions.append(session)
        return session


class FirstIndexRandom(random.Random):
    """Always picks the first remaining entry."""

    def randrange(self, *args: object, **kwargs: object) -> int:  # type: ignore[override]
        return 0


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def first_index_rng() -> FirstIndexRandom:
    return FirstIndexRandom()


@pytest.fixture
def target() -> ServerTarget:
    """Local test server."""
    return ServerTarget(host="localhost", version="1.12.2")


@pytest.fixture
def write_credentials(tmp_path: Path) -> Callable[[str], Path]:
    """Write raw content to a credentials file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "accounts.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
