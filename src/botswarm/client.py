"""Game client seam.

The launcher talks to the game through two small protocols: a
``GameClient`` that opens sessions and a ``Session`` that reports
lifecycle events. Protocol work (handshake, packets, keep-alive) stays
inside the client library.

``MineflayerClient`` drives the mineflayer JavaScript library through the
``javascript`` bridge package (install the ``mineflayer`` extra). The
bridge is imported on first use so the rest of the package works without
Node.js.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from botswarm.models import Credential, ServerTarget

logger = logging.getLogger(__name__)

KICKED = "kicked"
"""Lifecycle event emitted when the server kicks a bot."""


class Session(Protocol):
    """Opaque handle for one connected bot."""

    def on(self, event: str, callback: Callable[..., object]) -> None: ...


class GameClient(Protocol):
    """Opens bot sessions against a server."""

    def connect(self, credential: Credential, target: ServerTarget) -> Session:
        """Start a session and return its handle without waiting for login.

        Failures (bad auth, version mismatch, unreachable host) propagate
        as the client library's own exceptions.
        """
        ...


class MineflayerSession:
    """Session backed by a mineflayer ``Bot`` proxy."""

    def __init__(self, bot: Any) -> None:
        self.bot = bot

    def on(self, event: str, callback: Callable[..., object]) -> None:
        from javascript import On

        # The bridge passes the emitter as the first handler argument.
        def handler(_this: Any, *args: Any) -> None:
            callback(*args)

        On(self.bot, event)(handler)


class MineflayerClient:
    """GameClient that creates mineflayer bots.

    Args:
        auth: Optional mineflayer ``auth`` mode (e.g. ``"microsoft"``).
    """

    def __init__(self, auth: str | None = None) -> None:
        self.auth = auth
        self._mineflayer: Any = None

    def _require(self) -> Any:
        if self._mineflayer is None:
            from javascript import require

            logger.debug("Loading mineflayer through the javascript bridge")
            self._mineflayer = require("mineflayer")
        return self._mineflayer

    def connect(self, credential: Credential, target: ServerTarget) -> Session:
        options = target.connect_options(credential, auth=self.auth)
        bot = self._require().createBot(options)
        return MineflayerSession(bot)
