"""Staggered bot launches on a single asyncio event loop.

Slot ``i`` of ``n`` fires ``delay_ms * i`` milliseconds after ``launch()``
is called. This is a linear schedule measured from one start point, not a
recurring interval: a slow connect never pushes later slots back.

Usage:
    launcher = BotLauncher(MineflayerClient())
    tasks = launcher.launch(pool, target, count=5, delay_ms=5000)
    await asyncio.gather(*tasks, return_exceptions=True)
    await launcher.registry.hold()
"""

import asyncio
import functools
import logging
from collections.abc import Iterator

from botswarm.client import KICKED, GameClient, Session
from botswarm.credentials import CredentialPool, InsufficientCredentialsError
from botswarm.models import MalformedCredentialError, ServerTarget

logger = logging.getLogger(__name__)


def schedule_offsets(count: int, delay_ms: int) -> list[int]:
    """Fire offsets in milliseconds for ``count`` launch slots."""
    return [delay_ms * index for index in range(count)]


class LaunchSession:
    """Registry of every session opened during this process.

    Owned by a BotLauncher and handed to the CLI by reference. Sessions
    are never removed, not even when kicked, and never closed: process
    exit is the only teardown.
    """

    def __init__(self) -> None:
        self._sessions: list[Session] = []

    def add(self, session: Session) -> None:
        self._sessions.append(session)

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(self._sessions)

    async def hold(self) -> None:
        """Keep the caller alive while sessions exist, until Ctrl-C.

        Returns at once when no session was opened. Otherwise waits until
        the task is cancelled (Ctrl-C), even after every bot was kicked:
        sessions are never removed from the registry.
        """
        if not self._sessions:
            return
        logger.debug("Holding %d open session(s)", len(self._sessions))
        await asyncio.Event().wait()


class BotLauncher:
    """Schedules fire-and-forget bot launches.

    Args:
        client: Game client used to open sessions.
        registry: Where opened sessions are kept. A new one by default.
    """

    def __init__(self, client: GameClient, registry: LaunchSession | None = None):
        self.client = client
        self.registry = registry if registry is not None else LaunchSession()

    def launch(
        self,
        pool: CredentialPool,
        target: ServerTarget,
        count: int,
        delay_ms: int,
    ) -> list[asyncio.Task[Session | None]]:
        """Schedule ``count`` launch slots and return their tasks.

        Must be called from a running event loop. Nothing is scheduled when
        the pool is too small.

        Raises:
            InsufficientCredentialsError: If ``len(pool) < count``.
        """
        if len(pool) < count:
            raise InsufficientCredentialsError(
                f"Not enough credentials to create {count} bots."
            )

        tasks: list[asyncio.Task[Session | None]] = []
        for index, offset_ms in enumerate(schedule_offsets(count, delay_ms)):
            task = asyncio.create_task(
                self.run_slot(index, count, offset_ms / 1000, pool, target),
                name=f"bot-{index + 1}",
            )
            task.add_done_callback(_log_failed_slot)
            tasks.append(task)
        return tasks

    async def run_slot(
        self,
        index: int,
        count: int,
        delay: float,
        pool: CredentialPool,
        target: ServerTarget,
    ) -> Session | None:
        """Wait ``delay`` seconds, then launch one bot.

        Returns the opened session, or None when the drawn credential was
        malformed and the slot was skipped.
        """
        await asyncio.sleep(delay)
        logger.info("Bot %d/%d is connecting...", index + 1, count)

        credential = pool.remove_random()
        try:
            credential.require_valid()
        except MalformedCredentialError as e:
            logger.debug("Skipping bot %d: %s", index + 1, e)
            return None

        session = self.client.connect(credential, target)
        self.registry.add(session)
        session.on(KICKED, functools.partial(_on_kicked, index))
        return session


def _on_kicked(index: int, *_args: object) -> None:
    logger.info("Bot %d got kicked.", index)


def _log_failed_slot(task: asyncio.Task) -> None:
    try:
        task.result()
    except asyncio.CancelledError:
        pass
    except Exception as e:
        logger.exception(
            "Launch slot %s failed with %s",
            task.get_name(),
            type(e).__name__,
            exc_info=e,
        )
