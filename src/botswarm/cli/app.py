"""Command-line entry point for launching a bot swarm.

One invocation, no subcommands: parse flags, load the credentials pool,
schedule the launches and keep the process alive while bots are online.

Usage:
    botswarm -h localhost -p 10005 -v 1.12.2 -c ./accounts.txt -n 5 -d 5000
    uv run python -m botswarm.cli -h localhost -v 1.12.2 -c ./accounts.txt -n 2 -d 50
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from botswarm.client import GameClient, MineflayerClient
from botswarm.config import ConfigError, settings
from botswarm.credentials import CredentialPool, InsufficientCredentialsError
from botswarm.launcher import BotLauncher, LaunchSession
from botswarm.models import ServerTarget

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="botswarm",
    help="Launch game bots against a server, one credential per bot",
    add_completion=False,
)

EXAMPLE = (
    "Example: botswarm -h localhost -p 10005 -v 1.12.2 -c ./accounts.txt -n 5 -d 5000"
)


def create_client() -> GameClient:
    """Build the game client used for every launch."""
    return MineflayerClient(auth=settings.auth)


async def run_swarm(
    pool: CredentialPool,
    target: ServerTarget,
    count: int,
    delay_ms: int,
    *,
    client: GameClient,
    registry: LaunchSession | None = None,
    hold: bool = True,
) -> LaunchSession:
    """Launch ``count`` bots and wait until every slot has fired.

    Args:
        pool: Credentials to draw from; consumed in place.
        target: Server every bot connects to.
        count: Number of launch slots.
        delay_ms: Spacing between consecutive slots in milliseconds.
        client: Game client that opens the sessions.
        registry: Session registry shared with the caller.
        hold: Keep running while any session is open.

    Returns:
        The registry holding every opened session.

    Raises:
        InsufficientCredentialsError: If the pool is smaller than ``count``.
    """
    launcher = BotLauncher(client, registry)
    tasks = launcher.launch(pool, target, count, delay_ms)
    await asyncio.gather(*tasks, return_exceptions=True)
    logger.debug(
        "All %d launch slots fired, %d session(s) open", count, len(launcher.registry)
    )
    if hold:
        await launcher.registry.hold()
    return launcher.registry


T = TypeVar("T")


def _require(flag: str, value: T | None) -> T:
    if value is None:
        raise ConfigError(
            f'Parameter "{flag}" is required. Run "botswarm --help" for help.'
        )
    return value


def _load_pool(path: Path) -> CredentialPool:
    try:
        return CredentialPool.from_file(path, encoding=settings.credentials_encoding)
    except OSError as e:
        raise ConfigError(f"Cannot read credentials file {path}: {e}") from e


@app.command(epilog=EXAMPLE)
def launch(
    host: Annotated[
        str | None, typer.Option("-h", help="Server host (required)")
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("-p", help=f"Server port (default {settings.default_port})"),
    ] = None,
    version: Annotated[
        str | None, typer.Option("-v", help="Server version, e.g. 1.12.2 (required)")
    ] = None,
    credentials: Annotated[
        Path | None,
        typer.Option(
            "-c",
            help="Credentials file, one identity:password per line (required)",
        ),
    ] = None,
    count: Annotated[
        int | None, typer.Option("-n", help="Number of bots to connect (required)")
    ] = None,
    delay: Annotated[
        int | None,
        typer.Option("-d", help="Delay in ms between connections (required)"),
    ] = None,
    hold: Annotated[
        bool,
        typer.Option(
            "--hold/--no-hold", help="Keep running while bots are connected"
        ),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Connect a batch of bots, staggered by a fixed delay."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=settings.log_level)

    try:
        target = ServerTarget(
            host=_require("-h", host),
            port=port if port is not None else settings.default_port,
            version=_require("-v", version),
        )
        path = _require("-c", credentials)
        bots = _require("-n", count)
        delay_ms = _require("-d", delay)
        pool = _load_pool(path)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        return

    registry = LaunchSession()
    try:
        asyncio.run(
            run_swarm(
                pool,
                target,
                bots,
                delay_ms,
                client=create_client(),
                registry=registry,
                hold=hold,
            )
        )
    except InsufficientCredentialsError as e:
        typer.echo(str(e), err=True)
    except KeyboardInterrupt:
        logger.info("Interrupted with %d bot(s) connected", len(registry))
