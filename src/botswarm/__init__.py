"""Staggered launcher for game-protocol bots.

Connects a configurable number of bots to one server, each with its own
credential drawn at random from a file, spaced by a fixed delay to stay
under connection throttling.

Structure:
- config.py: Configuration via pydantic-settings
- models.py: Credential and ServerTarget models
- credentials.py: Credentials file parsing and the CredentialPool
- client.py: GameClient/Session protocols and the mineflayer adapter
- launcher.py: Launch schedule, BotLauncher and the LaunchSession registry
- cli/: The ``botswarm`` command
"""

from botswarm.client import KICKED, GameClient, MineflayerClient, Session
from botswarm.credentials import (
    CredentialPool,
    InsufficientCredentialsError,
    load_credentials,
)
from botswarm.launcher import BotLauncher, LaunchSession, schedule_offsets
from botswarm.models import Credential, MalformedCredentialError, ServerTarget

__all__ = [
    "KICKED",
    "BotLauncher",
    "Credential",
    "CredentialPool",
    "GameClient",
    "InsufficientCredentialsError",
    "LaunchSession",
    "MalformedCredentialError",
    "MineflayerClient",
    "ServerTarget",
    "Session",
    "load_credentials",
    "schedule_offsets",
]
