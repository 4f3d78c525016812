"""Data models shared by the credential store, launcher and game client."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORT = 25565


class MalformedCredentialError(ValueError):
    """A credential has an empty identity or secret."""


class Credential(BaseModel):
    """An identity/secret pair used to authenticate one bot.

    Parsed 1:1 from a credentials file line. Malformed lines are kept as
    malformed credentials; they are rejected only when a launch slot uses
    them (see ``require_valid``).
    """

    identity: str = Field(description="Account email or username")
    secret: str | None = Field(
        default=None, description="Password (None when the line had no ':')"
    )

    @classmethod
    def parse(cls, line: str) -> "Credential":
        """Split ``identity:secret`` on the first separator."""
        identity, sep, secret = line.partition(":")
        return cls(identity=identity, secret=secret if sep else None)

    @property
    def is_valid(self) -> bool:
        return bool(self.identity) and bool(self.secret)

    def require_valid(self) -> "Credential":
        """Return self, or raise MalformedCredentialError if a field is empty."""
        if not self.is_valid:
            raise MalformedCredentialError(
                f"credential {self.identity!r} has an empty identity or secret"
            )
        return self


class ServerTarget(BaseModel):
    """The fixed host/port/version triple all bots connect to."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = DEFAULT_PORT
    version: str | None = Field(
        default=None, description="Game version string (e.g. 1.12.2)"
    )

    def connect_options(
        self, credential: Credential, *, auth: str | None = None
    ) -> dict[str, Any]:
        """Build the option mapping handed to the game client."""
        options: dict[str, Any] = {
            "host": self.host,
            "port": self.port,
            "username": credential.identity,
            "password": credential.secret,
        }
        if self.version is not None:
            options["version"] = self.version
        if auth is not None:
            options["auth"] = auth
        return options
