"""Credential store: file parsing and random pick-without-replacement.

The credentials file holds one account per line, ``identity:secret``.
Parsing is deliberately permissive: every line becomes a Credential,
including blank lines and the empty line after a final newline. Bad
entries surface only when a launch slot draws them.

Example:
    from botswarm.credentials import CredentialPool

    pool = CredentialPool.from_file("accounts.txt")
    credential = pool.remove_random()
"""

import logging
import random
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path

from botswarm.models import Credential, MalformedCredentialError

logger = logging.getLogger(__name__)

__all__ = [
    "CredentialPool",
    "InsufficientCredentialsError",
    "MalformedCredentialError",
    "load_credentials",
]


class InsufficientCredentialsError(RuntimeError):
    """The pool holds fewer credentials than the bots requested."""


def load_credentials(path: str | Path, encoding: str = "utf-8") -> list[Credential]:
    """Load the credentials file into an ordered list.

    Args:
        path: File containing one ``identity:secret`` entry per line.
        encoding: Text encoding of the file.

    Returns:
        One Credential per line, in file order. No trimming, validation
        or de-duplication is applied.

    Raises:
        OSError: If the file cannot be read.
    """
    content = Path(path).read_text(encoding=encoding)
    credentials = [Credential.parse(line) for line in content.split("\n")]
    logger.debug("Loaded %d credential entries from %s", len(credentials), path)
    return credentials


class CredentialPool:
    """Mutable working set of not-yet-used credentials.

    The pool only ever shrinks. ``remove_random`` picks and removes under a
    lock so concurrent callers never race on the same index.

    Args:
        credentials: Initial entries, kept in order.
        rng: Random source for index selection. Defaults to a fresh
            ``random.Random``.
    """

    def __init__(
        self,
        credentials: Iterable[Credential],
        rng: random.Random | None = None,
    ) -> None:
        self._items: list[Credential] = list(credentials)
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        rng: random.Random | None = None,
    ) -> "CredentialPool":
        return cls(load_credentials(path, encoding=encoding), rng=rng)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Credential]:
        return iter(self.remaining)

    @property
    def remaining(self) -> list[Credential]:
        """Snapshot of the entries still in the pool."""
        with self._lock:
            return list(self._items)

    def remove_random(self) -> Credential:
        """Remove and return a uniformly random entry.

        Raises:
            InsufficientCredentialsError: If the pool is empty.
        """
        with self._lock:
            if not self._items:
                raise InsufficientCredentialsError("credential pool is exhausted")
            index = self._rng.randrange(len(self._items))
            return self._items.pop(index)
