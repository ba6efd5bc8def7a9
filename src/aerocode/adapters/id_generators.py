"""Id body generators, selected with ``AEROCODE_ID_STRATEGY``."""

import secrets
import string
import threading
import uuid

from ulid import monotonic

from aerocode.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods

BASE36_ALPHABET = string.digits + string.ascii_lowercase


class ShortIdGenerator(IdGenerator):
    """Random base-36 bodies, short enough to type at the prompt.

    The default strategy. With seven characters a collision is rare, and the
    handlers redraw when one happens.
    """

    def __init__(self, length: int = 7) -> None:
        self._length = length

    def new_id(self) -> str:
        return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(self._length))


class ULIDGenerator(IdGenerator):
    """Monotonic ULIDs, so ids of one kind sort in creation order.

    ``ulid-py`` keeps monotonic state per process; the lock serializes callers.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDs, for data files merged from several installations."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Zero-padded counter: ``001``, ``002``, ...

    Restarts at one with every process, so it only suits tests and demos where
    the handlers' collision check skips ids already on disk.
    """

    def __init__(self, length: int = 3) -> None:
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        self._counter += 1
        return f"{self._counter:0{self._length}d}"
