"""Event ID generators for CARTSOURCE."""

import itertools
import threading

from ulid import monotonic

from cartsource.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Monotonic ULIDs, used as event ids by default.

    Ids generated by one process sort in generation order, which keeps the
    event ids of a cart stream in the same order as its versions. Generation
    is serialized with a lock so concurrent handlers never interleave.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Zero-padded sequential ids ("0...01", "0...02", ...).

    Deterministic, so tests can assert on exact event ids. Not for production.
    """

    def __init__(self, length: int = 26, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._length = length

    def new_id(self) -> str:
        return str(next(self._counter)).zfill(self._length)
