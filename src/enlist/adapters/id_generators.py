"""ID generators for Enlist."""

import threading

from enlist.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class SequentialIdGenerator(IdGenerator):
    """Thread-safe generator of monotonically increasing integer IDs.

    Note:
        IDs are not persisted; a new instance starts counting from `start` again.
    """

    def __init__(self, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start

    def new_id(self) -> int:
        """Generate a new ID (serialized across threads)."""
        with self._lock:
            value = self._next
            self._next += 1
            return value
