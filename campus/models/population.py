import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class Population:
    """
    Tracks the live Person-like objects created under one composition root.

    Replaces a process-wide static counter: every construction path
    (including copies) registers here and every release unregisters, so
    ``count`` always equals the number of instances that are still alive.

    Not safe for concurrent use. All registration happens on the thread
    that owns the session.

    Attributes:
        out: Console sink that lifecycle messages are written to
    """

    def __init__(self, out: Callable[[str], None] = print):
        self.out = out
        self._live: Dict[int, object] = {}  # id(obj) -> obj, construction order

    @property
    def count(self) -> int:
        return len(self._live)

    def live(self) -> List[object]:
        return list(self._live.values())

    def emit(self, message: str):
        self.out(message)

    def _register(self, person):
        self._live[id(person)] = person
        logger.debug(f"Registered {type(person).__name__} (live: {self.count})")

    def _unregister(self, person) -> bool:
        """Drops a person from the count. Only reached through Person.release()."""
        if self._live.pop(id(person), None) is None:
            return False
        logger.debug(f"Released {type(person).__name__} (live: {self.count})")
        return True

    def release_all(self) -> int:
        """
        Releases every live person, newest first.

        Returns:
            Number of persons released
        """
        released = 0
        for person in reversed(self.live()):
            person.release()
            released += 1
        return released
