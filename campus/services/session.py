import logging
from typing import Callable

from campus.models.person import Person
from campus.models.population import Population

logger = logging.getLogger(__name__)


class DemoSession:
    """
    Composition root for one run of the hierarchy demo.

    Owns the ``Population`` every person is registered with. Leaving the
    ``with`` block releases whatever is still alive, newest first, the way
    locals go out of scope at the end of a function.
    """

    def __init__(self, out: Callable[[str], None] = print):
        self.population = Population(out=out)

    def emit(self, message: str = ""):
        self.population.emit(message)

    @property
    def static_person(self) -> Person:
        """Constructed on first access only"""
        if not hasattr(self, '_static_person'):
            logger.debug("Creating static person")
            self._static_person = Person(99, "StaticUser", 999, population=self.population)
        return self._static_person

    def static_object_demo(self) -> str:
        line = self.static_person.introduce()
        self.emit(line)
        return line

    def close(self) -> int:
        released = self.population.release_all()
        logger.debug(f"Session closed, released {released} objects")
        return released

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
