from abc import ABC, abstractmethod
from typing import Optional

from campus.models.population import Population

DEFAULT_NAME = "Default"
VOTING_AGE = 18


class IPerson(ABC):
    """Anything that can introduce itself"""

    @abstractmethod
    def introduce(self) -> str:
        ...


class Person(IPerson):
    """
    Base of the campus hierarchy.

    Construction registers the instance with its ``Population`` and
    ``release()`` (or leaving a ``with`` block) unregisters it exactly once.
    Copies made with ``copy.copy`` are new registered instances of the same
    dynamic type.

    Args:
        age: Age in years (not validated)
        name: Display name. ``None`` selects the default-argument
              construction path, which names the person "Default" and
              ignores ``person_id``
        person_id: Identity, read-only after construction
        population: Counter that owns this instance's lifetime
    """

    def __init__(self, age: int = 0, name: Optional[str] = None, person_id: int = 0, *,
                 population: Population):
        self._population = population
        self.age = age
        if name is None:
            self._id = 0
            self.name = DEFAULT_NAME
            population.emit(f"Constructor with default argument called for {self.name}")
        else:
            self._id = person_id
            self.name = name
            population.emit(f"Parameterized constructor called for {self.name}")
        self._alive = True
        population._register(self)

    @property
    def id(self) -> int:
        return self._id

    @property
    def population(self) -> Population:
        return self._population

    @property
    def alive(self) -> bool:
        return self._alive

    def is_vote_eligible(self, has_ssn: bool) -> bool:
        return has_ssn and self.age >= VOTING_AGE

    def introduce(self) -> str:
        return f"Hi, I'm {self.name}, age {self.age}, ID {self.id}."

    def release(self):
        """Destroys the instance. Calling it again has no effect."""
        if not self._alive:
            return
        self._alive = False
        self._teardown()

    def _teardown(self):
        self._population.emit(f"Destructor of Person called for {self.name}")
        self._population._unregister(self)

    def _copy_from(self, source: "Person"):
        # id is copied verbatim, not reassigned
        self._population = source._population
        self._id = source._id
        self.age = source.age
        self.name = source.name
        self._alive = True
        self._population.emit("Shallow copy constructor called")
        self._population._register(self)

    def __copy__(self):
        if not self._alive:
            raise RuntimeError(f"Cannot copy released {type(self).__name__} {self.name}")
        clone = self.__class__.__new__(self.__class__)
        clone._copy_from(self)
        return clone

    def __deepcopy__(self, memo):
        # owned state is duplicated by the subclasses' _copy_from
        clone = self.__copy__()
        memo[id(self)] = clone
        return clone

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r}, age={self.age})"
