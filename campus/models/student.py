from typing import Optional

from campus.models.marks import Marks
from campus.models.person import Person
from campus.models.population import Population


class Student(Person):
    """
    A person with exactly three marks.

    Copying duplicates the marks into fresh storage. ``assign`` only copies
    marks into the existing storage and leaves id, age and name as they
    were, unlike a copy.

    Attributes:
        marks: The student's marks, ``None`` once released
    """

    def __init__(self, age: int = 0, name: Optional[str] = None, person_id: int = 0,
                 m1: int = 0, m2: int = 0, m3: int = 0, *, population: Population):
        Person.__init__(self, age, name, person_id, population=population)
        self._init_marks(m1, m2, m3, announce=name is not None)

    def _init_marks(self, m1: int = 0, m2: int = 0, m3: int = 0, announce: bool = True):
        self.marks: Optional[Marks] = Marks(m1, m2, m3)
        if announce:
            self.population.emit("Student parameterized constructor called")

    def assign(self, other: "Student") -> "Student":
        if self.marks is None or other.marks is None:
            raise RuntimeError("Cannot assign marks of a released student")
        self.marks.assign_from(other.marks)
        self.population.emit("Copy assignment operator called")
        return self

    def introduce(self) -> str:
        return f"I'm Student {self.name}, age {self.age}, ID {self.id}."

    def _copy_from(self, source: "Student"):
        super()._copy_from(source)
        self.marks = source.marks.copy()
        self.population.emit("Deep copy constructor called")

    def _teardown(self):
        self.marks = None
        self.population.emit("Student destructor called")
        super()._teardown()
