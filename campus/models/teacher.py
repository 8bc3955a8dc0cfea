from typing import Optional

from campus.models.person import Person
from campus.models.population import Population
from campus.utils.formatting import format_amount


class Teacher(Person):
    """
    A person with a salary.

    The salary is private to this module. Besides the public
    ``get_salary``/``set_salary`` pair, only ``read_salary`` reads it, and
    that is reserved for ``reveal_salary`` and the TA role.
    """

    def __init__(self, name: Optional[str] = None, age: int = 0, person_id: int = 0,
                 salary: float = 0.0, *, population: Population):
        Person.__init__(self, age, name, person_id, population=population)
        self._init_salary(salary)

    def _init_salary(self, salary: float = 0.0):
        self._salary = salary

    def set_salary(self, salary: float):
        self._salary = salary

    def get_salary(self) -> float:
        return self._salary

    def introduce(self) -> str:
        return f"I'm Teacher {self.name}, teaching with salary ${format_amount(self._salary)}"

    def _copy_from(self, source: "Teacher"):
        super()._copy_from(source)
        self._salary = source._salary


def read_salary(teacher: Teacher) -> float:
    """Privileged read of the private salary field"""
    return teacher._salary


def reveal_salary(teacher: Teacher) -> str:
    return f"[Friend Function] Teacher {teacher.name}'s salary is ${format_amount(read_salary(teacher))}"
