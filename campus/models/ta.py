from campus.models.marks import Marks
from campus.models.person import Person
from campus.models.population import Population
from campus.models.student import Student
from campus.models.teacher import Teacher, read_salary
from campus.utils.formatting import format_amount


class TA(Student, Teacher):
    """
    Teaching assistant: both a student and a teacher.

    There is one Person part, shared by both roles. TA initializes it
    itself, once, and then sets up the student part (marks) and the teacher
    part (salary) without going through their constructors.
    """

    def __init__(self, name: str, age: int, person_id: int, salary: float, *,
                 population: Population):
        Person.__init__(self, age, name, person_id, population=population)
        self._init_marks()
        self._init_salary(salary)
        self.marks = Marks(90, 95, 100)

    def introduce(self) -> str:
        return (f"I'm TA {self.name}, ID {self.id}, also assist teacher with salary "
                f"${format_amount(self.get_salary())}")

    def show_teacher_salary(self) -> str:
        return f"[Friend Class] Teacher salary accessed by TA: ${format_amount(read_salary(self))}"
