from dataclasses import dataclass

from campus.utils.formatting import format_amount


@dataclass()
class TeacherRecord:
    """
    Flat teacher record with a department and a salary.

    Attributes:
        id: Staff number
        name: Teacher's name (e.g., "Steve")
        dept: Department code (e.g., "CSE")
        salary: Yearly salary, defaults to zero
    """
    id: int = 0
    name: str = ""
    dept: str = ""
    salary: float = 0.0

    def set_salary(self, salary: float):
        self.salary = salary

    def get_salary(self) -> float:
        return self.salary

    def get_info(self) -> str:
        return f"#{self.id}: {self.name} from {self.dept} dept, earns ${format_amount(self.get_salary())}/yr!"


@dataclass()
class StudentRecord:
    """
    Flat student record.

    Attributes:
        id: Student number, cannot be changed after construction
        age: Age in years, defaults to 18
        name: Student's name
        fees: Fees paid, defaults to zero
    """
    id: int = 0
    age: int = 18
    name: str = ""
    fees: float = 0.0

    def __setattr__(self, key, value):
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("StudentRecord.id is read-only")
        super().__setattr__(key, value)

    def set_fees(self, fees: float):
        self.fees = fees

    def get_fees(self) -> float:
        return self.fees

    def get_info(self) -> str:
        return f"{self.id} {self.name} {self.age} {format_amount(self.get_fees())}"
