import copy

import pytest

from campus.models.marks import Marks
from campus.models.population import Population
from campus.models.student import Student


@pytest.fixture
def lines():
    return []


@pytest.fixture
def population(lines):
    return Population(out=lines.append)


def test_default_student_has_three_zero_marks(population, lines):
    s = Student(population=population)
    assert list(s.marks) == [0, 0, 0]
    assert len(s.marks) == Marks.SIZE
    assert lines == ["Constructor with default argument called for Default"]


def test_parameterized_student(population, lines):
    s = Student(20, "Bob", 7, 70, 80, 90, population=population)
    assert list(s.marks) == [70, 80, 90]
    assert (s.id, s.age, s.name) == (7, 20, "Bob")
    assert lines == [
        "Parameterized constructor called for Bob",
        "Student parameterized constructor called",
    ]


def test_copy_is_deep(population, lines):
    s1 = Student(20, "Bob", 7, 70, 80, 90, population=population)
    lines.clear()
    s2 = copy.copy(s1)
    s2.marks[0] = 85

    assert s1.marks[0] == 70
    assert s2.marks[0] == 85
    assert s2.marks is not s1.marks
    assert population.count == 2
    assert lines == ["Shallow copy constructor called", "Deep copy constructor called"]


def test_assign_copies_marks_only(population, lines):
    source = Student(20, "Bob", 7, 70, 80, 90, population=population)
    target = Student(30, "Eve", 8, population=population)
    storage = target.marks
    lines.clear()

    assert target.assign(source) is target
    assert list(target.marks) == [70, 80, 90]
    assert target.marks is storage
    assert (target.id, target.age, target.name) == (8, 30, "Eve")
    assert lines == ["Copy assignment operator called"]

    source.marks[1] = 0
    assert target.marks[1] == 80


def test_release_drops_marks(population, lines):
    s = Student(20, "Bob", 7, population=population)
    lines.clear()
    s.release()
    assert s.marks is None
    assert population.count == 0
    assert lines == ["Student destructor called", "Destructor of Person called for Bob"]


def test_assign_from_released_student_fails(population):
    s1 = Student(20, "Bob", 7, population=population)
    s2 = Student(21, "Eve", 8, population=population)
    s1.release()
    with pytest.raises(RuntimeError):
        s2.assign(s1)


def test_negative_marks_accepted(population):
    s = Student(20, "Bob", 7, -5, population=population)
    s.marks[2] = -1
    assert list(s.marks) == [-5, 0, -1]


def test_marks_index_outside_slots(population):
    s = Student(population=population)
    with pytest.raises(IndexError):
        s.marks[3] = 1


def test_introduce(population):
    s = Student(population=population)
    s.name = "Bob"
    s.age = 20
    assert s.introduce() == "I'm Student Bob, age 20, ID 0."


def test_copy_of_released_student_leaves_count_alone(population):
    s = Student(20, "Bob", 7, population=population)
    s.release()
    with pytest.raises(RuntimeError):
        copy.copy(s)
    assert population.count == 0
