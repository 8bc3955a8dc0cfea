import copy

import pytest

from campus.models.population import Population
from campus.models.teacher import Teacher, read_salary, reveal_salary


@pytest.fixture
def population():
    return Population(out=lambda line: None)


def test_default_teacher(population):
    t = Teacher(population=population)
    assert t.get_salary() == 0.0
    assert t.name == "Default"


def test_salary_accessors_accept_anything(population):
    t = Teacher("Dr. Smith", 45, 201, 70000, population=population)
    assert t.get_salary() == 70000
    t.set_salary(-10)
    assert t.get_salary() == -10


@pytest.mark.parametrize("salary", [0.0, 70000, 35000.5, -1, 1e6])
def test_privileged_read_matches_accessor(population, salary):
    t = Teacher("Dr. Smith", 45, 201, population=population)
    t.set_salary(salary)
    assert read_salary(t) == t.get_salary()


def test_reveal_salary(population):
    t = Teacher("Dr. Smith", 45, 201, 70000, population=population)
    assert reveal_salary(t) == "[Friend Function] Teacher Dr. Smith's salary is $70000"


def test_introduce(population):
    t = Teacher("Dr. Smith", 45, 201, 70000, population=population)
    assert t.introduce() == "I'm Teacher Dr. Smith, teaching with salary $70000"


def test_copy_keeps_salary(population):
    t = Teacher("Dr. Smith", 45, 201, 70000, population=population)
    c = copy.copy(t)
    c.set_salary(1)
    assert t.get_salary() == 70000
    assert population.count == 2
