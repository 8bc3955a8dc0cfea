import copy
import logging
from typing import Any, Callable, Dict

from campus.models.person import Person
from campus.models.records import StudentRecord, TeacherRecord
from campus.models.student import Student
from campus.models.ta import TA
from campus.models.teacher import Teacher, reveal_salary
from campus.services.session import DemoSession
from campus.utils.formatting import yes_no

logger = logging.getLogger(__name__)

PROGRAMS = ("records", "hierarchy", "all")


def run_records_demo(out: Callable[[str], None] = print):
    """
    Prints the flat teacher and student records.

    Args:
        out: Console sink
    """
    t1 = TeacherRecord(1, "Steve", "CSE", 100000.00)
    t2 = TeacherRecord(2, "Jacob", "MAE", 250000.00)
    t2.set_salary(200000)
    out(t1.get_info())
    out(t2.get_info())
    s1 = StudentRecord(1, 25, "Harry", 10000)
    out(s1.get_info())


def run_hierarchy_demo(session: DemoSession) -> int:
    """
    Walks through the person hierarchy: construction and copies, dynamic
    dispatch of ``introduce``, privileged salary reads, the static object
    and vote eligibility.

    Objects created here stay alive until the session is closed.

    Args:
        session: Session that owns the objects' lifetimes

    Returns:
        Number of live persons at the end of the walk-through
    """
    population = session.population
    emit = session.emit

    emit("--- Object Creation ---")
    Person(population=population)
    p2 = Person(25, "Alice", 101, population=population)
    copy.copy(p2)

    emit()
    emit("--- Student Example ---")
    s1 = Student(population=population)
    s1.name = "Bob"
    s1.age = 20
    emit(s1.introduce())

    s2 = copy.copy(s1)
    s2.marks[0] = 85

    emit()
    emit("--- Teacher Example ---")
    t1 = Teacher("Dr. Smith", 45, 201, 70000, population=population)
    emit(t1.introduce())
    emit(reveal_salary(t1))

    emit()
    emit("--- TA Example ---")
    ta1 = TA("Charlie", 23, 301, 35000, population=population)
    emit(ta1.introduce())
    emit(ta1.show_teacher_salary())

    emit()
    emit("--- Static Object Demo ---")
    session.static_object_demo()
    session.static_object_demo()

    emit()
    emit("--- Vote Eligibility ---")
    emit(f"Is {p2.name} eligible to vote? {yes_no(p2.is_vote_eligible(True))}")

    emit()
    emit(f"Total Person objects: {population.count}")
    return population.count


def run_demo(program: str = "all", out: Callable[[str], None] = print) -> Dict[str, Any]:
    """
    Runs one or both demo programs.

    Args:
        program: One of "records", "hierarchy" or "all"
        out: Console sink

    Returns:
        Dictionary with the run's status and population counts
    """
    program = program.lower().strip()
    if program not in PROGRAMS:
        raise ValueError(f"Unknown program: {program}")

    logger.info(f"Running {program} demo")
    result = {"status": "success", "program": program, "population": 0, "remaining": 0}

    if program in ("records", "all"):
        run_records_demo(out)

    if program in ("hierarchy", "all"):
        if program == "all":
            out("")
        with DemoSession(out=out) as session:
            result["population"] = run_hierarchy_demo(session)
        result["remaining"] = session.population.count

    logger.info(f"Demo finished: {result}")
    return result
