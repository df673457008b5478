# tests/conftest.py

import pytest

from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord


@pytest.fixture
def sample_student():
    return StudentRecord("Alice", 20, 3.8)


@pytest.fixture
def sample_graduate():
    return GraduateRecord(
        name="Diana",
        age=26,
        gpa=3.85,
        thesis_title="Machine Learning in Healthcare",
        advisor="Dr. Johnson",
        is_doctoral=True,
    )


@pytest.fixture
def sample_masters_graduate():
    return GraduateRecord("Evan", 24, 3.6, "Graph Databases", "Dr. Smith", False)


@pytest.fixture
def empty_roster():
    return Roster()


@pytest.fixture
def sample_roster(sample_graduate):
    roster = Roster()
    roster.insert(StudentRecord("Bob", 21, 3.2))
    roster.insert(StudentRecord("Alice", 20, 3.8))
    roster.insert(StudentRecord("Charlie", 19, 3.9))
    roster.insert(sample_graduate)
    return roster


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "students.json")
