# tests/test_graduate_record.py

import pytest

from core.errors import ValidationError
from models.student_record import GraduateRecord, StudentRecord
from models.types import RecordKind


def test_graduate_fields(sample_graduate):
    assert sample_graduate.name == "Diana"
    assert sample_graduate.age == 26
    assert sample_graduate.gpa == 3.85
    assert sample_graduate.thesis_title == "Machine Learning in Healthcare"
    assert sample_graduate.advisor == "Dr. Johnson"
    assert sample_graduate.is_doctoral
    assert sample_graduate.kind == RecordKind.GRADUATE
    assert isinstance(sample_graduate, StudentRecord)


def test_graduate_text_fields_are_trimmed():
    graduate = GraduateRecord(" Eve ", 30, 3.0, "  Compilers ", " Dr. Lee ", False)

    assert graduate.name == "Eve"
    assert graduate.thesis_title == "Compilers"
    assert graduate.advisor == "Dr. Lee"


def test_degree_type(sample_graduate, sample_masters_graduate):
    assert sample_graduate.degree_type == "PhD"
    assert sample_masters_graduate.degree_type == "Master's"

    sample_graduate.is_doctoral = False
    assert sample_graduate.degree_type == "Master's"


@pytest.mark.parametrize(
    "thesis_title, advisor",
    [
        ("", "Dr. Lee"),
        ("   ", "Dr. Lee"),
        ("Compilers", ""),
        ("Compilers", "  "),
        (None, "Dr. Lee"),
    ],
)
def test_graduate_invalid_thesis_or_advisor(thesis_title, advisor):
    with pytest.raises(ValidationError):
        GraduateRecord("Eve", 30, 3.0, thesis_title, advisor, False)


def test_graduate_applies_base_validation():
    with pytest.raises(ValidationError):
        GraduateRecord("Eve", 30, 4.2, "Compilers", "Dr. Lee", False)


def test_rejected_graduate_setter_leaves_record_unchanged(sample_graduate):
    with pytest.raises(ValidationError):
        sample_graduate.thesis_title = "  "
    with pytest.raises(ValidationError):
        sample_graduate.advisor = ""
    with pytest.raises(ValidationError):
        sample_graduate.is_doctoral = "yes"

    assert sample_graduate.thesis_title == "Machine Learning in Healthcare"
    assert sample_graduate.advisor == "Dr. Johnson"
    assert sample_graduate.is_doctoral


def test_graduate_setters(sample_graduate):
    sample_graduate.thesis_title = " Federated Learning "
    sample_graduate.advisor = "Dr. Okafor"

    assert sample_graduate.thesis_title == "Federated Learning"
    assert sample_graduate.advisor == "Dr. Okafor"


def test_graduate_equality():
    first = GraduateRecord("Eve", 30, 3.0, "Compilers", "Dr. Lee", False)
    second = GraduateRecord("Eve", 30, 3.0, "Compilers", "Dr. Lee", False)

    assert first == second
    assert hash(first) == hash(second)
    assert first != GraduateRecord("Eve", 30, 3.0, "Compilers", "Dr. Lee", True)
    assert first != GraduateRecord("Eve", 30, 3.0, "Parsers", "Dr. Lee", False)
    assert first != GraduateRecord("Eve", 30, 3.0, "Compilers", "Dr. Kim", False)


def test_student_and_graduate_are_never_equal():
    student = StudentRecord("Eve", 30, 3.0)
    graduate = GraduateRecord("Eve", 30, 3.0, "Compilers", "Dr. Lee", False)

    assert student != graduate
    assert graduate != student


def test_graduate_sorts_with_students(sample_graduate):
    charlie = StudentRecord("Charlie", 19, 3.9)
    bob = StudentRecord("Bob", 21, 3.2)

    assert sorted([bob, sample_graduate, charlie]) == [charlie, sample_graduate, bob]


def test_graduate_to_dict(sample_graduate):
    data = sample_graduate.to_dict()

    assert data["kind"] == "graduate"
    assert data["name"] == "Diana"
    assert data["thesis_title"] == "Machine Learning in Healthcare"
    assert data["advisor"] == "Dr. Johnson"
    assert data["is_doctoral"] is True


def test_graduate_from_dict(sample_graduate):
    graduate = GraduateRecord.from_dict(sample_graduate.to_dict())

    assert graduate == sample_graduate


def test_graduate_to_str(sample_masters_graduate):
    assert str(sample_masters_graduate) == (
        "GRADUATE: name: Evan, age: 24, gpa: 3.60, degree: Master's, "
        "thesis: Graph Databases, advisor: Dr. Smith"
    )
