# models/classification.py

"""
Academic classification rules shared by every record kind.

The rules are free functions over anything exposing a `gpa` and a `kind` (see `models.types.Gradeable`).
Only the honor roll threshold varies by kind, and it is resolved through `HONOR_ROLL_THRESHOLDS`
at call time, so a `GraduateRecord` held as a `StudentRecord` still uses the graduate threshold.

Note that `letter_grade()` maps a GPA onto letters. It is a coarser scale than
`core.grade_calculator.percentage_to_letter()` and the two are kept separate on purpose.
"""

from __future__ import annotations

from enum import Enum

from models.types import Gradeable, RecordKind

HONOR_ROLL_THRESHOLDS: dict[RecordKind, float] = {
    RecordKind.STUDENT: 3.5,
    RecordKind.GRADUATE: 3.7,
}

PASSING_GPA = 2.0
PROBATION_GPA = 1.5

# ordered from highest to lowest, first match wins
GPA_LETTER_BREAKPOINTS: list[tuple[float, str]] = [
    (3.7, "A"),
    (3.3, "A-"),
    (3.0, "B+"),
    (2.7, "B"),
    (2.3, "B-"),
    (2.0, "C+"),
    (1.7, "C"),
    (1.3, "C-"),
    (1.0, "D"),
]


class AcademicStanding(str, Enum):
    HONORS = "Honors"
    GOOD_STANDING = "Good Standing"
    ACADEMIC_PROBATION = "Academic Probation"
    ACADEMIC_WARNING = "Academic Warning"


def letter_grade(gpa: float) -> str:
    for threshold, letter in GPA_LETTER_BREAKPOINTS:
        if gpa >= threshold:
            return letter
    return "F"


def honor_roll_threshold(kind: RecordKind) -> float:
    try:
        return HONOR_ROLL_THRESHOLDS[kind]

    except KeyError:
        raise TypeError(f"Unrecognized record kind: {kind}")


def is_honor_roll(record: Gradeable) -> bool:
    return record.gpa >= honor_roll_threshold(record.kind)


def is_passing(record: Gradeable) -> bool:
    return record.gpa >= PASSING_GPA


def academic_standing(record: Gradeable) -> AcademicStanding:
    """
    Classifies a record's academic standing.

    Checked in order:
        - Honors if the record is on the honor roll for its kind.
        - Good Standing if the record is passing.
        - Academic Probation if the GPA is at least 1.5.
        - Academic Warning otherwise.
    """
    if is_honor_roll(record):
        return AcademicStanding.HONORS

    if is_passing(record):
        return AcademicStanding.GOOD_STANDING

    if record.gpa >= PROBATION_GPA:
        return AcademicStanding.ACADEMIC_PROBATION

    return AcademicStanding.ACADEMIC_WARNING
