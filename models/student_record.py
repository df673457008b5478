# models/student_record.py

"""
Represents a student tracked by the roster, and the graduate variant of a student.

A `StudentRecord` stores a name, an age, and a GPA. A `GraduateRecord` is a `StudentRecord`
that additionally carries a thesis title, an advisor, and whether the degree is doctoral.

Includes functionality for:
- Validating and normalizing every field, both on construction and through property setters
- Deriving academic classifications (letter grade, passing, honor roll, standing)
- Value-based equality and a natural order (GPA descending, then name ascending)
- Serializing to and from JSON-compatible dictionaries

Every setter validates before assigning, so a rejected value leaves the record unchanged.
The honor roll threshold is chosen by `kind`, not by overriding a method; see `models.classification`.
"""

from __future__ import annotations

import math
from typing import Any

import models.classification as classification
from core.errors import ValidationError
from models.classification import AcademicStanding
from models.types import RecordKind

MIN_AGE = 1
MAX_AGE = 150
MIN_GPA = 0.0
MAX_GPA = 4.0


class StudentRecord:

    def __init__(self, name: str, age: int, gpa: float):
        self._name: str = StudentRecord.validate_name_input(name)
        self._age: int = StudentRecord.validate_age_input(age)
        self._gpa: float = StudentRecord.validate_gpa_input(gpa)

    # === properties ===

    @property
    def kind(self) -> RecordKind:
        return RecordKind.STUDENT

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = StudentRecord.validate_name_input(name)

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, age: int) -> None:
        self._age = StudentRecord.validate_age_input(age)

    @property
    def gpa(self) -> float:
        return self._gpa

    @gpa.setter
    def gpa(self, gpa: float) -> None:
        self._gpa = StudentRecord.validate_gpa_input(gpa)

    # --- derived classifications ---

    @property
    def letter_grade(self) -> str:
        return classification.letter_grade(self._gpa)

    @property
    def is_passing(self) -> bool:
        return classification.is_passing(self)

    @property
    def is_honor_roll(self) -> bool:
        return classification.is_honor_roll(self)

    @property
    def academic_standing(self) -> AcademicStanding:
        return classification.academic_standing(self)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self._name,
            "age": self._age,
            "gpa": self._gpa,
        }

    @classmethod
    def from_dict(cls, data: dict) -> StudentRecord:
        return cls(
            name=data["name"],
            age=data["age"],
            gpa=data["gpa"],
        )

    # === dunder methods ===

    def _identity(self) -> tuple:
        return (self._name, self._age, self._gpa)

    def sort_key(self) -> tuple[float, str]:
        return (-self._gpa, self._name.lower())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"StudentRecord({self._name!r}, {self._age}, {self._gpa})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, age: {self._age}, gpa: {self._gpa:.2f}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        """
        Validates and normalizes a student name.

        Args:
            name (Any): The input value to validate.

        Returns:
            The name with leading and trailing whitespace removed.

        Raises:
            ValidationError: If the input is not a string or is empty after stripping.
        """
        return StudentRecord.validate_text_input(name, "Name")

    @staticmethod
    def validate_age_input(age: Any) -> int:
        """
        Validates a student age.

        Args:
            age (Any): The input value to validate.

        Returns:
            The age as an int.

        Raises:
            ValidationError: If the input is not an integer or is outside 1 to 150, inclusive.
        """
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValidationError("Age must be a whole number.")

        if age < MIN_AGE or age > MAX_AGE:
            raise ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}.")

        return age

    @staticmethod
    def validate_gpa_input(gpa: Any) -> float:
        """
        Validates and normalizes a GPA.

        Ensures the value:
            - Is a real number (bools are rejected).
            - Is finite.
            - Is between 0.0 and 4.0, inclusive.

        Args:
            gpa (Any): The input value to validate.

        Returns:
            The GPA as a float.

        Raises:
            ValidationError: If the input is not numeric, non-finite, or out of bounds.
        """
        if isinstance(gpa, bool) or not isinstance(gpa, (int, float)):
            raise ValidationError("GPA must be a number.")

        gpa = float(gpa)

        if not math.isfinite(gpa):
            raise ValidationError("GPA must be a finite number.")

        if gpa < MIN_GPA or gpa > MAX_GPA:
            raise ValidationError(f"GPA must be between {MIN_GPA} and {MAX_GPA}.")

        return gpa

    @staticmethod
    def validate_text_input(value: Any, label: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{label} cannot be empty.")
        return value.strip()


class GraduateRecord(StudentRecord):

    def __init__(
        self,
        name: str,
        age: int,
        gpa: float,
        thesis_title: str,
        advisor: str,
        is_doctoral: bool = False,
    ):
        super().__init__(name, age, gpa)
        self._thesis_title: str = StudentRecord.validate_text_input(
            thesis_title, "Thesis title"
        )
        self._advisor: str = StudentRecord.validate_text_input(advisor, "Advisor")
        self._is_doctoral: bool = GraduateRecord.validate_doctoral_input(is_doctoral)

    # === properties ===

    @property
    def kind(self) -> RecordKind:
        return RecordKind.GRADUATE

    @property
    def thesis_title(self) -> str:
        return self._thesis_title

    @thesis_title.setter
    def thesis_title(self, thesis_title: str) -> None:
        self._thesis_title = StudentRecord.validate_text_input(
            thesis_title, "Thesis title"
        )

    @property
    def advisor(self) -> str:
        return self._advisor

    @advisor.setter
    def advisor(self, advisor: str) -> None:
        self._advisor = StudentRecord.validate_text_input(advisor, "Advisor")

    @property
    def is_doctoral(self) -> bool:
        return self._is_doctoral

    @is_doctoral.setter
    def is_doctoral(self, is_doctoral: bool) -> None:
        self._is_doctoral = GraduateRecord.validate_doctoral_input(is_doctoral)

    @property
    def degree_type(self) -> str:
        return "PhD" if self._is_doctoral else "Master's"

    # === persistence and import ===

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "thesis_title": self._thesis_title,
                "advisor": self._advisor,
                "is_doctoral": self._is_doctoral,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict) -> GraduateRecord:
        return cls(
            name=data["name"],
            age=data["age"],
            gpa=data["gpa"],
            thesis_title=data["thesis_title"],
            advisor=data["advisor"],
            is_doctoral=data["is_doctoral"],
        )

    # === dunder methods ===

    def _identity(self) -> tuple:
        return super()._identity() + (
            self._thesis_title,
            self._advisor,
            self._is_doctoral,
        )

    def __repr__(self) -> str:
        return (
            f"GraduateRecord({self.name!r}, {self.age}, {self.gpa}, "
            f"{self._thesis_title!r}, {self._advisor!r}, {self._is_doctoral})"
        )

    def __str__(self) -> str:
        return (
            f"GRADUATE: name: {self.name}, age: {self.age}, gpa: {self.gpa:.2f}, "
            f"degree: {self.degree_type}, thesis: {self._thesis_title}, advisor: {self._advisor}"
        )

    # === data validators ===

    @staticmethod
    def validate_doctoral_input(is_doctoral: Any) -> bool:
        if not isinstance(is_doctoral, bool):
            raise ValidationError("Doctoral flag must be True or False.")
        return is_doctoral
