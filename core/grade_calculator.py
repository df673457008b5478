# core/grade_calculator.py

"""
Stateless grade arithmetic used by the roster and by the calculator commands.

Provides:
- Weighted GPA over per-course grades and credits
- Percentage to letter grade conversion
- Letter grade to GPA point conversion
- The GPA required over remaining credits to reach a target cumulative GPA
- Semester averages and summary statistics (mean, median, min, max)

These functions never touch a `Roster`; callers pass plain numbers and mappings in.
The percentage scale here is finer than the GPA-based scale in `models.classification.letter_grade()`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from core.errors import ValidationError

# ordered from highest to lowest, first match wins
PERCENTAGE_LETTER_BREAKPOINTS: list[tuple[float, str]] = [
    (93.0, "A"),
    (90.0, "A-"),
    (87.0, "B+"),
    (83.0, "B"),
    (80.0, "B-"),
    (77.0, "C+"),
    (73.0, "C"),
    (70.0, "C-"),
    (67.0, "D+"),
    (63.0, "D"),
    (60.0, "D-"),
]

LETTER_GPA_POINTS: dict[str, float] = {
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
}

MIN_GPA = 0.0
MAX_GPA = 4.0


@dataclass(frozen=True)
class GradeStatistics:
    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "mean": self.mean,
            "median": self.median,
            "min": self.min,
            "max": self.max,
        }


# === gpa calculations ===


def weighted_gpa(
    grades_by_course: Mapping[str, float] | None,
    credits_by_course: Mapping[str, float] | None,
) -> float:
    """
    Calculates a credit-weighted GPA.

    Args:
        grades_by_course (Mapping[str, float] | None): Grade points keyed by course name.
        credits_by_course (Mapping[str, float] | None): Credit hours keyed by course name.

    Returns:
        sum(grade * credits) / sum(credits) over courses present in both mappings.
        0.0 if either mapping is empty or None, or if no course appears in both.

    Notes:
        - Courses present in only one mapping are skipped rather than treated as an error.
        - A course whose grade or credits is None is skipped as well.
    """
    if not grades_by_course or not credits_by_course:
        return 0.0

    total_points = 0.0
    total_credits = 0.0

    for course, grade in grades_by_course.items():
        credits = credits_by_course.get(course)

        if grade is None or credits is None:
            continue

        total_points += grade * credits
        total_credits += credits

    return total_points / total_credits if total_credits > 0 else 0.0


def required_future_gpa(
    current_gpa: float,
    current_credits: float,
    target_gpa: float,
    remaining_credits: float,
) -> float:
    """
    Calculates the GPA needed over the remaining credits to reach a target cumulative GPA.

    Args:
        current_gpa (float): The cumulative GPA so far, 0.0 to 4.0.
        current_credits (float): Credits already completed, at least 0.
        target_gpa (float): The desired cumulative GPA, 0.0 to 4.0.
        remaining_credits (float): Credits still to be taken, greater than 0.

    Returns:
        (target_gpa * (current_credits + remaining_credits) - current_gpa * current_credits) / remaining_credits

    Raises:
        ValidationError: If either credit count or either GPA is out of range.

    Notes:
        - The result is not clamped. A value above 4.0 means the target cannot be reached;
          a negative value means the target is already secured. Interpretation is left to the caller.
    """
    if current_credits < 0 or remaining_credits <= 0:
        raise ValidationError(
            "Current credits must be at least 0 and remaining credits must be positive."
        )

    _require_gpa_in_range(current_gpa, "Current GPA")
    _require_gpa_in_range(target_gpa, "Target GPA")

    current_points = current_gpa * current_credits
    target_points = target_gpa * (current_credits + remaining_credits)

    return (target_points - current_points) / remaining_credits


def can_reach_target(
    current_gpa: float,
    current_credits: float,
    remaining_credits: float,
    target_minimum: float,
) -> bool:
    if remaining_credits == 0:
        return current_gpa >= target_minimum

    required = required_future_gpa(
        current_gpa, current_credits, target_minimum, remaining_credits
    )
    return required <= MAX_GPA


# === letter grade conversions ===


def percentage_to_letter(percentage: float) -> str:
    """
    Converts a percentage score into a letter grade.

    Boundaries are inclusive, so 93.0 is an "A" and 92.99 is an "A-".

    Raises:
        ValidationError: If the percentage is not a finite number between 0 and 100.
    """
    if (
        isinstance(percentage, bool)
        or not isinstance(percentage, (int, float))
        or not math.isfinite(percentage)
    ):
        raise ValidationError("Percentage must be a finite number.")

    if percentage < 0 or percentage > 100:
        raise ValidationError("Percentage must be between 0 and 100.")

    for threshold, letter in PERCENTAGE_LETTER_BREAKPOINTS:
        if percentage >= threshold:
            return letter

    return "F"


def letter_to_gpa_points(letter: str) -> float:
    """
    Converts a letter grade into GPA points.

    The lookup ignores case but not whitespace: "a-" is accepted, " A" is not.

    Raises:
        ValidationError: If the letter grade is missing or unrecognized.
    """
    if not isinstance(letter, str):
        raise ValidationError("Letter grade cannot be empty.")

    try:
        return LETTER_GPA_POINTS[letter.upper()]

    except KeyError:
        raise ValidationError(f"Invalid letter grade: '{letter}'.")


# === aggregates ===


def semester_average(grades: Iterable[float] | None) -> float:
    values = list(grades or [])

    if not values:
        return 0.0

    return sum(values) / len(values)


def statistics(values: Iterable[float] | None) -> GradeStatistics:
    """
    Summarizes a sequence of grades.

    Returns:
        GradeStatistics: mean, median, min, and max of the values. All four are 0.0 for empty or None input.

    Notes:
        - The median of an even number of values is the average of the two middle values after sorting.
    """
    ordered = sorted(values or [])

    if not ordered:
        return GradeStatistics()

    size = len(ordered)
    middle = size // 2

    if size % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) / 2.0
    else:
        median = ordered[middle]

    return GradeStatistics(
        mean=sum(ordered) / size,
        median=median,
        min=ordered[0],
        max=ordered[-1],
    )


# === helper methods ===


def _require_gpa_in_range(gpa: float, label: str) -> None:
    if gpa < MIN_GPA or gpa > MAX_GPA:
        raise ValidationError(f"{label} must be between {MIN_GPA} and {MAX_GPA}.")
