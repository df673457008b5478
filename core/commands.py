# core/commands.py

"""
Command surface for the roster.

Each function maps one shell command onto one core operation and reports the outcome as a `Response`,
so the CLI only has to parse arguments and format results.

Error mapping:
- `ValidationError` -> `ErrorCode.INVALID_FIELD_VALUE` (400)
- lookup misses -> `ErrorCode.NOT_FOUND` (404)
- `RecordNotFoundError` -> `ErrorCode.NOT_FOUND` (404)
- `DeserializationError` -> `ErrorCode.INVALID_INPUT` (400)
- any other `PersistenceError` -> `ErrorCode.INTERNAL_ERROR` (400)
"""

from __future__ import annotations

import logging

import core.grade_calculator as calculator
import core.persistence as persistence
from core.errors import (
    DeserializationError,
    PersistenceError,
    RecordNotFoundError,
    ValidationError,
)
from core.response import ErrorCode, Response
from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord

logger = logging.getLogger(__name__)


# === record commands ===


def add_student(roster: Roster, name: str, age: int, gpa: float) -> Response:
    """
    Validates a new `StudentRecord` and appends it to the roster.

    Args:
        roster (Roster): The active roster.
        name (str): The student name.
        age (int): The student age.
        gpa (float): The student GPA.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the record was created and added.
                - False if any field fails validation.
            - detail (str | None):
                - On success, a confirmation message with the stored name.
                - On failure, a human-readable description of the error.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_FIELD_VALUE` if ValidationError raised.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "record" (StudentRecord): The added record.
                - On failure:
                    - None

    Notes:
        - On failure the roster is not modified.
    """
    try:
        record = StudentRecord(name, age, gpa)

    except ValidationError as e:
        return _validation_failure(e)

    roster.insert(record)

    return Response.succeed(
        detail=f"Added: {record.name}",
        data={
            "record": record,
        },
    )


def add_graduate(
    roster: Roster,
    name: str,
    age: int,
    gpa: float,
    thesis_title: str,
    advisor: str,
    is_doctoral: bool,
) -> Response:
    """
    Validates a new `GraduateRecord` and appends it to the roster.

    Follows the same contract as `add_student()`; thesis title and advisor are validated as well.
    """
    try:
        record = GraduateRecord(name, age, gpa, thesis_title, advisor, is_doctoral)

    except ValidationError as e:
        return _validation_failure(e)

    roster.insert(record)

    return Response.succeed(
        detail=f"Added graduate student: {record.name}",
        data={
            "record": record,
        },
    )


def list_students(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "records": roster.all(),
        },
    )


def find_student(roster: Roster, name: str) -> Response:
    """
    Looks up the first record whose name matches, ignoring case.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if a record was found.
                - False if no record matches.
            - error (ErrorCode | str | None):
                - `ErrorCode.NOT_FOUND` if no record matches.
            - status_code (int | None):
                - 200 on success
                - 404 if no record matches
            - data (dict): Payload with the following keys:
                - On success:
                    - "record" (StudentRecord): The matched record.

    Notes:
        - This method is read-only and does not raise.
    """
    record = roster.find_by_name(name)

    if record is None:
        return _not_found(name)

    return Response.succeed(
        data={
            "record": record,
        },
    )


def list_honor_roll(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "records": roster.honor_roll_members(),
        },
    )


def average_gpa(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "average": roster.average_gpa(),
        },
    )


def sort_by_gpa(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "records": roster.ranked_by_gpa(),
        },
    )


def remove_student(roster: Roster, name: str) -> Response:
    """
    Removes every record whose name matches, ignoring case.

    Returns:
        Response: `success` is True with detail "Removed: <name>" if anything was removed,
        otherwise a `ErrorCode.NOT_FOUND` failure with status code 404.
    """
    if not roster.remove(name):
        return _not_found(name)

    return Response.succeed(detail=f"Removed: {name}")


def count_students(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "count": roster.count(),
        },
    )


def grade_detail(roster: Roster, name: str) -> Response:
    """
    Collects the derived classifications of the record with the given name.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if a record was found.
                - False if no record matches.
            - error (ErrorCode | str | None):
                - `ErrorCode.NOT_FOUND` if no record matches.
            - status_code (int | None):
                - 200 on success
                - 404 if no record matches
            - data (dict): Payload with the following keys:
                - On success:
                    - "record" (StudentRecord): The matched record.
                    - "gpa" (float): The record GPA.
                    - "letter_grade" (str): Letter grade on the GPA scale.
                    - "is_passing" (bool): Whether the GPA is at least 2.0.
                    - "is_honor_roll" (bool): Whether the record meets the honor roll threshold for its kind.
                    - "academic_standing" (str): The standing label.
    """
    record = roster.find_by_name(name)

    if record is None:
        return _not_found(name)

    return Response.succeed(
        data={
            "record": record,
            "gpa": record.gpa,
            "letter_grade": record.letter_grade,
            "is_passing": record.is_passing,
            "is_honor_roll": record.is_honor_roll,
            "academic_standing": record.academic_standing.value,
        },
    )


def gpa_statistics(roster: Roster) -> Response:
    return Response.succeed(
        data={
            "statistics": roster.gpa_statistics(),
        },
    )


# === calculator commands ===


def calc_letter(percentage: float) -> Response:
    try:
        letter = calculator.percentage_to_letter(percentage)

    except ValidationError as e:
        return _validation_failure(e)

    return Response.succeed(
        data={
            "percentage": percentage,
            "letter": letter,
        },
    )


def calc_gpa(letter: str) -> Response:
    try:
        points = calculator.letter_to_gpa_points(letter)

    except ValidationError as e:
        return _validation_failure(e)

    return Response.succeed(
        data={
            "letter": letter,
            "points": points,
        },
    )


def calc_required(
    current_gpa: float,
    current_credits: int,
    target_gpa: float,
    remaining_credits: int,
) -> Response:
    """
    Calculates the GPA needed over the remaining credits to reach a target GPA.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the inputs were valid.
                - False if a credit count or GPA is out of range.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_FIELD_VALUE` if ValidationError raised.
            - data (dict): Payload with the following keys:
                - On success:
                    - "required_gpa" (float): The unclamped required GPA.
                    - "target_gpa" (float): The requested target.
                    - "remaining_credits" (int): The remaining credits.
                    - "is_reachable" (bool): False if the required GPA exceeds 4.0.

    Notes:
        - A negative "required_gpa" means the target is met even with 0.0 in the remaining credits.
    """
    try:
        required = calculator.required_future_gpa(
            current_gpa, current_credits, target_gpa, remaining_credits
        )
        is_reachable = calculator.can_reach_target(
            current_gpa, current_credits, remaining_credits, target_gpa
        )

    except ValidationError as e:
        return _validation_failure(e)

    return Response.succeed(
        data={
            "required_gpa": required,
            "target_gpa": target_gpa,
            "remaining_credits": remaining_credits,
            "is_reachable": is_reachable,
        },
    )


# === persistence commands ===


def save_roster(roster: Roster, path: str) -> Response:
    """
    Writes the roster to `path`.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the roster was written to disk.
                - False if the write failed.
            - detail (str | None):
                - On success, "Saved to: <path>".
                - On failure, a description of the error.
            - error (ErrorCode | str | None):
                - `ErrorCode.INTERNAL_ERROR` if PersistenceError raised.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
    """
    try:
        persistence.save_to_file(roster, path)

    except PersistenceError as e:
        logger.warning("Save to %s failed: %s", path, e)

        return Response.fail(
            detail=f"Error saving: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    else:
        return Response.succeed(detail=f"Saved to: {path}")


def load_roster(roster: Roster, path: str) -> Response:
    """
    Replaces the roster contents with the roster saved at `path`.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the saved roster was loaded.
                - False if the file is missing, malformed, or unreadable.
            - detail (str | None):
                - On success, "Loaded from: <path>".
                - On failure, a description of the error.
            - error (ErrorCode | str | None):
                - `ErrorCode.NOT_FOUND` if RecordNotFoundError raised.
                - `ErrorCode.INVALID_INPUT` if DeserializationError raised.
                - `ErrorCode.INTERNAL_ERROR` for other PersistenceErrors.
            - status_code (int | None):
                - 200 on success
                - 404 if the file is missing
                - 400 for other failures
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "count" (int): The number of records loaded.

    Notes:
        - On failure the roster is not modified.
    """
    try:
        persistence.load_into(roster, path)

    except RecordNotFoundError as e:
        return Response.fail(
            detail=f"Error loading: {e}",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    except DeserializationError as e:
        return Response.fail(
            detail=f"Error loading: {e}",
            error=ErrorCode.INVALID_INPUT,
        )

    except PersistenceError as e:
        return Response.fail(
            detail=f"Error loading: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    else:
        return Response.succeed(
            detail=f"Loaded from: {path}",
            data={
                "count": roster.count(),
            },
        )


# === helper methods ===


def _validation_failure(error: ValidationError) -> Response:
    return Response.fail(
        detail=f"Invalid field value: {error}",
        error=ErrorCode.INVALID_FIELD_VALUE,
    )


def _not_found(name: str) -> Response:
    return Response.fail(
        detail=f"Student not found: {name}",
        error=ErrorCode.NOT_FOUND,
        status_code=404,
    )
