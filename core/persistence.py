# core/persistence.py

"""
Saves and restores a `Roster` as a versioned JSON document.

Document layout:

    {
      "schema_version": 1,
      "records": [
        {"kind": "student", "name": ..., "age": ..., "gpa": ...},
        {"kind": "graduate", "name": ..., "age": ..., "gpa": ...,
         "thesis_title": ..., "advisor": ..., "is_doctoral": ...}
      ]
    }

Records are written in roster order, and the "kind" field selects the record class on load,
so a restored graduate keeps its graduate honor roll threshold.

Failures raise subclasses of `PersistenceError`:
- `RecordNotFoundError` if the save file does not exist.
- `DeserializationError` if the content is not valid JSON or does not match the layout above.
- `PersistenceError` for any other OS-level failure.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.errors import (
    DeserializationError,
    PersistenceError,
    RecordNotFoundError,
    ValidationError,
)
from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord
from models.types import RecordKind

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

RECORD_TYPES: dict[RecordKind, type[StudentRecord]] = {
    RecordKind.STUDENT: StudentRecord,
    RecordKind.GRADUATE: GraduateRecord,
}


# === schema ===


def dump_roster(roster: Roster) -> dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "records": [record.to_dict() for record in roster.all()],
    }


def load_roster(payload: Any) -> Roster:
    """
    Builds a new `Roster` from a deserialized JSON document.

    Args:
        payload (Any): The decoded document, expected to match the module-level layout.

    Returns:
        Roster: A roster holding the decoded records in document order, with no unsaved changes.

    Raises:
        DeserializationError: If the document shape, schema version, record kind, or any field is invalid.

    Notes:
        - This method fails fast: the first bad record aborts the whole load.
    """
    if not isinstance(payload, dict):
        raise DeserializationError("Roster data must be a JSON object.")

    version = payload.get("schema_version")
    if version != SCHEMA_VERSION:
        raise DeserializationError(f"Unsupported schema version: {version!r}.")

    raw_records = payload.get("records")
    if not isinstance(raw_records, list):
        raise DeserializationError("Roster data must contain a list of records.")

    roster = Roster()
    roster.replace_all(_decode_record(data) for data in raw_records)

    return roster


def _decode_record(data: Any) -> StudentRecord:
    if not isinstance(data, dict):
        raise DeserializationError(f"Each record must be a JSON object: {data!r}")

    try:
        record_cls = RECORD_TYPES[RecordKind(data.get("kind"))]

    except ValueError:
        raise DeserializationError(f"Unrecognized record kind: {data.get('kind')!r}")

    try:
        return record_cls.from_dict(data)

    except KeyError as e:
        raise DeserializationError(f"Missing required field {e} in record: {data!r}")

    except (ValidationError, TypeError) as e:
        raise DeserializationError(f"Invalid record {data!r}: {e}")


# === blob level ===


def save(roster: Roster) -> str:
    return json.dumps(dump_roster(roster), indent=2, sort_keys=True)


def load(blob: str) -> Roster:
    try:
        payload = json.loads(blob)

    except (json.JSONDecodeError, RecursionError) as e:
        raise DeserializationError(f"Failed to parse JSON data: {e}")

    return load_roster(payload)


# === file level ===


def save_to_file(roster: Roster, path: str) -> None:
    """
    Serializes the roster and writes it to `path`, creating parent directories as needed.

    Raises:
        PersistenceError: If the file cannot be written.

    Notes:
        - This intentionally overwrites existing data.
        - Clears the roster's unsaved changes marker on success.
    """
    blob = save(roster)

    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(blob)

    except OSError as e:
        raise PersistenceError(f"Failed to write data to disk: {e}")

    roster.mark_clean()

    logger.debug("Saved %d record(s) to %s", roster.count(), path)


def load_from_file(path: str) -> Roster:
    """
    Reads a saved roster from `path`.

    Raises:
        RecordNotFoundError: If no file exists at `path`.
        DeserializationError: If the file content is malformed.
        PersistenceError: If the file exists but cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            blob = f.read()

    except FileNotFoundError:
        raise RecordNotFoundError(f"No saved roster found at {path}.")

    except UnicodeDecodeError as e:
        logger.warning("Rejected malformed roster file %s: %s", path, e)
        raise DeserializationError(f"Roster file is not valid UTF-8 text: {e}")

    except OSError as e:
        raise PersistenceError(f"Failed to read data from disk: {e}")

    try:
        roster = load(blob)

    except DeserializationError as e:
        logger.warning("Rejected malformed roster file %s: %s", path, e)
        raise

    logger.debug("Loaded %d record(s) from %s", roster.count(), path)

    return roster


def load_into(roster: Roster, path: str) -> None:
    """
    Replaces the contents of an existing roster with the roster saved at `path`.

    The saved file is fully decoded before the swap; on any error the roster is left untouched.
    """
    loaded = load_from_file(path)
    roster.replace_all(loaded.all())
