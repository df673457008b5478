# tests/test_persistence.py

import json
import os

import pytest

import core.persistence as persistence
from core.errors import DeserializationError, PersistenceError, RecordNotFoundError
from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord


@pytest.fixture
def mixed_roster():
    roster = Roster()
    roster.insert(StudentRecord("Alice", 20, 3.6))
    roster.insert(GraduateRecord("Diana", 26, 3.6, "ML in Healthcare", "Dr. Johnson", True))
    return roster


def test_dump_roster_layout(mixed_roster):
    payload = persistence.dump_roster(mixed_roster)

    assert payload["schema_version"] == persistence.SCHEMA_VERSION
    assert [r["kind"] for r in payload["records"]] == ["student", "graduate"]
    assert payload["records"][1]["advisor"] == "Dr. Johnson"


def test_blob_round_trip(mixed_roster):
    restored = persistence.load(persistence.save(mixed_roster))

    assert restored.all() == mixed_roster.all()
    assert not restored.has_unsaved_changes


def test_round_trip_keeps_variant_behavior(mixed_roster):
    restored = persistence.load(persistence.save(mixed_roster))
    student, graduate = restored.all()

    assert type(student) is StudentRecord
    assert type(graduate) is GraduateRecord
    assert student.is_honor_roll
    assert not graduate.is_honor_roll
    assert graduate.academic_standing == "Good Standing"


def test_file_round_trip(mixed_roster, data_file):
    persistence.save_to_file(mixed_roster, data_file)

    assert os.path.exists(data_file)
    assert not mixed_roster.has_unsaved_changes

    restored = persistence.load_from_file(data_file)

    assert restored.all() == mixed_roster.all()


def test_save_creates_parent_directories(mixed_roster, tmp_path):
    path = str(tmp_path / "nested" / "dir" / "students.json")
    persistence.save_to_file(mixed_roster, path)

    with open(path) as f:
        data = json.load(f)

    assert len(data["records"]) == 2


def test_save_failure_raises_persistence_error(mixed_roster, tmp_path):
    with pytest.raises(PersistenceError):
        persistence.save_to_file(mixed_roster, str(tmp_path))

    assert mixed_roster.has_unsaved_changes


def test_empty_roster_round_trip():
    restored = persistence.load(persistence.save(Roster()))

    assert restored.count() == 0


def test_load_missing_file(tmp_path):
    with pytest.raises(RecordNotFoundError):
        persistence.load_from_file(str(tmp_path / "missing.json"))


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        "[]",
        '{"records": []}',
        '{"schema_version": 2, "records": []}',
        '{"schema_version": 1, "records": {}}',
        '{"schema_version": 1, "records": ["Alice"]}',
        '{"schema_version": 1, "records": [{"kind": "alumni", "name": "A", "age": 20, "gpa": 3.0}]}',
        '{"schema_version": 1, "records": [{"name": "A", "age": 20, "gpa": 3.0}]}',
        '{"schema_version": 1, "records": [{"kind": "student", "name": "A", "age": 20}]}',
        '{"schema_version": 1, "records": [{"kind": "student", "name": "A", "age": 200, "gpa": 3.0}]}',
        '{"schema_version": 1, "records": [{"kind": "graduate", "name": "A", "age": 20, "gpa": 3.0}]}',
    ],
)
def test_load_malformed_blob(blob):
    with pytest.raises(DeserializationError):
        persistence.load(blob)


def test_load_malformed_file(data_file):
    with open(data_file, "w") as f:
        f.write("{broken")

    with pytest.raises(DeserializationError):
        persistence.load_from_file(data_file)


def test_load_into_replaces_contents(mixed_roster, sample_roster, data_file):
    persistence.save_to_file(mixed_roster, data_file)
    persistence.load_into(sample_roster, data_file)

    assert sample_roster.all() == mixed_roster.all()
    assert not sample_roster.has_unsaved_changes


def test_failed_load_into_leaves_roster_unchanged(sample_roster, data_file):
    with open(data_file, "w") as f:
        json.dump({"schema_version": 1, "records": [{"kind": "student"}]}, f)

    with pytest.raises(DeserializationError):
        persistence.load_into(sample_roster, data_file)

    assert sample_roster.count() == 4


def test_load_file_with_invalid_utf8(data_file):
    with open(data_file, "wb") as f:
        f.write(b'{"schema_version": 1, "records": [\xff\xfe]}')

    with pytest.raises(DeserializationError):
        persistence.load_from_file(data_file)


def test_load_deeply_nested_blob():
    with pytest.raises(DeserializationError):
        persistence.load("[" * 100000 + "]" * 100000)


def test_file_round_trip_keeps_non_ascii_names(data_file):
    roster = Roster()
    roster.insert(StudentRecord("Zoë Ångström", 22, 3.4))
    persistence.save_to_file(roster, data_file)

    assert persistence.load_from_file(data_file).all() == roster.all()
