# tests/test_roster.py

import pytest

from models.roster import Roster
from models.student_record import GraduateRecord, StudentRecord


def names(records):
    return [r.name for r in records]


def test_new_roster_is_empty(empty_roster):
    assert empty_roster.count() == 0
    assert len(empty_roster) == 0
    assert empty_roster.all() == []
    assert not empty_roster.has_unsaved_changes


def test_insert_appends_in_order(sample_roster):
    assert names(sample_roster.all()) == ["Bob", "Alice", "Charlie", "Diana"]
    assert sample_roster.count() == 4
    assert sample_roster.has_unsaved_changes


def test_insert_allows_duplicates(empty_roster):
    empty_roster.insert(StudentRecord("Alice", 20, 3.8))
    empty_roster.insert(StudentRecord("Alice", 20, 3.8))

    assert empty_roster.count() == 2


# --- lookups ---


def test_find_by_name_ignores_case(sample_roster):
    record = sample_roster.find_by_name("aLiCe")

    assert record is not None
    assert record.name == "Alice"


def test_find_by_name_returns_first_match(empty_roster):
    first = StudentRecord("Sam", 20, 3.0)
    second = StudentRecord("sam", 22, 3.9)
    empty_roster.insert(first)
    empty_roster.insert(second)

    assert empty_roster.find_by_name("SAM") is first


def test_find_by_name_requires_whole_name(sample_roster):
    assert sample_roster.find_by_name("Ali") is None
    assert sample_roster.find_by_name("Zed") is None


def test_find_returns_graduate_variant(sample_roster):
    record = sample_roster.find_by_name("diana")

    assert isinstance(record, GraduateRecord)
    assert record.degree_type == "PhD"


# --- removal ---


def test_remove_all_matches(empty_roster):
    empty_roster.insert(StudentRecord("Sam", 20, 3.0))
    empty_roster.insert(StudentRecord("Alice", 20, 3.8))
    empty_roster.insert(StudentRecord("SAM", 22, 3.9))
    empty_roster.mark_clean()

    assert empty_roster.remove("sam")
    assert names(empty_roster.all()) == ["Alice"]
    assert empty_roster.has_unsaved_changes


def test_remove_missing_name(sample_roster):
    sample_roster.mark_clean()

    assert not sample_roster.remove("Zed")
    assert sample_roster.count() == 4
    assert not sample_roster.has_unsaved_changes


# --- queries ---


def test_honor_roll_members_are_polymorphic(empty_roster):
    empty_roster.insert(StudentRecord("Undergrad", 20, 3.6))
    empty_roster.insert(GraduateRecord("Grad", 25, 3.6, "Thesis", "Advisor", False))
    empty_roster.insert(GraduateRecord("Star", 25, 3.9, "Thesis", "Advisor", True))
    empty_roster.insert(StudentRecord("Low", 20, 2.0))

    assert names(empty_roster.honor_roll_members()) == ["Undergrad", "Star"]


def test_group_by_honor_roll(sample_roster):
    groups = sample_roster.group_by_honor_roll()

    assert names(groups[True]) == ["Alice", "Charlie", "Diana"]
    assert names(groups[False]) == ["Bob"]


def test_average_gpa(sample_roster):
    assert sample_roster.average_gpa() == pytest.approx((3.2 + 3.8 + 3.9 + 3.85) / 4)


def test_average_gpa_empty(empty_roster):
    assert empty_roster.average_gpa() == 0.0


def test_gpa_statistics(sample_roster):
    stats = sample_roster.gpa_statistics()

    assert stats.min == 3.2
    assert stats.max == 3.9
    assert stats.median == pytest.approx(3.825)


def test_ranked_by_gpa():
    roster = Roster()
    roster.insert(StudentRecord("Bob", 21, 3.2))
    roster.insert(StudentRecord("Alice", 20, 3.8))
    roster.insert(StudentRecord("Charlie", 19, 3.9))

    assert names(roster.ranked_by_gpa()) == ["Charlie", "Alice", "Bob"]


def test_ranked_by_gpa_breaks_ties_by_name():
    roster = Roster()
    roster.insert(StudentRecord("Dave", 22, 3.8))
    roster.insert(StudentRecord("Bob", 21, 3.2))
    roster.insert(StudentRecord("alice", 20, 3.8))

    assert names(roster.ranked_by_gpa()) == ["alice", "Dave", "Bob"]


def test_ranked_by_gpa_does_not_mutate_roster(sample_roster):
    first = sample_roster.ranked_by_gpa()
    second = sample_roster.ranked_by_gpa()

    assert first == second
    assert first is not second
    assert names(sample_roster.all()) == ["Bob", "Alice", "Charlie", "Diana"]


# --- snapshots ---


def test_all_returns_independent_copy(sample_roster):
    snapshot = sample_roster.all()
    snapshot.clear()

    assert sample_roster.count() == 4


def test_query_results_are_independent(sample_roster):
    sample_roster.ranked_by_gpa().pop()
    sample_roster.honor_roll_members().clear()
    sample_roster.get_records(lambda x: True).reverse()

    assert names(sample_roster.all()) == ["Bob", "Alice", "Charlie", "Diana"]


def test_replace_all(sample_roster):
    sample_roster.replace_all([StudentRecord("Zoe", 30, 2.5)])

    assert names(sample_roster.all()) == ["Zoe"]
    assert not sample_roster.has_unsaved_changes


def test_replace_all_failure_leaves_roster_unchanged(sample_roster):
    def records():
        yield StudentRecord("Zoe", 30, 2.5)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        sample_roster.replace_all(records())

    assert sample_roster.count() == 4
