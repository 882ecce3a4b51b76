"""Tests for schedule validation against the leader roster."""

from app.models.leader import Leader, LeaderRoster
from app.processing.validator import validate_schedule


def _roster():
    return LeaderRoster(
        leaders={
            "张三": Leader(name="张三", is_host=True),
            "李四": Leader(name="李四"),
        }
    )


def test_valid_schedule(make_entry):
    entries = [
        make_entry("2024-01-01", leader="李四", host="张三"),
        make_entry("2024-01-08", leader="张三"),
        make_entry("2024-01-15", leader="未指定"),
    ]

    report = validate_schedule(entries, _roster())

    assert report.is_valid
    assert report.to_dict()["isValid"] is True


def test_unknown_leader(make_entry):
    entry = make_entry("2024-01-01", leader="王五")

    report = validate_schedule([entry], _roster())

    assert report.invalid_leaders == [entry]
    assert not report.is_valid


def test_host_must_be_flagged(make_entry):
    """A known leader without isHost cannot host."""
    entry = make_entry("2024-01-01", leader="张三", host="李四")

    report = validate_schedule([entry], _roster())

    assert report.invalid_hosts == [entry]
    assert report.invalid_leaders == []


def test_duplicate_dates_grouped(make_entry):
    first = make_entry("2024-02-02", book="A")
    second = make_entry("2024-02-02", book="B")

    report = validate_schedule([first, second, make_entry("2024-02-09")], _roster())

    assert report.duplicate_dates == {"2024-02-02": [first, second]}
    assert report.is_valid is False
    assert report.to_dict()["isValid"] is False


def test_validation_does_not_mutate(make_entry):
    entries = [make_entry("2024-01-01", leader="王五")]
    before = [e.model_copy() for e in entries]

    validate_schedule(entries, _roster())

    assert entries == before
