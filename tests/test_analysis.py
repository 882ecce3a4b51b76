"""Tests for schedule statistics."""

from datetime import date

from app.processing.analysis import analyze_schedule


def test_empty_schedule():
    stats = analyze_schedule([], today=date(2024, 1, 1))

    assert stats.total_entries == 0
    assert stats.date_range is None
    assert stats.average_interval_days is None
    assert stats.entries_by_weekday == {}


def test_statistics(make_entry):
    entries = [
        make_entry("2024-01-20", leader="张三"),  # Saturday
        make_entry("2024-01-06", leader="张三"),  # Saturday
        make_entry("2024-01-13", leader="李四"),  # Saturday
        make_entry("2025-01-04"),  # Saturday
        make_entry("2025-01-08", leader="未指定"),  # Wednesday
    ]

    stats = analyze_schedule(entries, today=date(2024, 6, 1))

    assert stats.total_entries == 5
    assert stats.date_range == "2024-01-06 to 2025-01-08"
    assert stats.entries_by_weekday == {"Wed": 1, "Sat": 4}
    assert stats.entries_by_leader == {"张三": 2, "李四": 1}
    assert stats.entries_by_year == {2024: 3, 2025: 2}
    assert stats.upcoming == 2
    assert stats.upcoming_without_leader == 2
    # 7, 7, 350, 4 days between consecutive sessions
    assert stats.average_interval_days == (7 + 7 + 350 + 4) / 4


def test_session_today_counts_as_upcoming(make_entry):
    entries = [make_entry("2024-06-01"), make_entry("2024-05-25", leader="张三")]

    stats = analyze_schedule(entries, today=date(2024, 6, 1))

    assert stats.upcoming == 1
    assert stats.upcoming_without_leader == 1
