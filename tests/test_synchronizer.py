"""Tests for pushing and pulling between local and remote stores."""

import json

from app.processing.reconciler import diff
from app.processing.synchronizer import Synchronizer


def test_push_creates_local_only_entries(local_store, remote_store, make_entry):
    local_store.save([make_entry("2024-01-01", book="A", leader="X")])
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(sync.compute_diff())

    assert report.created == 1
    assert report.failed == 0
    [page] = remote_store.pages.values()
    assert page.book_name == "A"
    assert page.leader_name == "X"


def test_push_overwrites_conflicting_assignments(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-01-01", book="A", leader="Y", host="H")])
    local_store.save([make_entry("2024-01-01", book="A", leader="X", host="H")])
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(sync.compute_diff())

    assert report.updated == 1
    assert remote_store.pages["page-1"].leader_name == "X"
    # Only the assignment fields are sent
    update_call = [c for c in remote_store.calls if c[0] == "update"][0]
    assert set(update_call[2]) == {"leader_name", "host_name"}


def test_push_ignores_remote_only_entries(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-01-01")])
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(sync.compute_diff())

    assert report.results == []
    assert len(remote_store.pages) == 1


def test_push_partial_failure_isolation(local_store, remote_store, make_entry):
    """A failing entry does not stop the rest of the batch."""
    entries = [make_entry(f"2024-01-0{i}") for i in range(1, 6)]
    local_store.save(entries)
    remote_store.fail_dates.add("2024-01-03")
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(diff(entries, []))

    attempted = [c[1] for c in remote_store.calls if c[0] == "create"]
    assert attempted == [e.date for e in entries]
    assert report.created == 4
    assert report.failed == 1
    assert report.errors[0].date == "2024-01-03"
    assert "create failed" in report.errors[0].message


def test_push_conflict_without_page_id_is_reported(local_store, remote_store, make_entry):
    local = make_entry("2024-01-01", leader="X")
    remote = make_entry("2024-01-01", leader="Y")
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(diff([local], [remote]))

    assert report.failed == 1
    assert "page id" in report.results[0].message


def test_push_with_refresh_overwrites_local(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-02-01", book="Remote")])
    local_store.save([make_entry("2024-01-01", book="Local")])
    sync = Synchronizer(local_store, remote_store)

    report = sync.push_local_to_remote(sync.compute_diff(), refresh_local=True)

    assert report.refreshed_local
    assert [e.date for e in local_store.entries()] == ["2024-02-01", "2024-01-01"]


def test_pull_overwrites_local(local_store, remote_store, make_entry):
    local_store.save([make_entry("2023-12-01", book="Local only")])
    remote_store.seed([make_entry("2024-01-01"), make_entry("2024-02-01")])
    sync = Synchronizer(local_store, remote_store)

    schedule = sync.pull_remote_to_local()

    assert [e.date for e in schedule.schedule] == ["2024-02-01", "2024-01-01"]
    assert [e.date for e in local_store.entries()] == ["2024-02-01", "2024-01-01"]
    assert ("query", "descending") in remote_store.calls


def test_pull_is_idempotent(local_store, remote_store, make_entry):
    remote_store.seed(
        [make_entry("2024-01-01", leader="X"), make_entry("2024-02-01", host="H")]
    )
    sync = Synchronizer(local_store, remote_store)

    def file_without_timestamp():
        data = json.loads(local_store.path.read_text(encoding="utf-8"))
        data.pop("lastUpdated")
        return data

    sync.pull_remote_to_local()
    first = file_without_timestamp()
    sync.pull_remote_to_local()
    second = file_without_timestamp()

    assert first == second


def test_pulled_file_has_no_page_ids(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-01-01")])

    Synchronizer(local_store, remote_store).pull_remote_to_local()

    assert "page" not in local_store.path.read_text(encoding="utf-8")


def test_upsert_updates_existing_and_creates_missing(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-01-01", book="Old title", leader="Y")])
    local_store.save(
        [
            make_entry("2024-01-01", book="New title", leader="X"),
            make_entry("2024-01-08", book="Brand new"),
        ]
    )
    sync = Synchronizer(local_store, remote_store)

    report = sync.upsert_all()

    assert (report.created, report.updated, report.failed) == (1, 1, 0)
    assert remote_store.pages["page-1"].book_name == "New title"
    assert remote_store.pages["page-1"].leader_name == "X"
    assert len(remote_store.pages) == 2


def test_upsert_records_failures(local_store, remote_store, make_entry):
    remote_store.seed([make_entry("2024-01-01")])
    remote_store.fail_dates.add("2024-01-01")
    local_store.save([make_entry("2024-01-01", leader="X"), make_entry("2024-01-08")])

    report = Synchronizer(local_store, remote_store).upsert_all()

    assert report.failed == 1
    assert report.created == 1


def test_upsert_updates_untitled_remote_page(local_store, remote_store, make_entry):
    page_id = remote_store.seed_untitled("2024-01-01")
    local_store.save([make_entry("2024-01-01", book="第3期 Named", leader="X")])

    report = Synchronizer(local_store, remote_store).upsert_all()

    assert (report.created, report.updated) == (0, 1)
    assert list(remote_store.pages) == [page_id]
    assert remote_store.pages[page_id].book_name == "第3期 Named"
