"""One-directional merges between the local and remote schedules."""

import logging

from app.models.diff import DiffResult
from app.models.schedule import Schedule, ScheduleEntry
from app.models.sync import SyncReport, SyncResult
from app.processing.reconciler import diff
from app.remote.base import RemoteScheduleStore
from app.storage.schedule_store import LocalScheduleStore

logger = logging.getLogger(__name__)


class Synchronizer:
    """Applies a merge chosen by the caller.

    Remote calls run one at a time. A failing entry is recorded in the
    report and the batch continues; nothing is retried or rolled back.
    """

    def __init__(self, local_store: LocalScheduleStore, remote_store: RemoteScheduleStore):
        self.local_store = local_store
        self.remote_store = remote_store

    def compute_diff(self) -> DiffResult:
        """Load both stores and diff them."""
        return diff(self.local_store.entries(), self.remote_store.query())

    def push_local_to_remote(
        self, diff_result: DiffResult, refresh_local: bool = False
    ) -> SyncReport:
        """Create local-only entries remotely and overwrite conflicting ones.

        Conflicts only overwrite leaderName and hostName on the remote page.

        Args:
            diff_result: Output of diff(local, remote)
            refresh_local: Re-fetch the remote store afterwards and overwrite
                the local file with it

        Returns:
            SyncReport with one result per attempted entry
        """
        report = SyncReport()

        for entry in diff_result.local_only:
            report.results.append(self._create(entry))

        for conflict in diff_result.conflicts:
            page_id = conflict.remote.page_id
            if not page_id:
                logger.error(f"Remote entry for {conflict.date} has no page id, skipping")
                report.results.append(
                    SyncResult(
                        date=conflict.date,
                        status="error",
                        message="remote entry has no page id",
                    )
                )
                continue
            fields = {
                "leader_name": conflict.local.leader_name,
                "host_name": conflict.local.host_name,
            }
            report.results.append(self._update(conflict.date, page_id, fields))

        logger.info(
            f"Push finished: {report.created} created, {report.updated} updated, "
            f"{report.failed} failed"
        )

        if refresh_local:
            self.pull_remote_to_local()
            report.refreshed_local = True

        return report

    def pull_remote_to_local(self) -> Schedule:
        """Overwrite the local file with the full remote schedule.

        Local entries missing remotely are dropped. Callers must confirm
        with the user before calling this.
        """
        entries = self.remote_store.query(direction="descending")
        schedule = self.local_store.save(entries)
        logger.info(f"Pulled {len(entries)} entries from remote into {self.local_store.path}")
        return schedule

    def upsert_all(self) -> SyncReport:
        """Write every local entry to the remote store.

        Entries whose date already exists remotely are updated in full,
        the rest are created.
        """
        report = SyncReport()
        page_ids = self.remote_store.page_ids_by_date()

        for entry in self.local_store.entries():
            page_id = page_ids.get(entry.date)
            if page_id:
                fields = {
                    "book_name": entry.book_name,
                    "date": entry.date,
                    "leader_name": entry.leader_name,
                    "host_name": entry.host_name,
                }
                report.results.append(self._update(entry.date, page_id, fields))
            else:
                report.results.append(self._create(entry))

        logger.info(
            f"Upsert finished: {report.created} created, {report.updated} updated, "
            f"{report.failed} failed"
        )
        return report

    def _create(self, entry: ScheduleEntry) -> SyncResult:
        try:
            page_id = self.remote_store.create(entry)
        except Exception as e:
            logger.error(f"Failed to create remote entry for {entry.date}: {e}")
            return SyncResult(date=entry.date, status="error", message=str(e))
        return SyncResult(date=entry.date, status="created", page_id=page_id)

    def _update(self, date: str, page_id: str, fields: dict) -> SyncResult:
        try:
            self.remote_store.update(page_id, fields)
        except Exception as e:
            logger.error(f"Failed to update remote entry for {date}: {e}")
            return SyncResult(date=date, status="error", page_id=page_id, message=str(e))
        return SyncResult(date=date, status="updated", page_id=page_id)
