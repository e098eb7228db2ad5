"""
Garbage collection for stored notes.
Deletes note files whose last access is older than the retention window.
"""

import logging
import os
from typing import Iterator, List

from sync_notes.exceptions import StorageError
from sync_notes.models import StoredEntry
from sync_notes.utils.access_time import AccessTimeFn, stat_access_time

logger = logging.getLogger(__name__)


class Collector:
    """Sweeps a note directory it does not otherwise own."""

    def __init__(self, directory: str, access_time: AccessTimeFn = stat_access_time):
        self.directory = directory
        self._access_time = access_time

    def sweep(self, now: float, retention_seconds: float) -> List[str]:
        """
        Delete every entry with ``last_access + retention_seconds < now``.

        An entry exactly at the boundary is kept. Entries that cannot be
        inspected or removed are logged and skipped.

        Returns:
            Names of the deleted entries

        Raises:
            StorageError: if the directory itself cannot be listed
        """
        removed = []
        for entry in self._entries():
            if entry.last_access + retention_seconds >= now:
                continue

            logger.info("Expiring file: %s", entry.name)
            try:
                os.remove(entry.path)
            except FileNotFoundError:
                logger.debug("File %s already gone", entry.name)
                continue
            except OSError as e:
                logger.warning("Error removing file %s: %s", entry.name, e)
                continue
            removed.append(entry.name)

        return removed

    def _entries(self) -> Iterator[StoredEntry]:
        try:
            with os.scandir(self.directory) as it:
                dir_entries = list(it)
        except OSError as e:
            raise StorageError(f"Error reading directory {self.directory}: {e}") from e

        for dir_entry in dir_entries:
            try:
                if dir_entry.is_dir():
                    continue
                last_access = self._access_time(dir_entry.path)
            except OSError as e:
                # Usually a note being written or removed concurrently
                logger.warning("Error reading file %s: %s", dir_entry.name, e)
                continue
            yield StoredEntry(name=dir_entry.name, path=dir_entry.path, last_access=last_access)
