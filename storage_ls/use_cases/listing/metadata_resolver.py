"""
Reconciles the metadata a backend listing reported with what a long listing needs.
"""

import logging
from typing import Callable, Optional

from storage_ls.entities.entry import Entry
from storage_ls.entities.record import Record
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort


class MetadataResolver:
    """
    Turns raw entries into records, fetching missing size and timestamp on demand.

    Policy:

    - values the listing already supplied are used as-is, zero included;
    - short listings never trigger follow-up calls;
    - backends declaring eager metadata are never asked twice, an absent
      value from them is unavailable;
    - directories are only queried when the backend declares it can answer;
    - a failing follow-up call leaves the value unavailable and is logged,
      it never aborts the listing.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def resolve(
        self, entry: Entry, backend: StorageBackendPort, long_format: bool
    ) -> Record:
        """
        Resolve the metadata of an entry.

        Args:
            entry: Entry as reported by the listing call
            backend: Backend the entry came from
            long_format: Whether size and timestamp will be displayed

        Returns:
            Record with concrete values or None for unavailable ones
        """
        if not long_format or not self._needs_follow_up(entry, backend):
            return Record.from_entry(entry, entry.size, entry.modified_at)

        size = entry.size
        if size is None:
            size = self._fetch(backend.file_size, entry, "size")

        modified_at = entry.modified_at
        if modified_at is None:
            modified_at = self._fetch(backend.last_modified, entry, "modification time")

        return Record.from_entry(entry, size, modified_at)

    def _needs_follow_up(self, entry: Entry, backend: StorageBackendPort) -> bool:
        if entry.size is not None and entry.modified_at is not None:
            return False
        if backend.supports_eager_metadata:
            return False
        if entry.is_dir and not backend.supports_directory_metadata:
            return False
        return True

    def _fetch(
        self, call: Callable[[str], int], entry: Entry, what: str
    ) -> Optional[int]:
        try:
            return int(call(entry.path))
        except Exception as e:
            # some backends cannot report this for every object
            self._logger.warning(f"Could not get {what} of {entry.path}: {e}")
            return None
