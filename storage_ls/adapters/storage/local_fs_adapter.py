"""
Local file system adapter implementation of the storage backend port.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from storage_ls.entities.entry import Entry, EntryKind, join_path, normalize_path
from storage_ls.exceptions import (
    BackendListingError,
    MetadataFetchError,
    PathNotFoundError,
)
from storage_ls.ports.storage.storage_backend_port import StorageBackendPort


class LocalFileSystemAdapter(StorageBackendPort):
    """Local file system implementation of the storage backend port.

    Entries are listed in name order. With ``eager_metadata`` disabled the
    adapter behaves like a remote driver whose listing call only returns
    names and types, leaving sizes and timestamps to follow-up calls.
    """

    supports_directory_metadata = False

    def __init__(
        self,
        root: str,
        eager_metadata: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            root: Directory on the local machine that acts as the disk root
            eager_metadata: Whether listings stat every entry up front
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.root = os.path.abspath(os.path.expanduser(root))
        self.supports_eager_metadata = eager_metadata
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _os_path(self, path: str) -> str:
        """
        Map a disk path onto the local file system.

        Raises:
            PathNotFoundError: If the path escapes the disk root
        """
        relative = normalize_path(path).lstrip("/")
        target = os.path.abspath(os.path.join(self.root, relative))
        if os.path.commonpath([self.root, target]) != self.root:
            raise PathNotFoundError(f"Path is outside of the disk root: {path}")
        return target

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            PathNotFoundError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise PathNotFoundError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise PathNotFoundError(f"Path is not a directory: {directory}")

    def _create_entry(self, directory: str, item: os.DirEntry) -> Entry:
        kind = EntryKind.DIRECTORY if item.is_dir() else EntryKind.FILE
        path = join_path(directory, item.name)
        if not self.supports_eager_metadata:
            return Entry(path=path, kind=kind)

        try:
            st = item.stat()
        except OSError as e:
            # Log the error but keep the entry, it is resolved later
            self._logger.warning(f"Could not stat {path}: {e}")
            return Entry(path=path, kind=kind)

        return Entry(
            path=path,
            kind=kind,
            size=None if kind is EntryKind.DIRECTORY else int(st.st_size),
            modified_at=int(st.st_mtime),
        )

    @override
    def list_entries(self, path: str) -> list[Entry]:
        directory = normalize_path(path)
        try:
            target = self._os_path(directory)
            self._validate_directory(target)

            with os.scandir(target) as it:
                items = sorted(it, key=lambda item: item.name)
            return [self._create_entry(directory, item) for item in items]

        except BackendListingError:
            raise
        except Exception as e:
            raise BackendListingError(f"Failed to list {directory}: {str(e)}")

    @override
    def file_size(self, path: str) -> int:
        try:
            target = self._os_path(path)
            if os.path.isdir(target):
                raise MetadataFetchError(f"No size for directory: {path}")
            return int(os.path.getsize(target))
        except MetadataFetchError:
            raise
        except Exception as e:
            raise MetadataFetchError(f"Cannot get file size of {path}: {e}")

    @override
    def last_modified(self, path: str) -> int:
        try:
            return int(os.path.getmtime(self._os_path(path)))
        except Exception as e:
            raise MetadataFetchError(f"Cannot get modification time of {path}: {e}")
